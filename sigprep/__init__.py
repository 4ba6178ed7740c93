"""Collects commonly-used functions for easier import.

Ex: `from sigprep import butterworth, bin_average`

"""

from sigprep.tools import log
from sigprep.preprocessing import (
    butterworth, bin_average, bin_times, interpolate_nonfinite, oversample,
    ErrorKind, ConditioningError, Outcome, BinOutcome
    )
