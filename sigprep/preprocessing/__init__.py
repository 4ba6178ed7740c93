"""Conditioning of uniformly-sampled scalar time series.

Contents:
    `filters.py`: Zero-phase biquad Butterworth high-pass/low-pass filtering.
    `binning.py`: Fractional-width, zero-aligned bin averaging.
    `interpolation.py`: Fill non-finite gaps before filtering.
    `resample.py`: Oversample by duplication and smoothing.
    `errors.py`: Error kinds and the `Outcome` results returned by kernels.

"""

from .errors import ErrorKind, ConditioningError, Outcome, BinOutcome
from .filters import (butterworth, biquad_coefficients, biquad_pass,
                      edge_replicate_start, zero_phase_pass, DEFAULT_RESONANCE)
from .binning import bin_average, bin_times, fractional_bins
from .interpolation import interpolate_nonfinite
from .resample import expand, oversample
