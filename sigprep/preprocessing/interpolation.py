import logging

import numpy as np
from scipy import interpolate

from .errors import ConditioningError, ErrorKind
from sigprep.tools.arrays import (
    is_sample_array, describe_array, one_or_more_nonfinite, count_finite
    )

log = logging.getLogger(__name__)


def interpolate_nonfinite(data):
    """Replace NaN and Inf values in `data` by linear interpolation, in place.

    Runs of non-finite values before the first (or after the last) finite
    value are filled with that value.

    Parameters
    ----------
    data : np.ndarray.
        1-D float32 or float64 array.

    Returns
    -------
    n_replaced : int
        Number of values that were replaced.

    Raises
    ------
    ConditioningError
        If `data` is not a float array, or contains no finite values.

    """
    name = 'interpolate_nonfinite'
    if not is_sample_array(data):
        raise ConditioningError(
            ErrorKind.INVALID_ARRAY,
            f'data must be a writeable 1-D float32 or float64 array, '
            f'got {describe_array(data)}', name
            )
    if data.size == 0 or not one_or_more_nonfinite(data):
        return 0

    n_good = count_finite(data)
    if n_good == 0:
        raise ConditioningError(
            ErrorKind.NO_VALID_DATA,
            f'input of {data.size} samples contains no valid numbers', name
            )

    good = np.isfinite(data)
    bad = ~good
    indices = np.arange(data.size)
    if n_good == 1:
        data[bad] = data[good][0]
    else:
        good_values = data[good].astype(np.float64)
        f = interpolate.interp1d(
            indices[good], good_values, kind='linear', bounds_error=False,
            fill_value=(good_values[0], good_values[-1]), assume_sorted=True
            )
        data[bad] = f(indices[bad])

    n_replaced = int(bad.sum())
    log.info(f'Interpolated {n_replaced} of {data.size} samples.')
    return n_replaced
