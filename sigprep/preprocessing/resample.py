"""Resample a signal to a higher rate, duplicating points and smoothing."""

import logging

import numpy as np

from .errors import ConditioningError, ErrorKind
from .filters import butterworth, DEFAULT_RESONANCE
from .interpolation import interpolate_nonfinite
from sigprep.tools.arrays import one_or_more_nonfinite

log = logging.getLogger(__name__)

# Automatic high-cut is sample_rate / divisor. Without expansion the cut must
# sit just below Nyquist.
AUTO_HIGH_DIVISOR = 2.0
AUTO_HIGH_DIVISOR_NO_EXPAND = 2.1


def expand(data, multiplier):
    """Expand `data` to `int(len(data)*multiplier)` points by duplication.

    Parameters
    ----------
    data : np.ndarray.
        1-D array.
    multiplier : float.
        Must be >= 1. Can be fractional, in which case samples are duplicated
        unevenly.

    Returns
    -------
    np.ndarray
        New array with the same dtype as `data`.

    """
    if not multiplier >= 1.0:
        raise ConditioningError(
            ErrorKind.MULTIPLIER,
            f'multiplier ({multiplier:g}) must be >=1', 'expand'
            )
    data = np.asarray(data)
    n_out = int(data.shape[0] * multiplier)
    source_index = (np.arange(n_out) / multiplier).astype(np.int64)
    # Guard against rounding up past the end for fractional multipliers.
    source_index = np.minimum(source_index, data.shape[0] - 1)
    return data[source_index]


def oversample(data, sample_rate, multiplier=4.0, low=0.0, high=-1.0,
               resonance=DEFAULT_RESONANCE):
    """Resample `data` at `multiplier` times the rate, then smooth.

    Points are added by duplication and the result is passed through a
    zero-phase Butterworth filter at the new sample rate. Non-finite input
    values are interpolated first.

    Parameters
    ----------
    data : array-like.
        1-D signal. Not modified, a float32 copy is conditioned.
    sample_rate : float.
        Sample rate (Hz) of `data`.
    multiplier : float; default=4.0.
        Multiplier for the sample rate, >= 1.
    low : float; default=0.0.
        Low-cut filter (Hz), 0 to skip.
    high : float; default=-1.0.
        High-cut filter (Hz), 0 to skip, -1 for automatic
        (`sample_rate/2`, or `sample_rate/2.1` if `multiplier == 1`).
    resonance : float; default=sqrt(2).

    Returns
    -------
    resampled : np.ndarray
        Float32 array of `int(len(data)*multiplier)` points.
    new_sample_rate : float

    Raises
    ------
    ConditioningError
        If the input has no valid numbers, `multiplier < 1`, or the filter
        rejects its parameters.

    """
    if not multiplier >= 1.0:
        raise ConditioningError(
            ErrorKind.MULTIPLIER,
            f'multiplier ({multiplier:g}) must be >=1', 'oversample'
            )
    x = np.array(data, dtype=np.float32).ravel()
    if x.size > 0 and one_or_more_nonfinite(x):
        interpolate_nonfinite(x)

    new_sample_rate = sample_rate * multiplier
    if multiplier > 1.0:
        x = expand(x, multiplier)
        log.info(f'Expanded to {x.size} points, sample rate '
                 f'{new_sample_rate:g} Hz')

    if high == -1:
        if multiplier == 1:
            divisor = AUTO_HIGH_DIVISOR_NO_EXPAND
        else:
            divisor = AUTO_HIGH_DIVISOR
        high = sample_rate / divisor
        log.info(f'Using automatic high-cut of {high:g} Hz')

    butterworth(x, new_sample_rate, low=low, high=high,
                resonance=resonance).raise_for_error()

    return x, new_sample_rate
