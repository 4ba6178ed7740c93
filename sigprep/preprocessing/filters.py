"""Zero-phase biquad Butterworth filtering of uniformly-sampled signals.

Coefficient calculations follow the public domain biquad forms posted by
Patrice Tarrabia (http://www.musicdsp.org/showone.php?id=38). Each enabled
stage (high-pass first, then low-pass) is applied forward and then backward
in time, so the phase lag of the first pass is cancelled by the second.

NOTE: Non-finite values propagate through the recursion. Use
      `sigprep.preprocessing.interpolate_nonfinite` first if the data may
      contain NaN or Inf.

"""

import logging
import math

import numpy as np
from numba import njit

from .errors import ConditioningError, ErrorKind, Outcome
from sigprep.tools.arrays import is_sample_array, describe_array

log = logging.getLogger(__name__)

# Butterworth response. Low values give sharper rolloffs but can ring,
# high values give gentle rolloffs but can dampen the signal.
DEFAULT_RESONANCE = math.sqrt(2)
MAX_RESONANCE = math.sqrt(2)
MIN_SAMPLES = 4


def biquad_coefficients(kind, cutoff, sample_rate, resonance=DEFAULT_RESONANCE):
    """Compute biquad coefficients for a high-pass or low-pass stage.

    Parameters
    ----------
    kind : str.
        'highpass' or 'lowpass'.
    cutoff : float.
        Cut-off frequency, same units as `sample_rate`.
    sample_rate : float.
        Samples per unit time.
    resonance : float; default=sqrt(2).
        Filter Q, in (0, sqrt(2)].

    Returns
    -------
    np.ndarray
        Float64 array `[a0, a1, a2, b1, b2]`.

    """
    # Prewarped frequency. All coefficient arithmetic is float64 regardless of
    # the sample dtype.
    res = float(resonance)
    if kind == 'highpass':
        omega = math.tan(math.pi * float(cutoff) / float(sample_rate))
        a0 = 1.0 / (1.0 + res*omega + omega*omega)
        a1 = -2.0 * a0
        a2 = a0
        b1 = 2.0 * (omega*omega - 1.0) * a0
        b2 = (1.0 - res*omega + omega*omega) * a0
    elif kind == 'lowpass':
        omega = 1.0 / math.tan(math.pi * float(cutoff) / float(sample_rate))
        a0 = 1.0 / (1.0 + res*omega + omega*omega)
        a1 = 2.0 * a0
        a2 = a0
        b1 = 2.0 * (1.0 - omega*omega) * a0
        b2 = (1.0 - res*omega + omega*omega) * a0
    else:
        raise ValueError(f"Unrecognized filter kind: {kind}. "
                         "Must be 'highpass' or 'lowpass'.")

    return np.array([a0, a1, a2, b1, b2], dtype=np.float64)


@njit(nogil=True)
def edge_replicate_start(source, target, coefficients):
    """Edge-replicate damping for the first two outputs of a biquad pass.

    Missing history terms are replaced by the earliest available input sample
    (and the missing output term is dropped) instead of being treated as zero.
    For data offset from zero this damps the edge transient rather than
    injecting a spurious step.

    Parameters
    ----------
    source : np.ndarray
        Input samples, at least 2.
    target : np.ndarray
        Output buffer, written at indices 0 and 1.
    coefficients : np.ndarray
        `[a0, a1, a2, b1, b2]` as returned by `biquad_coefficients`.

    """
    a0 = coefficients[0]
    a1 = coefficients[1]
    a2 = coefficients[2]
    b1 = coefficients[3]
    target[0] = a0*source[0] + a1*source[0] + a2*source[0]
    target[1] = a0*source[1] + a1*source[0] + a2*source[0] - b1*target[0]


@njit(nogil=True)
def biquad_pass(source, target, coefficients):
    """Run the biquad difference equation over `source`, writing to `target`.

    The backward pass of a zero-phase filter is this same function applied to
    time-reversed views (`source[::-1], target[::-1]`).

    """
    a0 = coefficients[0]
    a1 = coefficients[1]
    a2 = coefficients[2]
    b1 = coefficients[3]
    b2 = coefficients[4]
    edge_replicate_start(source, target, coefficients)
    for i in range(2, source.shape[0]):
        target[i] = (a0*source[i] + a1*source[i-1] + a2*source[i-2]
                     - b1*target[i-1] - b2*target[i-2])


def zero_phase_pass(data, scratch, coefficients):
    """Forward pass from `data` into `scratch`, then backward into `data`."""
    biquad_pass(data, scratch, coefficients)
    biquad_pass(scratch[::-1], data[::-1], coefficients)


def _check_filter_parameters(data, sample_rate, low, high, resonance):
    name = 'butterworth'
    if not is_sample_array(data):
        raise ConditioningError(
            ErrorKind.INVALID_ARRAY,
            f'data must be a writeable 1-D float32 or float64 array, '
            f'got {describe_array(data)}', name
            )
    n = data.shape[0]
    if n < MIN_SAMPLES:
        raise ConditioningError(
            ErrorKind.INSUFFICIENT_SAMPLES,
            f'no filtering - number of input samples ({n}) is less than '
            f'{MIN_SAMPLES}', name
            )
    if not sample_rate > 0:
        raise ConditioningError(
            ErrorKind.SAMPLE_RATE,
            f'sample frequency ({sample_rate:g}) must be > 0', name
            )
    nyquist = sample_rate / 2.0
    if low > nyquist:
        raise ConditioningError(
            ErrorKind.NYQUIST,
            f'low frequency {low:g} must be <= half of sample frequency '
            f'{sample_rate:g}', name
            )
    if high > nyquist:
        raise ConditioningError(
            ErrorKind.NYQUIST,
            f'high frequency {high:g} must be <= half of sample frequency '
            f'{sample_rate:g}', name
            )
    if (low > 0 or high > 0) and not (0 < resonance <= MAX_RESONANCE + 1e-9):
        raise ConditioningError(
            ErrorKind.RESONANCE,
            f'resonance ({resonance:g}) must be in the range (0, sqrt(2)]',
            name
            )


def butterworth(data, sample_rate, low=0.0, high=0.0,
                resonance=DEFAULT_RESONANCE):
    """Apply a bi-directional biquad Butterworth filter to `data` in place.

    Parameters
    ----------
    data : np.ndarray.
        1-D float32 or float64 array, fixed sample rate assumed. Overwritten
        with the filtered signal.
    sample_rate : float.
        Samples per second.
    low : float; default=0.0.
        Cut-off for the high-pass (low-cut) stage. Set to 0 to skip.
    high : float; default=0.0.
        Cut-off for the low-pass (high-cut) stage. Set to 0 to skip.
        If neither `low` nor `high` is set, `data` is unaffected.
    resonance : float; default=sqrt(2).
        Filter Q, in (0, sqrt(2)].

    Returns
    -------
    Outcome
        On failure `data` has not been modified.

    Examples
    --------
    >>> x = np.random.rand(1000).astype(np.float32)
    >>> outcome = butterworth(x, 1000, low=1, high=100)
    >>> outcome.ok
    True

    """
    name = 'butterworth'
    try:
        _check_filter_parameters(data, sample_rate, low, high, resonance)
    except ConditioningError as e:
        log.warning(str(e))
        return Outcome.failure(e)

    n = data.shape[0]
    stages = []
    if low > 0:
        stages.append(('highpass', low))
    if high > 0:
        stages.append(('lowpass', high))
    if len(stages) == 0:
        return Outcome.success(f'no filtering requested for {n} points', name)

    try:
        scratch = np.empty_like(data)
    except MemoryError:
        e = ConditioningError(ErrorKind.ALLOCATION,
                              f'memory allocation error for {n} points', name)
        log.warning(str(e))
        return Outcome.failure(e)

    for kind, cutoff in stages:
        coefficients = biquad_coefficients(kind, cutoff, sample_rate, resonance)
        zero_phase_pass(data, scratch, coefficients)
        log.debug(f'{kind} at {cutoff:g} (fs={sample_rate:g}) applied to '
                  f'{n} points')
    del scratch

    return Outcome.success(f'successfully filtered {n} points', name)
