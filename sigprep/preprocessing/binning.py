"""Fractional-width, zero-aligned averaging of sample arrays.

Bins are averaged in place, so that the leading elements of the original
array hold the binned values and a parallel flag array identifies them. This
allows re-combination of binned data with other columns of the original data.

- Non-finite values (NaN, Inf) do not contribute to the averages. A bin with
  no finite values is NaN.
- Bin widths may be fractional. Different numbers of samples go into
  different bins to spread the remainder evenly.
- A "zero" sample is guaranteed to be the first sample of the bin that
  becomes the new zero.
- Edge bins contain between 1x and just-under-2x the bin width. The exception
  is a single partial bin just before zero, because the data around zero is
  usually too important to exclude.
- If zero is the first sample the partial bin is empty (NaN), so the new
  zero is always element 1 when fewer than one full bin precedes zero.
- If the last bin edge does not land on the final sample, one more bin
  averages the last `bin_width` samples. It may overlap the previous bin.

"""

import logging

import numpy as np
from numba import njit

from .errors import BinOutcome, ConditioningError, ErrorKind
from sigprep.tools.arrays import is_sample_array, describe_array

log = logging.getLogger(__name__)


@njit(nogil=True)
def _finite_mean(source, start, stop):
    total = 0.0
    count = 0
    for i in range(start, stop):
        if np.isfinite(source[i]):
            total += source[i]
            count += 1
    if count > 0:
        return total / count
    return np.nan


@njit(nogil=True)
def fractional_bins(source, out, zero, width):
    """Average `source` into bins of `width` samples, aligned to `zero`.

    Parameters
    ----------
    source : np.ndarray
        Float64 input samples. Not modified.
    out : np.ndarray
        Destination for bin values, at least `len(source) + 2` long. Must not
        share memory with `source`.
    zero : int
        Index of the sample treated as time zero, `0 <= zero < len(source)`.
    width : float
        Bin width in samples, > 0.

    Returns
    -------
    n_bins : int
        Number of values written to the start of `out`.
    new_zero : int
        Index of the bin that starts with the `zero` sample.

    """
    n = source.shape[0]
    n_bins = 0
    total = 0.0
    count = 0

    # Number of bins before zero. If not an integer, the fraction is combined
    # with the first bin.
    if zero > 0:
        prebins = zero / width
    else:
        prebins = 0.0

    if prebins >= 1.0:
        # At least one full bin before zero: the first limit comes before
        # zero as well.
        limit = (zero - 1.0) - np.floor(prebins - 1.0) * width
        start = 0
    else:
        # Single partial bin holding everything before zero (NaN if empty).
        # The new zero is then always element 1.
        out[0] = _finite_mean(source, 0, zero)
        n_bins = 1
        prebins = 1.0
        limit = zero + width - 1.0
        start = zero

    for i in range(start, n):
        if np.isfinite(source[i]):
            total += source[i]
            count += 1
        # Current sample is at or past the right edge of the window.
        if i >= limit:
            if count > 0:
                out[n_bins] = total / count
            else:
                out[n_bins] = np.nan
            n_bins += 1
            total = 0.0
            count = 0
            limit += width

    # Last bin edge did not land on the final sample: instead of a short bin,
    # average the last `width` samples of the input.
    if abs((n - 1.0) + width - limit) > 1e-9 * (n + width):
        first = n - int(width)
        if first < 0:
            first = 0
        out[n_bins] = _finite_mean(source, first, n)
        n_bins += 1

    return n_bins, int(prebins)


def _check_bin_parameters(data, flags, n, zero, bin_width):
    name = 'bin_average'
    if not is_sample_array(data):
        raise ConditioningError(
            ErrorKind.INVALID_ARRAY,
            f'data must be a writeable 1-D float32 or float64 array, '
            f'got {describe_array(data)}', name
            )
    if n < 1:
        raise ConditioningError(
            ErrorKind.INSUFFICIENT_SAMPLES,
            f'number of samples ({n}) must be >0', name
            )
    if n > data.shape[0]:
        raise ConditioningError(
            ErrorKind.INVALID_ARRAY,
            f'number of samples ({n}) exceeds data array length '
            f'({data.shape[0]})', name
            )
    if (not isinstance(flags, np.ndarray) or flags.ndim != 1
            or flags.shape[0] < n):
        raise ConditioningError(
            ErrorKind.INVALID_ARRAY,
            f'flags must be a 1-D array of at least {n} elements, '
            f'got {describe_array(flags)}', name
            )
    if not bin_width > 0:
        raise ConditioningError(
            ErrorKind.BIN_WIDTH,
            f'bin size ({bin_width:g}) must be >0', name
            )
    if zero < 0 or zero >= n:
        raise ConditioningError(
            ErrorKind.ZERO_INDEX,
            f'specified zero-sample ({zero}) must be >=0 and less than data '
            f'array length ({n})', name
            )


def bin_average(data, flags=None, n=None, zero=0, bin_width=1.0):
    """Average `data` in place into fractional-width bins aligned to `zero`.

    Parameters
    ----------
    data : np.ndarray.
        1-D float32 or float64 array. The first `outcome.n` elements are
        overwritten with bin averages.
    flags : np.ndarray; optional.
        Parallel array, at least `n` long, overwritten with True for elements
        of `data` that hold bin averages and False elsewhere. If None, a new
        boolean array of `len(data)` is allocated and returned as
        `outcome.flags`.
    n : int; optional.
        Number of elements of `data` to bin. Defaults to `len(data)`.
    zero : int; default=0.
        Element to treat as time zero.
    bin_width : float; default=1.0.
        Desired bin width in samples, can be a fraction. A width of exactly
        1 leaves `data` unchanged. Parameters are validated before this
        shortcut, so an out-of-range `zero` is rejected even for width 1.
        Widths that would produce more bins than samples (e.g. widths
        below 1) are rejected.

    Returns
    -------
    BinOutcome
        `outcome.n` and `outcome.zero` give the new length and the new zero
        element, which can be used to reconstruct timestamps (see
        `bin_times`). On failure neither `data` nor `flags` is modified.

    Examples
    --------
    >>> data = np.arange(19, dtype=np.float64)
    >>> outcome = bin_average(data, zero=6, bin_width=3.5)
    >>> data[:outcome.n]
    array([ 2.5,  7.5, 11. , 14.5, 17. ])
    >>> outcome.zero
    1

    """
    name = 'bin_average'
    if n is None and isinstance(data, np.ndarray):
        n = data.shape[0]
    elif n is None:
        n = 0
    if flags is None and isinstance(data, np.ndarray):
        flags = np.zeros(data.shape[0], dtype=bool)

    try:
        _check_bin_parameters(data, flags, n, zero, bin_width)
    except ConditioningError as e:
        log.warning(str(e))
        return BinOutcome.failure(e, n=n, zero=zero, flags=flags)

    if bin_width == 1.0:
        flags[:] = False
        flags[:n] = True
        return BinOutcome.success(f'bin size is 1, {n} samples unchanged',
                                  name, n=n, zero=zero, flags=flags)

    # Bin into scratch space first: averages written to the front of `data`
    # must never be re-read as input, and `data` is left alone on failure.
    source = np.array(data[:n], dtype=np.float64)
    binned = np.empty(n + 2, dtype=np.float64)
    n_bins, new_zero = fractional_bins(source, binned, int(zero),
                                       float(bin_width))
    if n_bins > n:
        e = ConditioningError(
            ErrorKind.BIN_WIDTH,
            f'bin size ({bin_width:g}) would produce {n_bins} bins from {n} '
            f'samples', name
            )
        log.warning(str(e))
        return BinOutcome.failure(e, n=n, zero=zero, flags=flags)

    data[:n_bins] = binned[:n_bins]
    flags[:] = False
    flags[:n_bins] = True
    log.debug(f'{n} samples -> {n_bins} bins of {bin_width:g}, '
              f'zero {zero} -> {new_zero}')

    return BinOutcome.success(f'binned {n} samples into {n_bins} bins',
                              name, n=n_bins, zero=new_zero, flags=flags)


def bin_times(n, zero, bin_width, interval=1.0):
    """Timestamps of binned values relative to the zero bin.

    Parameters
    ----------
    n : int.
        Number of bins, `outcome.n` from `bin_average`.
    zero : int.
        Zero bin, `outcome.zero` from `bin_average`.
    bin_width : float.
        Bin width in samples used for `bin_average`.
    interval : float; default=1.0.
        Sampling interval of the original data (1/sample_rate).

    Returns
    -------
    np.ndarray
        Shape (n,). Element `zero` is 0.

    """
    step = bin_width * interval
    return (np.arange(n) - zero) * step
