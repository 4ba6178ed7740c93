import matplotlib.pyplot as plt
import numpy as np

from sigprep.preprocessing.binning import bin_times
from .tools import ax_remove_box, ax_samples_to_seconds


def plot_conditioning(raw, conditioned, sample_rate, ax=None,
                      labels=('raw', 'filtered')):
    """Overlay a raw trace and its conditioned version.

    Parameters
    ----------
    raw : np.ndarray.
        Signal before conditioning.
    conditioned : np.ndarray.
        Same length as `raw`.
    sample_rate : float.
        Samples per second, used to label the time axis.
    ax : matplotlib.axes.Axes; optional.
        Axes to plot on. A new figure is created if not provided.
    labels : 2-tuple of str.
        Legend entries for `raw` and `conditioned`.

    Returns
    -------
    matplotlib.axes.Axes

    """
    if ax is None:
        _, ax = plt.subplots()
    raw = np.asarray(raw)
    conditioned = np.asarray(conditioned)
    if raw.shape != conditioned.shape:
        raise ValueError(
            f'raw and conditioned must have the same shape, got '
            f'{raw.shape} and {conditioned.shape}'
            )

    ax.plot(raw, linewidth=0.5, alpha=0.6, label=labels[0])
    ax.plot(conditioned, linewidth=1, label=labels[1])
    ax_samples_to_seconds(ax, sample_rate=sample_rate)
    ax_remove_box(ax)
    ax.legend(frameon=False)

    return ax


def plot_bins(values, zero, bin_width, interval=1.0, ax=None):
    """Step plot of binned values against time relative to the zero bin.

    Parameters
    ----------
    values : np.ndarray.
        Binned values, i.e. `data[:outcome.n]` after `bin_average`.
    zero : int.
        `outcome.zero` from `bin_average`.
    bin_width : float.
        Bin width in samples.
    interval : float; default=1.0.
        Sampling interval of the original data.
    ax : matplotlib.axes.Axes; optional.

    Returns
    -------
    matplotlib.axes.Axes

    """
    if ax is None:
        _, ax = plt.subplots()
    values = np.asarray(values)
    times = bin_times(values.shape[0], zero, bin_width, interval=interval)

    # NaN bins leave gaps in the step plot.
    ax.step(times, values, where='post')
    ax.axvline(0, color='k', linestyle='--', linewidth=0.5)
    ax.set_xlabel('Time from zero')
    ax_remove_box(ax)

    return ax
