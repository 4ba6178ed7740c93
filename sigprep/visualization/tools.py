import matplotlib.pyplot as plt
import matplotlib.ticker as mticker


def ax_remove_box(axes=None):
    """Remove right and top lines from plot border on Matplotlib axes."""
    if axes is None:
        axes = plt.gca()
    axes.spines['right'].set_visible(False)
    axes.spines['top'].set_visible(False)
    return axes


def ax_samples_to_seconds(axes=None, sample_rate=1.0, decimals=2):
    """Relabel x-axis ticks from sample indices to seconds.
    
    Parameters
    ----------
    axes : matplotlib.axes.Axes; optional.
        Axes to modify. If not provided, `plt.gca()` will be used.
    sample_rate : float; default=1.0.
        Rate (in Hz) at which data on axes were sampled.
    decimals : int; default=2.
        Number of decimal places to show on new tick labels.

    Returns
    -------
    matplotlib.axes.Axes
    
    """
    if axes is None:
        axes = plt.gca()

    # Fix tick locations (in samples) before replacing their labels.
    ticks = axes.get_xticks().tolist()
    axes.xaxis.set_major_locator(mticker.FixedLocator(ticks))
    axes.set_xticklabels([f'{tick/sample_rate:.{decimals}f}' for tick in ticks])
    axes.set_xlabel('Time (s)')
    return axes
