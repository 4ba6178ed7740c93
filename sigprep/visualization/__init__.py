"""Plotting utilities for conditioned signals.

Contents
--------
    traces.py : Raw vs. filtered traces, binned series on a zero-aligned axis.
    tools.py  : Helper functions for formatting matplotlib axes.

"""
import matplotlib.pyplot as plt
import matplotlib as mpl

font_size = 8
# colorblind palette from seaborn
palette = ['#0173b2', '#de8f05', '#029e73', '#d55e00', '#cc78bc', '#ca9161']
params = {'legend.fontsize': font_size-2,
          'axes.labelsize': font_size,
          'axes.titlesize': font_size,
          'xtick.labelsize': font_size,
          'ytick.labelsize': font_size,
          'font.size': font_size,
          'axes.prop_cycle': mpl.cycler(color=palette)
          }
plt.rcParams.update(params)

from .traces import plot_conditioning, plot_bins
from .tools import ax_remove_box, ax_samples_to_seconds
