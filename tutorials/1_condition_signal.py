"""Demonstrates filtering and binning of a noisy recording.

"""
import numpy as np
import matplotlib.pyplot as plt

from sigprep.preprocessing import (
    interpolate_nonfinite, butterworth, bin_average, bin_times
)
from sigprep.visualization import plot_conditioning, plot_bins

########################################################
# Loading data
#
# Kernels operate on 1-D float arrays that are modified in place. Here we
# make 10 seconds of fake EMG-like data at 1000 Hz: a slow 2 Hz oscillation
# on top of a DC offset, broadband noise, and a short dropout.
########################################################
def my_data_loader(file_path):
    # Dummy function to demonstrate the data format.
    print(f'Loading data from {file_path}, but not really...')
    fs = 1000.0
    t = np.arange(10000) / fs
    data = 3.0 + np.sin(2*np.pi*2*t) + 0.3*np.random.randn(t.size)
    data[4000:4050] = np.nan
    return data.astype(np.float32), fs
data, fs = my_data_loader('path/to_data.txt')
raw = data.copy()

###########################
# interpolate_nonfinite
# The filter's recursion would spread NaN across the whole array, so fill
# gaps first.
###########################
n_replaced = interpolate_nonfinite(data)

###########################
# butterworth
# Zero-phase high-pass at 0.5 Hz and low-pass at 20 Hz.
#   - low: high-pass cut-off, 0 to skip
#   - high: low-pass cut-off, 0 to skip
#   - resonance: sqrt(2) for a Butterworth response
# Failures are returned, not raised. Use `raise_for_error` to stop instead.
###########################
outcome = butterworth(data, fs, low=0.5, high=20)
print(outcome)
outcome.raise_for_error()

plot_conditioning(np.nan_to_num(raw, nan=3.0), data, fs)

###########################
# bin_average
# Average into 0.25 second bins, keeping the sample at 2.0 s as time zero.
# The first `outcome.n` elements of `binned` now hold the averages.
###########################
binned = raw.astype(np.float64)
bin_width = 0.25 * fs
zero = int(2.0 * fs)
outcome = bin_average(binned, zero=zero, bin_width=bin_width)
print(outcome)

times = bin_times(outcome.n, outcome.zero, bin_width, interval=1/fs)
print(f'{outcome.n} bins from {times[0]:.2f} s to {times[-1]:.2f} s')

# NaNs in the dropout are excluded from the averages.
plot_bins(binned[:outcome.n], outcome.zero, bin_width, interval=1/fs)
plt.show()
