import pytest
import numpy as np

from sigprep.preprocessing.binning import bin_average, bin_times, fractional_bins
from sigprep.preprocessing.errors import ErrorKind
from sigprep.tools.arrays import count_finite


class TestBinAverage:

    def test_reference_case(self, ramp):
        flags = np.zeros(ramp.size, dtype=bool)
        outcome = bin_average(ramp, flags, n=19, zero=6, bin_width=3.5)
        assert outcome.ok
        assert outcome.n == 5
        assert outcome.zero == 1
        assert np.allclose(ramp[:5], [2.5, 7.5, 11.0, 14.5, 17.0])
        # Flags mark the compacted positions.
        assert outcome.flags is flags
        assert np.all(flags[:5])
        assert not np.any(flags[5:])

    def test_unit_width_unchanged(self, ramp):
        original = ramp.copy()
        outcome = bin_average(ramp, zero=6, bin_width=1.0)
        assert outcome.ok
        assert outcome.n == 19
        assert outcome.zero == 6
        assert np.array_equal(ramp, original)
        assert np.all(outcome.flags)

    def test_default_flags_allocated(self, ramp):
        outcome = bin_average(ramp, zero=6, bin_width=3.5)
        assert outcome.flags.dtype == bool
        assert outcome.flags.shape == ramp.shape
        assert outcome.flags.sum() == outcome.n

    def test_integer_prebins(self):
        data = np.arange(12, dtype=np.float64)
        outcome = bin_average(data, zero=4, bin_width=2)
        assert outcome.n == 6
        assert outcome.zero == 2
        assert np.allclose(data[:6], [0.5, 2.5, 4.5, 6.5, 8.5, 10.5])
        # Zero sample (4) starts the new zero bin.
        assert data[outcome.zero] == 4.5

    def test_partial_bin_before_zero(self):
        data = np.arange(10, dtype=np.float64)
        outcome = bin_average(data, zero=2, bin_width=4)
        assert outcome.n == 3
        assert outcome.zero == 1
        assert np.allclose(data[:3], [0.5, 3.5, 7.5])

    def test_zero_at_start(self):
        data = np.arange(12, dtype=np.float64)
        outcome = bin_average(data, zero=0, bin_width=4)
        # Nothing precedes zero, so the leading partial bin is NaN and zero
        # moves to element 1.
        assert outcome.n == 4
        assert outcome.zero == 1
        assert np.isnan(data[0])
        assert np.allclose(data[1:4], [1.5, 5.5, 9.5])
        assert np.all(outcome.flags[:4])

    def test_trailing_remainder_is_full_width(self):
        data = np.arange(10, dtype=np.float64)
        outcome = bin_average(data, zero=0, bin_width=4)
        # 8 and 9 are left over: last bin is the mean of the last 4 samples.
        assert outcome.n == 4
        assert np.isnan(data[0])
        assert np.allclose(data[1:4], [1.5, 5.5, 7.5])

    def test_last_edge_before_final_sample(self):
        data = np.arange(8, dtype=np.float64)
        outcome = bin_average(data, zero=3, bin_width=1.5)
        # Bins close at limits 0.5, 2, 3.5, 5, 6.5 (sample 7). The edge after
        # that is 8, not 7 + 1.5, so the last 1.5 samples form one more bin.
        assert outcome.n == 6
        assert outcome.zero == 2
        assert np.allclose(data[:6], [0.5, 2.0, 3.5, 5.0, 6.5, 7.0])

    def test_width_larger_than_data(self):
        data = np.arange(5, dtype=np.float64)
        outcome = bin_average(data, zero=2, bin_width=10)
        assert outcome.n == 2
        assert outcome.zero == 1
        # Trailing bin reads the original samples, not the overwritten ones.
        assert np.allclose(data[:2], [0.5, 2.0])

    def test_nonfinite_excluded(self):
        data = np.array([1.0, np.nan, 3.0, np.inf, 5.0, 7.0])
        outcome = bin_average(data, zero=2, bin_width=2)
        assert outcome.n == 3
        assert outcome.zero == 1
        assert np.allclose(data[:3], [1.0, 3.0, 6.0])

    def test_all_nonfinite_bin_is_nan(self):
        data = np.arange(12, dtype=np.float64)
        data[4:8] = np.nan
        outcome = bin_average(data, zero=4, bin_width=4)
        assert outcome.n == 3
        assert outcome.zero == 1
        assert data[0] == 1.5
        assert np.isnan(data[1])
        assert data[2] == 9.5

    def test_all_nonfinite_trailing_bin_is_nan(self):
        data = np.array([1, 2, 3, np.nan, np.nan, np.nan, np.nan])
        outcome = bin_average(data, zero=3, bin_width=3)
        assert outcome.n == 3
        assert outcome.zero == 1
        assert data[0] == 2
        assert np.isnan(data[1]) and np.isnan(data[2])

    def test_partial_length(self):
        data = np.arange(20, dtype=np.float64)
        outcome = bin_average(data, n=10, zero=0, bin_width=5)
        assert outcome.n == 3
        assert np.isnan(data[0])
        assert np.allclose(data[1:3], [2, 7])
        # Elements past n are left alone.
        assert np.array_equal(data[3:], np.arange(3, 20))

    def test_float32(self):
        data = np.arange(19, dtype=np.float32)
        outcome = bin_average(data, zero=6, bin_width=3.5)
        assert data.dtype == np.float32
        assert np.allclose(data[:outcome.n], [2.5, 7.5, 11.0, 14.5, 17.0])

    def test_finite_values_all_used(self, noise):
        # With an integer width and zero on a bin edge, every sample is used
        # exactly once.
        data = noise.copy()
        data[::7] = np.nan
        outcome = bin_average(data, zero=100, bin_width=10)
        assert outcome.n == 100
        assert outcome.zero == 10
        masked = noise.copy()
        masked[::7] = np.nan
        expected = np.nanmean(masked.reshape(100, 10), axis=1)
        assert np.allclose(data[:100], expected)

    def test_finite_values_conserved_fractional_width(self, noise):
        # Width 3.5 alternates 4- and 3-sample bins: [0:4], [4:7], [7:11],
        # [11:14]. No trailing bin, so each finite value is used once.
        original = noise[:14].copy()
        original[[1, 5, 8, 12]] = np.nan
        data = original.copy()
        outcome = bin_average(data, zero=7, bin_width=3.5)
        assert outcome.n == 4
        assert outcome.zero == 2

        edges = [(0, 4), (4, 7), (7, 11), (11, 14)]
        counts = [count_finite(original[a:b]) for a, b in edges]
        assert sum(counts) == count_finite(original) == 10
        expected = [np.nanmean(original[a:b]) for a, b in edges]
        assert np.allclose(data[:4], expected)
        # Weighted by their finite counts, bins add back up to the total.
        assert np.isclose(np.dot(data[:4], counts), np.nansum(original))


class TestBinAverageErrors:

    def test_zero_out_of_range(self, ramp):
        original = ramp.copy()
        flags = np.zeros(ramp.size, dtype=bool)
        outcome = bin_average(ramp, flags, zero=19, bin_width=3.5)
        assert not outcome.ok
        assert outcome.kind is ErrorKind.ZERO_INDEX
        assert '19' in outcome.message
        assert outcome.n == 19
        assert outcome.zero == 19
        assert np.array_equal(ramp, original)
        assert not np.any(flags)

    def test_zero_out_of_range_unit_width(self, ramp):
        outcome = bin_average(ramp, zero=25, bin_width=1.0)
        assert outcome.kind is ErrorKind.ZERO_INDEX

    def test_negative_zero(self, ramp):
        outcome = bin_average(ramp, zero=-1, bin_width=2)
        assert outcome.kind is ErrorKind.ZERO_INDEX

    @pytest.mark.parametrize('width', [0, -2.5, np.nan])
    def test_bad_width(self, ramp, width):
        original = ramp.copy()
        outcome = bin_average(ramp, zero=6, bin_width=width)
        assert outcome.kind is ErrorKind.BIN_WIDTH
        assert np.array_equal(ramp, original)

    def test_width_less_than_one(self):
        data = np.arange(4, dtype=np.float64)
        flags = np.zeros(4, dtype=bool)
        outcome = bin_average(data, flags, zero=0, bin_width=0.5)
        # Every sample closes a bin, plus the leading and trailing bins.
        assert outcome.kind is ErrorKind.BIN_WIDTH
        assert '6 bins' in outcome.message
        assert outcome.n == 4
        assert np.array_equal(data, np.arange(4))
        assert not np.any(flags)

    def test_more_bins_than_samples(self):
        data = np.array([0.0, 1.0])
        outcome = bin_average(data, zero=0, bin_width=1.5)
        assert outcome.kind is ErrorKind.BIN_WIDTH
        assert np.array_equal(data, [0.0, 1.0])

    def test_empty(self):
        outcome = bin_average(np.array([], dtype=np.float64), bin_width=2)
        assert outcome.kind is ErrorKind.INSUFFICIENT_SAMPLES

    def test_n_too_large(self, ramp):
        outcome = bin_average(ramp, n=20, bin_width=2)
        assert outcome.kind is ErrorKind.INVALID_ARRAY

    def test_flags_too_short(self, ramp):
        outcome = bin_average(ramp, np.zeros(5, dtype=bool), bin_width=2)
        assert outcome.kind is ErrorKind.INVALID_ARRAY

    def test_not_an_array(self):
        outcome = bin_average([1.0, 2.0, 3.0], bin_width=2)
        assert outcome.kind is ErrorKind.INVALID_ARRAY
        outcome = bin_average(np.arange(5), bin_width=2)
        assert outcome.kind is ErrorKind.INVALID_ARRAY


def test_fractional_bins_kernel(ramp):
    out = np.zeros(ramp.size + 2)
    n_bins, new_zero = fractional_bins(ramp, out, 6, 3.5)
    assert (n_bins, new_zero) == (5, 1)
    assert np.allclose(out[:5], [2.5, 7.5, 11.0, 14.5, 17.0])
    # Source is not modified.
    assert np.array_equal(ramp, np.arange(19))


def test_bin_times():
    times = bin_times(5, 1, 3.5, interval=0.1)
    assert np.allclose(times, [-0.35, 0, 0.35, 0.7, 1.05])
    assert bin_times(3, 0, 2).tolist() == [0, 2, 4]
