import pytest
import numpy as np


# Generic data fixtures for use by test_preprocessing and others.
noise_seed = 12345
sample_rate = 1000.0


@pytest.fixture
def fs():
    """Sample rate (Hz) shared by the signal fixtures."""
    return sample_rate

@pytest.fixture
def sine():
    """2 seconds of a 5 Hz unit sinusoid at 1000 Hz, float64."""
    t = np.arange(2000) / sample_rate
    return np.sin(2*np.pi*5*t)

@pytest.fixture
def noisy_sine(sine):
    """5 Hz sinusoid plus 200 Hz sinusoid plus white noise, float32."""
    np.random.seed(noise_seed)
    t = np.arange(sine.size) / sample_rate
    x = sine + 0.5*np.sin(2*np.pi*200*t) + 0.1*np.random.randn(sine.size)
    return x.astype(np.float32)

@pytest.fixture
def ramp():
    """19 samples valued 0..18."""
    return np.arange(19, dtype=np.float64)

@pytest.fixture
def noise():
    """1000 samples of white noise, float64."""
    np.random.seed(noise_seed)
    return np.random.randn(1000)
