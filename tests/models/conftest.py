import pytest
from vibration_fft.models import SamplingContext, Peak


@pytest.fixture
def valid_sampling():
    return SamplingContext(sampling_frequency=128000.0, fft_size=8192)


@pytest.fixture
def valid_peak():
    return Peak(bin_index=64, frequency=1000.0, magnitude=0.5)
