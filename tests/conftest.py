import numpy as np
import pytest

from vibration_fft.models import PlotRect, Padding, SamplingContext


@pytest.fixture
def sampling():
    # 10 Hz per bin keeps expected frequencies readable
    return SamplingContext(sampling_frequency=1000.0, fft_size=100)


@pytest.fixture
def rect():
    # 100×50 plotting area inside a 200×100 canvas
    return PlotRect(
        width=200.0, height=100.0, padding=Padding(top=20, right=20, bottom=30, left=80)
    )


@pytest.fixture
def scenario_series():
    # Strong line at bin 3, weak line at bin 8
    return [0, 0.05, 0.2, 0.9, 0.2, 0.05, 0, 0.05, 0.15, 0.05, 0]


@pytest.fixture
def two_tone_series():
    # 64 bins of low noise with lines at bins 12 and 40
    rng = np.random.default_rng(7)
    data = rng.uniform(0.0, 0.02, 64)
    data[12] = 0.8
    data[40] = 0.5
    return data


@pytest.fixture
def payload(two_tone_series):
    return {
        "success": True,
        "timestamp": "2024-05-01T12:30:00",
        "data": {
            "V1": two_tone_series.tolist(),
            "V2": [0.0] * 32,
            "V3": [],
        },
    }
