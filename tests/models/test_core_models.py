import pytest
from pydantic import ValidationError
from vibration_fft.models import SamplingContext, Peak, Padding, PlotRect, PlotScale


def test_sampling_frequency_of_bin(valid_sampling):
    assert valid_sampling.frequency(0) == 0.0
    assert valid_sampling.frequency(64) == pytest.approx(1000.0)
    assert valid_sampling.resolution == pytest.approx(15.625)
    assert valid_sampling.nyquist == pytest.approx(64000.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"sampling_frequency": 0.0, "fft_size": 8192},
        {"sampling_frequency": -1.0, "fft_size": 8192},
        {"sampling_frequency": 128000.0, "fft_size": 0},
        {"sampling_frequency": 128000.0, "fft_size": -4},
    ],
)
def test_sampling_validation_raises(kwargs):
    with pytest.raises(ValidationError):
        SamplingContext(**kwargs)


def test_sampling_is_immutable(valid_sampling):
    with pytest.raises(ValidationError):
        valid_sampling.fft_size = 4096


def test_peak_is_value_type(valid_peak):
    same = Peak(bin_index=64, frequency=1000.0, magnitude=0.5)
    assert valid_peak == same
    assert hash(valid_peak) == hash(same)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"bin_index": -1, "frequency": 0.0, "magnitude": 1.0},
        {"bin_index": 0, "frequency": -0.5, "magnitude": 1.0},
    ],
)
def test_peak_validation_raises(kwargs):
    with pytest.raises(ValidationError):
        Peak(**kwargs)


def test_plotrect_defaults():
    r = PlotRect()
    assert r.width == 700.0 and r.height == 300.0
    assert r.plot_width == pytest.approx(580.0)
    assert r.plot_height == pytest.approx(200.0)
    assert r.is_plottable


def test_plotrect_allows_oversized_padding():
    r = PlotRect(width=100, height=100, padding=Padding(left=60, right=40))
    assert r.plot_width == 0
    assert not r.is_plottable


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0, "height": 10},
        {"width": 10, "height": -1},
    ],
)
def test_plotrect_validation_raises(kwargs):
    with pytest.raises(ValidationError):
        PlotRect(**kwargs)


def test_padding_rejects_negative():
    with pytest.raises(ValidationError):
        Padding(top=-1)


def test_plotscale_maps_corners():
    s = PlotScale(
        left=10, top=5, plot_width=100, plot_height=50, y_range=2.0, max_frequency=1000
    )
    assert s.x(0) == pytest.approx(10)
    assert s.x(1000) == pytest.approx(110)
    assert s.y(0) == pytest.approx(55)
    assert s.y(2.0) == pytest.approx(5)
    assert s.baseline == pytest.approx(55)
    assert s.contains(1000) and not s.contains(1000.1)
