import pytest
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from vibration_fft.models import ChannelResult, DashboardResult, MonitorParameters
from vibration_fft.pipeline import analyze_channel, process_payload
from vibration_fft.visualization import (
    create_channel_figure,
    create_dashboard_figure,
    format_frequency,
    format_magnitude,
    peak_rows,
)


@pytest.mark.parametrize(
    "frequency,label",
    [(0.0, "0.0 Hz"), (512.0, "512.0 Hz"), (999.94, "999.9 Hz"), (1000.0, "1.00 kHz"), (12346.0, "12.35 kHz")],
)
def test_format_frequency(frequency, label):
    assert format_frequency(frequency) == label


def test_format_magnitude():
    assert format_magnitude(0.123456) == "0.1235"


def test_peak_rows(two_tone_series):
    result = analyze_channel("Channel1", two_tone_series, MonitorParameters())
    rows = peak_rows(result)
    assert rows[0] == ("187.5 Hz", "0.8000")
    assert len(rows) == 2


def test_peak_rows_empty():
    assert peak_rows(ChannelResult(name="Channel1")) == []


def test_create_channel_figure_empty():
    fig = create_channel_figure(ChannelResult(name="Channel3"))
    assert isinstance(fig, Figure)
    texts = [t.get_text() for t in fig.axes[0].texts]
    assert "No FFT data available" in texts


def test_create_channel_figure_with_markers(two_tone_series):
    result = analyze_channel("Channel1", two_tone_series, MonitorParameters())
    fig = create_channel_figure(result, dpi=50)
    assert tuple(fig.get_size_inches()) == pytest.approx((14.0, 6.0))
    texts = [t.get_text() for t in fig.axes[0].texts]
    assert "187.5Hz" in texts and "625.0Hz" in texts


def test_create_dashboard_figure(payload):
    dashboard = process_payload(payload)
    fig = create_dashboard_figure(dashboard)
    assert isinstance(fig, Figure)
    assert len(fig.axes) == 4


def test_create_dashboard_figure_no_channels():
    fig = create_dashboard_figure(DashboardResult())
    assert len(fig.axes) == 1


def test_figures_render_offscreen(two_tone_series):
    result = analyze_channel("Channel1", two_tone_series, MonitorParameters())
    fig = create_channel_figure(result)
    assert isinstance(fig.canvas, FigureCanvasAgg)

    fig.canvas.draw()
    width, height = fig.canvas.get_width_height()
    assert (width, height) == (700, 300)

    dashboard_fig = create_dashboard_figure(DashboardResult(channels=[result]))
    assert isinstance(dashboard_fig.canvas, FigureCanvasAgg)
