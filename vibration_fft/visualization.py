"""
Visualization functions for the vibration FFT monitor.

This module draws analyzed channels with matplotlib. Everything is drawn in
canvas coordinates straight from the mapped points of a ChannelResult, so
the figure shows exactly the geometry a browser chart would receive.
"""

from collections.abc import Sequence

from matplotlib.axes import Axes
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from vibration_fft.models import ChannelResult, DashboardResult, PlotRect

# Line colors per channel
CHANNEL_COLORS: dict[str, str] = {
    "Channel1": "#10b981",
    "Channel2": "#3b82f6",
    "Channel3": "#8b5cf6",
    "Channel4": "#ec4899",
}
DEFAULT_COLOR = "#45B7D1"
MARKER_COLOR = "#ff4444"
AXIS_COLOR = "#374151"
TICK_COLOR = "#6b7280"


def format_frequency(frequency: float) -> str:
    """Format a frequency for display, switching to kHz from 1000 Hz up.

    Args:
        frequency: Frequency in Hz.

    Returns:
        A label such as ``"512.0 Hz"`` or ``"12.35 kHz"``.
    """
    if frequency >= 1000:
        return f"{frequency / 1000:.2f} kHz"
    return f"{frequency:.1f} Hz"


def format_magnitude(magnitude: float) -> str:
    """Format a magnitude with four decimals."""
    return f"{magnitude:.4f}"


def peak_rows(result: ChannelResult) -> list[tuple[str, str]]:
    """Build display rows for a channel's peak list.

    Args:
        result: Analyzed channel.

    Returns:
        One ``(frequency_label, magnitude_label)`` pair per peak, strongest
        first. Empty if no peaks were detected.
    """
    return [
        (format_frequency(peak.frequency), format_magnitude(peak.magnitude))
        for peak in result.statistics.peaks
    ]


def _draw_axes(ax: Axes, result: ChannelResult, rect: PlotRect) -> None:
    pad = rect.padding
    bottom = rect.height - pad.bottom
    right = rect.width - pad.right

    ax.plot([pad.left, pad.left], [pad.top, bottom], color=AXIS_COLOR, linewidth=2)
    ax.plot([pad.left, right], [bottom, bottom], color=AXIS_COLOR, linewidth=2)

    for tick in result.y_ticks:
        ax.plot([pad.left - 5, pad.left], [tick.position] * 2, color=TICK_COLOR)
        ax.text(
            pad.left - 10,
            tick.position,
            f"{tick.value:.3f}",
            ha="right",
            va="center",
            fontsize=8,
            color=TICK_COLOR,
        )
    for tick in result.x_ticks:
        ax.plot([tick.position] * 2, [bottom, bottom + 5], color=TICK_COLOR)
        ax.text(
            tick.position,
            bottom + 20,
            f"{tick.value / 1000:.1f}k",
            ha="center",
            va="center",
            fontsize=8,
            color=TICK_COLOR,
        )


def draw_channel(
    ax: Axes,
    result: ChannelResult,
    rect: PlotRect,
    color: str | None = None,
) -> None:
    """Draw one analyzed channel onto an axes in canvas coordinates.

    The axes limits are set to the canvas with y inverted, so the mapped
    points are plotted unchanged.

    Args:
        ax: Matplotlib axes to draw on.
        result: Analyzed channel with path, markers and ticks.
        rect: Canvas the result was mapped onto.
        color: Line color; defaults to the channel's palette color.
    """
    color = color or CHANNEL_COLORS.get(result.name, DEFAULT_COLOR)

    ax.set_xlim(0, rect.width)
    ax.set_ylim(rect.height, 0)
    ax.axis("off")
    ax.text(
        rect.padding.left,
        rect.padding.top / 2,
        f"{result.name} - FFT Magnitude",
        ha="left",
        va="center",
        fontsize=10,
        fontweight="bold",
        color=AXIS_COLOR,
    )

    if not result.has_data:
        ax.text(
            rect.width / 2,
            rect.height / 2,
            "No FFT data available",
            ha="center",
            va="center",
            fontsize=11,
            color="#9ca3af",
        )
        return

    _draw_axes(ax, result, rect)

    xs = [p.x for p in result.path]
    ys = [p.y for p in result.path]
    if result.baseline is not None:
        ax.fill_between(xs, ys, result.baseline, color=color, alpha=0.15, linewidth=0)
    ax.plot(xs, ys, color=color, linewidth=1.5, solid_joinstyle="round")

    for marker in result.markers:
        ax.scatter(
            [marker.point.x],
            [marker.point.y],
            s=30,
            color=MARKER_COLOR,
            edgecolors="white",
            zorder=3,
        )
        ax.text(
            marker.point.x,
            marker.point.y - 10,
            f"{marker.peak.frequency:.1f}Hz",
            ha="center",
            va="bottom",
            fontsize=7,
            color=MARKER_COLOR,
            fontweight="bold",
        )


def create_channel_figure(
    result: ChannelResult,
    rect: PlotRect | None = None,
    *,
    color: str | None = None,
    dpi: int = 100,
) -> Figure:
    """Create a figure showing a single analyzed channel.

    Args:
        result: Analyzed channel.
        rect: Canvas the result was mapped onto (default 700×300).
        color: Line color; defaults to the channel's palette color.
        dpi: Raster resolution; the figure is ``rect`` pixels at this dpi.

    Returns:
        Matplotlib Figure sized to the canvas, attached to an Agg canvas.
    """
    rect = rect or PlotRect()
    fig = Figure(figsize=(rect.width / dpi, rect.height / dpi), dpi=dpi)
    FigureCanvasAgg(fig)
    ax = fig.add_axes((0, 0, 1, 1))
    draw_channel(ax, result, rect, color)
    return fig


def create_dashboard_figure(
    dashboard: DashboardResult,
    rect: PlotRect | None = None,
    *,
    colors: Sequence[str] | None = None,
    dpi: int = 100,
) -> Figure:
    """Create a figure stacking every channel of a dashboard vertically.

    Args:
        dashboard: Analyzed frame.
        rect: Canvas each channel was mapped onto (default 700×300).
        colors: Optional line colors in channel order.
        dpi: Raster resolution.

    Returns:
        Matplotlib Figure with one panel per channel, or a single
        "No channels" panel for an empty dashboard.
    """
    rect = rect or PlotRect()
    count = max(len(dashboard.channels), 1)
    fig = Figure(figsize=(rect.width / dpi, count * rect.height / dpi), dpi=dpi)
    FigureCanvasAgg(fig)

    if not dashboard.channels:
        ax = fig.add_subplot()
        ax.text(0.5, 0.5, "No channels", ha="center", va="center", transform=ax.transAxes)
        ax.axis("off")
        return fig

    axes = fig.subplots(count, 1, squeeze=False)[:, 0]
    for index, (ax, result) in enumerate(zip(axes, dashboard.channels)):
        color = colors[index] if colors and index < len(colors) else None
        draw_channel(ax, result, rect, color)
    fig.subplots_adjust(left=0, right=1, top=1, bottom=0, hspace=0.1)
    return fig
