"""Linear mapping of magnitude series and peaks into chart coordinates.

The path of a series and the markers of its peaks are both placed through
one PlotScale built from the series, so markers sit exactly on the line.
Geometry that leaves no room to draw yields empty output rather than an
error.
"""

from collections.abc import Sequence

import numpy as np

from vibration_fft.constants import MIN_Y_RANGE, X_TICK_RATIOS, Y_TICK_RATIOS
from vibration_fft.models import (
    AxisTick,
    Peak,
    PeakMarker,
    PlotPoint,
    PlotRect,
    PlotScale,
    SamplingContext,
)
from vibration_fft.statistics import MagnitudeSeries, as_magnitude_array


def build_scale(
    series: MagnitudeSeries | None,
    rect: PlotRect,
    max_frequency: float,
) -> PlotScale | None:
    """Derive the shared plot scale for a series on a canvas.

    The magnitude axis runs from 0 at the bottom edge to the series maximum
    at the top edge (1 for an empty series). The range never drops below
    0.001, so a flat series maps onto a finite line.

    Args:
        series: Magnitude values the scale is fitted to.
        rect: Target canvas with padding.
        max_frequency: Frequency at the right edge of the plot, in Hz.

    Returns:
        The PlotScale, or None when the plotting area has no positive width
        and height or the frequency ceiling is not positive.
    """
    plot_width = rect.plot_width
    plot_height = rect.plot_height
    if plot_width <= 0 or plot_height <= 0 or max_frequency <= 0:
        return None

    data = as_magnitude_array(series)
    y_min = 0.0
    y_max = float(np.max(data)) if data.size > 0 else 1.0
    y_range = max(y_max - y_min, MIN_Y_RANGE)

    return PlotScale(
        left=rect.padding.left,
        top=rect.padding.top,
        plot_width=plot_width,
        plot_height=plot_height,
        y_min=y_min,
        y_range=y_range,
        max_frequency=max_frequency,
    )


def map_series_to_path(
    series: MagnitudeSeries | None,
    sampling: SamplingContext,
    rect: PlotRect,
    max_frequency: float,
) -> list[PlotPoint]:
    """Map every displayable bin of a series to a canvas point.

    Bins whose frequency exceeds ``max_frequency`` are dropped, not clamped
    to the right edge.

    Args:
        series: Magnitude values, one per frequency bin.
        sampling: Context giving each bin its frequency.
        rect: Target canvas with padding.
        max_frequency: Display ceiling of the frequency axis, in Hz.

    Returns:
        Points in ascending bin order. Empty for an empty series or an
        unplottable canvas.
    """
    data = as_magnitude_array(series)
    if data.size == 0:
        return []
    scale = build_scale(data, rect, max_frequency)
    if scale is None:
        return []

    points: list[PlotPoint] = []
    for index, magnitude in enumerate(data.tolist()):
        frequency = sampling.frequency(index)
        if not scale.contains(frequency):
            continue
        points.append(PlotPoint(x=scale.x(frequency), y=scale.y(magnitude)))
    return points


def map_peaks_to_markers(
    peaks: Sequence[Peak],
    series: MagnitudeSeries | None,
    sampling: SamplingContext,
    rect: PlotRect,
    max_frequency: float,
) -> list[PeakMarker]:
    """Place peak markers on the scale of the series they were found in.

    Each peak is positioned by the frequency of its bin, the same way
    :func:`map_series_to_path` positions that bin.

    Args:
        peaks: Peaks detected in ``series``.
        series: The magnitude series the path is drawn from.
        sampling: Context giving each bin its frequency.
        rect: Target canvas with padding.
        max_frequency: Display ceiling of the frequency axis, in Hz.

    Returns:
        Markers in the order of ``peaks``, without peaks above the ceiling.
        Empty for an unplottable canvas.
    """
    if not peaks:
        return []
    scale = build_scale(series, rect, max_frequency)
    if scale is None:
        return []

    markers: list[PeakMarker] = []
    for peak in peaks:
        frequency = sampling.frequency(peak.bin_index)
        if not scale.contains(frequency):
            continue
        point = PlotPoint(x=scale.x(frequency), y=scale.y(peak.magnitude))
        markers.append(PeakMarker(peak=peak, point=point))
    return markers


def axis_ticks(
    scale: PlotScale,
    x_ratios: Sequence[float] = X_TICK_RATIOS,
    y_ratios: Sequence[float] = Y_TICK_RATIOS,
) -> tuple[list[AxisTick], list[AxisTick]]:
    """Compute evenly spaced axis ticks for a plot scale.

    Args:
        scale: Scale the ticks belong to.
        x_ratios: Fractions of the plot width to place frequency ticks at.
        y_ratios: Fractions of the plot height to place magnitude ticks at,
            measured upward from the bottom edge.

    Returns:
        Tuple ``(x_ticks, y_ticks)``. Frequency ticks carry Hz values,
        magnitude ticks carry magnitudes.
    """
    x_ticks = [
        AxisTick(
            position=scale.left + scale.plot_width * ratio,
            value=ratio * scale.max_frequency,
        )
        for ratio in x_ratios
    ]
    y_ticks = [
        AxisTick(
            position=scale.top + scale.plot_height * (1 - ratio),
            value=scale.y_min + ratio * scale.y_range,
        )
        for ratio in y_ratios
    ]
    return x_ticks, y_ticks
