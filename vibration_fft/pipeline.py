"""
Pipeline processing functions for the vibration FFT monitor.

This module turns the JSON document delivered by the vibration endpoint into
per-channel statistics and chart geometry, keeping the pure statistics and
plotting code free of payload and error-reporting concerns.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import TypeAdapter, ValidationError

from vibration_fft.constants import CHANNEL_NAMES, PAYLOAD_KEYS
from vibration_fft.models import (
    ChannelResult,
    DashboardResult,
    FrameData,
    MonitorParameters,
    VibrationPayload,
)
from vibration_fft.models.pipeline_models import Magnitude
from vibration_fft.plotting import (
    axis_ticks,
    build_scale,
    map_peaks_to_markers,
    map_series_to_path,
)
from vibration_fft.statistics import MagnitudeSeries, compute_statistics


logger = logging.getLogger(__name__)

_MAGNITUDES = TypeAdapter(list[Magnitude])


# Custom exceptions
class MonitorError(Exception):
    """Base exception for monitor processing errors."""

    pass


class PayloadError(MonitorError):
    """Exception raised when the endpoint payload is unusable."""

    pass


class ProcessingError(MonitorError):
    """Exception raised when channel analysis fails."""

    pass


def _parse_timestamp(value: str | int | float | None) -> datetime | None:
    """Parse the payload timestamp, returning None if it cannot be read."""
    if value is None:
        return None
    try:
        if isinstance(value, (int, float)):
            # Epoch milliseconds, as produced by JavaScript clients
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        if value.endswith(("Z", "z")):
            # fromisoformat only accepts the Z suffix from Python 3.11
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    except (ValueError, OverflowError, OSError) as e:
        logger.warning(f"Ignoring unreadable payload timestamp {value!r}: {e}")
        return None


def _channel_magnitudes(name: str, values: list[float] | None) -> list[float]:
    """Validate one channel's magnitudes, returning an empty list if invalid."""
    try:
        return _MAGNITUDES.validate_python(values or [])
    except ValidationError as e:
        logger.warning(
            f"Dropping {name}: magnitudes must be finite and non-negative "
            f"({e.error_count()} invalid values)"
        )
        return []


def parse_payload(payload: dict[str, Any] | str | bytes) -> FrameData:
    """Decode an endpoint payload into a frame of four channels.

    Each channel is validated on its own: a channel holding a negative or
    non-finite magnitude is logged and left empty, and the other channels
    are kept.

    Args:
        payload: The decoded JSON object, or its raw text.

    Returns:
        FrameData with one magnitude list per channel. Channels missing from
        the payload or holding invalid magnitudes are present as empty lists.

    Raises:
        PayloadError: If the text is not JSON, the document does not match
            the expected shape, or the endpoint reported failure.
    """
    try:
        if isinstance(payload, (str, bytes)):
            document = VibrationPayload.model_validate_json(payload)
        else:
            document = VibrationPayload.model_validate(payload)
    except ValidationError as e:
        raise PayloadError(f"Malformed vibration payload: {e}") from e

    if not document.success or document.data is None:
        raise PayloadError(document.message or "Failed to fetch data")

    raw = document.data.model_dump(by_alias=True)
    channels = {
        name: _channel_magnitudes(name, raw.get(PAYLOAD_KEYS[name]))
        for name in CHANNEL_NAMES
    }

    return FrameData(channels=channels, timestamp=_parse_timestamp(document.timestamp))


def analyze_channel(
    name: str,
    series: MagnitudeSeries | None,
    params: MonitorParameters,
) -> ChannelResult:
    """Compute statistics and chart geometry for one channel.

    Args:
        name: Channel name used to label the result.
        series: Magnitude values of the channel, possibly empty.
        params: Monitor configuration.

    Returns:
        ChannelResult with statistics, line path, peak markers and axis
        ticks. An empty series gives zero statistics and no geometry.

    Raises:
        ProcessingError: If analysis fails and ``params.strict`` is set.
    """
    try:
        sampling = params.sampling.to_context()
        rect = params.chart.to_rect()
        max_frequency = params.chart.max_frequency

        if series is None or len(series) == 0:
            logger.warning(f"No FFT data available for {name}")
            return ChannelResult(name=name)

        statistics = compute_statistics(
            series,
            sampling,
            min_height=params.peaks.min_height,
            min_distance=params.peaks.min_distance,
        )
        if params.peaks.max_peaks < len(statistics.peaks):
            statistics = statistics.model_copy(
                update={"peaks": statistics.peaks[: params.peaks.max_peaks]}
            )

        scale = build_scale(series, rect, max_frequency)
        if scale is None:
            logger.warning(f"Chart for {name} has no room to plot; skipping geometry")
            return ChannelResult(name=name, statistics=statistics)

        path = map_series_to_path(series, sampling, rect, max_frequency)
        markers = map_peaks_to_markers(
            statistics.peaks, series, sampling, rect, max_frequency
        )
        x_ticks, y_ticks = axis_ticks(scale)

        return ChannelResult(
            name=name,
            statistics=statistics,
            path=path,
            markers=markers,
            baseline=scale.baseline,
            x_ticks=x_ticks,
            y_ticks=y_ticks,
        )
    except Exception as e:
        if params.strict:
            raise ProcessingError(f"Error analyzing {name}: {e}") from e
        logger.error(f"Error analyzing {name}: {str(e)}")
        return ChannelResult(name=name)


def analyze_frame(frame: FrameData, params: MonitorParameters) -> DashboardResult:
    """Analyze every channel of a frame in display order.

    Args:
        frame: Decoded magnitude arrays for each channel.
        params: Monitor configuration.

    Returns:
        DashboardResult with one ChannelResult per channel name.
    """
    results = [
        analyze_channel(name, frame.channels.get(name, []), params)
        for name in CHANNEL_NAMES
    ]
    return DashboardResult(channels=results, timestamp=frame.timestamp)


def process_payload(
    payload: dict[str, Any] | str | bytes,
    params: MonitorParameters | None = None,
) -> DashboardResult:
    """Parse an endpoint payload and analyze all of its channels.

    Args:
        payload: The decoded JSON object, or its raw text.
        params: Monitor configuration; defaults are used when omitted.

    Returns:
        DashboardResult for the frame.

    Raises:
        PayloadError: If the payload cannot be decoded.
    """
    frame = parse_payload(payload)
    return analyze_frame(frame, params or MonitorParameters())


def dominant_peaks(dashboard: DashboardResult) -> dict[str, float | None]:
    """Return the frequency of the strongest peak of each channel.

    Args:
        dashboard: Analyzed frame.

    Returns:
        Mapping of channel name to peak frequency in Hz, or None for
        channels without peaks.
    """
    return {
        result.name: (
            result.statistics.peaks[0].frequency if result.statistics.peaks else None
        )
        for result in dashboard.channels
    }
