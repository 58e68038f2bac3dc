"""Caching mechanisms for channel analysis.

A dashboard render reads each channel's statistics several times (peak
cards, chart panel, summary footer). This module provides cached versions
of the analysis functions keyed by the registered series identifier and
scalar parameters, so each fetched array is analyzed once per parameter
set.
"""

from functools import lru_cache

from vibration_fft.app_state import get_series_by_id, register_series
from vibration_fft.constants import CHANNEL_NAMES
from vibration_fft.models import (
    ChannelResult,
    ChartParams,
    DashboardResult,
    FrameData,
    MonitorParameters,
    Padding,
    PeakDetectionParams,
    SamplingContext,
    SamplingParams,
    SeriesStatistics,
)
from vibration_fft.pipeline import analyze_channel
from vibration_fft.statistics import compute_statistics

# Four channels per frame, a few frames of history
STATISTICS_CACHE_SIZE = 32
CHANNEL_CACHE_SIZE = 32


@lru_cache(maxsize=STATISTICS_CACHE_SIZE)
def cached_statistics(
    series_id: str,
    sampling_frequency: float,
    fft_size: int,
    min_height: float,
    min_distance: int,
) -> SeriesStatistics:
    """Cached version of :func:`vibration_fft.statistics.compute_statistics`.

    Retrieves the series by ID and summarizes it. An unknown ID is treated
    as an empty series.

    Args:
        series_id: Identifier of a registered series.
        sampling_frequency: Sampling rate in Hz.
        fft_size: FFT length in samples.
        min_height: Amplitude floor for peaks.
        min_distance: Half-width of the peak window in bins.

    Returns:
        SeriesStatistics for the registered series.
    """
    series = get_series_by_id(series_id)
    sampling = SamplingContext(sampling_frequency=sampling_frequency, fft_size=fft_size)
    return compute_statistics(series, sampling, min_height, min_distance)


@lru_cache(maxsize=CHANNEL_CACHE_SIZE)
def cached_channel_analysis(
    name: str,
    series_id: str,
    sampling_frequency: float,
    fft_size: int,
    min_height: float,
    min_distance: int,
    max_peaks: int,
    width: float,
    height: float,
    pad_top: float,
    pad_right: float,
    pad_bottom: float,
    pad_left: float,
    max_frequency: float,
) -> ChannelResult:
    """Cached version of :func:`vibration_fft.pipeline.analyze_channel`.

    Args:
        name: Channel name used to label the result.
        series_id: Identifier of a registered series.
        sampling_frequency: Sampling rate in Hz.
        fft_size: FFT length in samples.
        min_height: Amplitude floor for peaks.
        min_distance: Half-width of the peak window in bins.
        max_peaks: Number of peaks to keep.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        pad_top: Top padding in pixels.
        pad_right: Right padding in pixels.
        pad_bottom: Bottom padding in pixels.
        pad_left: Left padding in pixels.
        max_frequency: Display ceiling of the frequency axis in Hz.

    Returns:
        ChannelResult for the registered series.
    """
    series = get_series_by_id(series_id)
    params = MonitorParameters(
        sampling=SamplingParams(
            sampling_frequency=sampling_frequency, fft_size=fft_size
        ),
        peaks=PeakDetectionParams(
            min_height=min_height, min_distance=min_distance, max_peaks=max_peaks
        ),
        chart=ChartParams(
            width=width,
            height=height,
            padding=Padding(
                top=pad_top, right=pad_right, bottom=pad_bottom, left=pad_left
            ),
            max_frequency=max_frequency,
        ),
    )
    return analyze_channel(name, series, params)


def analyze_frame_cached(
    frame: FrameData, params: MonitorParameters | None = None
) -> DashboardResult:
    """Analyze a frame through the channel cache.

    Registers each channel's array and looks up its analysis, so repeated
    calls with the same arrays and parameters do no new work.

    Args:
        frame: Decoded magnitude arrays for each channel.
        params: Monitor configuration; defaults are used when omitted.

    Returns:
        DashboardResult with one ChannelResult per channel name.
    """
    params = params or MonitorParameters()
    sampling, peaks, chart = params.sampling, params.peaks, params.chart

    results = []
    for name in CHANNEL_NAMES:
        series_id = register_series(frame.channels.get(name, []))
        results.append(
            cached_channel_analysis(
                name,
                series_id,
                sampling.sampling_frequency,
                sampling.fft_size,
                peaks.min_height,
                peaks.min_distance,
                peaks.max_peaks,
                chart.width,
                chart.height,
                chart.padding.top,
                chart.padding.right,
                chart.padding.bottom,
                chart.padding.left,
                chart.max_frequency,
            )
        )
    return DashboardResult(channels=results, timestamp=frame.timestamp)


def clear_all_caches() -> None:
    """Clear all analysis caches.

    Useful when memory usage becomes a concern or to force recomputation.
    The series registry is left untouched.
    """
    cached_statistics.cache_clear()
    cached_channel_analysis.cache_clear()
