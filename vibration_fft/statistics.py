"""Spectral statistics and peak detection over FFT magnitude arrays.

All functions here are pure: they never modify the series they are given
and keep no state between calls, so one fetched array can be shared by the
statistics and plotting code without copying.
"""

from collections.abc import Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from vibration_fft.constants import DEFAULT_MIN_DISTANCE, DEFAULT_MIN_HEIGHT, MAX_PEAKS
from vibration_fft.models import Peak, SamplingContext, SeriesStatistics

MagnitudeSeries = Sequence[float] | np.ndarray


def as_magnitude_array(series: MagnitudeSeries | None) -> np.ndarray:
    """Return a read-only float64 view of a magnitude series.

    Args:
        series: Sequence of magnitudes, 1D array, or None.

    Returns:
        A 1D float64 array; empty if ``series`` is None or empty.

    Raises:
        ValueError: If the series is not one-dimensional.
    """
    if series is None:
        return np.empty(0, dtype=np.float64)
    data = np.asarray(series, dtype=np.float64)
    if data.ndim != 1:
        raise ValueError(f"Magnitude series must be 1D, got shape {data.shape}")
    if data.flags.writeable:
        # A view, so the caller's array keeps its own flags
        data = data.view()
        data.flags.writeable = False
    return data


def _check_peak_params(min_height: float, min_distance: int) -> None:
    if min_distance < 1:
        raise ValueError(f"min_distance must be >= 1, got {min_distance}")
    if min_height < 0:
        raise ValueError(f"min_height must be >= 0, got {min_height}")


def series_aggregates(series: MagnitudeSeries | None) -> tuple[float, float, float, float]:
    """Compute min, max, mean and RMS of a magnitude series.

    Sums are accumulated in float64. RMS is the square root of the mean of
    the squared values.

    Args:
        series: Magnitude values, possibly empty.

    Returns:
        Tuple ``(min, max, avg, rms)``; all zeros for an empty series.
    """
    data = as_magnitude_array(series)
    if data.size == 0:
        return 0.0, 0.0, 0.0, 0.0

    minimum = float(np.min(data))
    maximum = float(np.max(data))
    avg = float(np.mean(data, dtype=np.float64))
    rms = float(np.sqrt(np.mean(np.square(data), dtype=np.float64)))
    return minimum, maximum, avg, rms


def find_peaks(
    series: MagnitudeSeries | None,
    sampling: SamplingContext,
    min_height: float = DEFAULT_MIN_HEIGHT,
    min_distance: int = DEFAULT_MIN_DISTANCE,
    max_peaks: int = MAX_PEAKS,
) -> list[Peak]:
    """Find the strongest strict local maxima of a magnitude series.

    A bin ``i`` is a peak when ``series[i] >= min_height`` and every other
    bin in ``[i - min_distance, i + min_distance]`` is strictly smaller.
    An equal neighbor disqualifies the bin, so plateaus produce no peak.
    Bins closer than ``min_distance`` to either end are never considered
    because their window is incomplete.

    Args:
        series: Magnitude values, one per frequency bin.
        sampling: Context giving each bin its frequency.
        min_height: Amplitude floor for candidates (default 0.1).
        min_distance: Half-width of the comparison window in bins (default 5).
        max_peaks: Number of peaks to return at most (default 5).

    Returns:
        Peaks sorted by descending magnitude; equal magnitudes keep
        ascending bin order. Empty if the series has ``2 * min_distance``
        bins or fewer.

    Raises:
        ValueError: If ``min_distance < 1`` or ``min_height < 0``.
    """
    _check_peak_params(min_height, min_distance)
    data = as_magnitude_array(series)
    if data.size <= 2 * min_distance:
        return []

    # Row k is the window centred on bin k + min_distance
    windows = sliding_window_view(data, 2 * min_distance + 1)
    centers = windows[:, min_distance]
    neighbors = np.delete(windows, min_distance, axis=1)
    is_peak = (centers >= min_height) & np.all(neighbors < centers[:, None], axis=1)

    peaks = [
        Peak(
            bin_index=int(i),
            frequency=sampling.frequency(int(i)),
            magnitude=float(data[i]),
        )
        for i in np.flatnonzero(is_peak) + min_distance
    ]

    # sorted() is stable with reverse=True, so ties stay in bin order
    peaks = sorted(peaks, key=lambda p: p.magnitude, reverse=True)
    return peaks[:max_peaks]


def compute_statistics(
    series: MagnitudeSeries | None,
    sampling: SamplingContext,
    min_height: float = DEFAULT_MIN_HEIGHT,
    min_distance: int = DEFAULT_MIN_DISTANCE,
) -> SeriesStatistics:
    """Summarize a magnitude series and find its top five peaks.

    Args:
        series: Magnitude values, possibly empty.
        sampling: Context giving each bin its frequency.
        min_height: Amplitude floor for peaks (default 0.1).
        min_distance: Half-width of the peak window in bins (default 5).

    Returns:
        SeriesStatistics with min, max, avg, rms and up to five peaks.
        An empty series yields all zeros and no peaks.

    Raises:
        ValueError: If ``min_distance < 1`` or ``min_height < 0``.
    """
    _check_peak_params(min_height, min_distance)
    data = as_magnitude_array(series)
    if data.size == 0:
        return SeriesStatistics()

    minimum, maximum, avg, rms = series_aggregates(data)
    peaks = find_peaks(data, sampling, min_height, min_distance, MAX_PEAKS)
    return SeriesStatistics(min=minimum, max=maximum, avg=avg, rms=rms, peaks=peaks)
