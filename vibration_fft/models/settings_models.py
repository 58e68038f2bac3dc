"""Parameter models for analysis and chart configuration.

This module defines Pydantic models that encapsulate all configurable
parameters of the monitor: how bins map to frequencies, how peaks are
picked, and what canvas the charts are mapped onto. These models provide
validation, default values, and clear interfaces for customizing each step.
"""

from pydantic import BaseModel, Field

from vibration_fft.constants import (
    DEFAULT_CHART_HEIGHT,
    DEFAULT_CHART_WIDTH,
    DEFAULT_FFT_SIZE,
    DEFAULT_MAX_FREQUENCY,
    DEFAULT_MIN_DISTANCE,
    DEFAULT_MIN_HEIGHT,
    DEFAULT_SAMPLING_FREQUENCY,
    MAX_PEAKS,
)
from vibration_fft.models.core_models import Padding, PlotRect, SamplingContext


class SamplingParams(BaseModel):
    """Acquisition parameters of the edge device.

    Attributes:
        sampling_frequency: Sampling rate in Hz (default 128000).
        fft_size: FFT length in samples (default 8192).
    """

    sampling_frequency: float = Field(
        DEFAULT_SAMPLING_FREQUENCY, gt=0, description="Sampling rate in Hz"
    )
    fft_size: int = Field(DEFAULT_FFT_SIZE, gt=0, description="FFT length in samples")

    def to_context(self) -> SamplingContext:
        """Build the immutable sampling context for these parameters."""
        return SamplingContext(
            sampling_frequency=self.sampling_frequency, fft_size=self.fft_size
        )


class PeakDetectionParams(BaseModel):
    """Configuration parameters for spectral peak detection.

    A bin is reported as a peak when it reaches ``min_height`` and is
    strictly larger than every bin within ``min_distance`` on both sides.

    Attributes:
        min_height: Amplitude floor for peak candidates (default 0.1).
        min_distance: Half-width of the local-maximum window in bins (default 5).
        max_peaks: Number of strongest peaks to keep (1-5, default 5).
    """

    min_height: float = Field(
        DEFAULT_MIN_HEIGHT, ge=0.0, description="Amplitude floor for peaks"
    )
    min_distance: int = Field(
        DEFAULT_MIN_DISTANCE, ge=1, description="Half-width of the peak window"
    )
    max_peaks: int = Field(
        MAX_PEAKS, ge=1, le=MAX_PEAKS, description="Number of peaks to keep"
    )


class ChartParams(BaseModel):
    """Configuration parameters for the plot-space mapping of a channel.

    Attributes:
        width: Canvas width in pixels (default 700).
        height: Canvas height in pixels (default 300).
        padding: Margins around the plotting area.
        max_frequency: Display ceiling of the frequency axis in Hz (default 60 kHz).
            Bins above it are dropped from the chart.
    """

    width: float = Field(DEFAULT_CHART_WIDTH, gt=0, description="Canvas width")
    height: float = Field(DEFAULT_CHART_HEIGHT, gt=0, description="Canvas height")
    padding: Padding = Field(default_factory=Padding, description="Plot margins")
    max_frequency: float = Field(
        DEFAULT_MAX_FREQUENCY, gt=0, description="Frequency axis ceiling in Hz"
    )

    def to_rect(self) -> PlotRect:
        """Build the plot rectangle for these parameters."""
        return PlotRect(width=self.width, height=self.height, padding=self.padding)


class MonitorParameters(BaseModel):
    """Complete configuration for analyzing a dashboard frame.

    Aggregates the parameter sets used by every channel, providing a single
    object that can be passed to the pipeline. Each component uses sensible
    defaults but can be customized as needed.

    Attributes:
        sampling: Bin-to-frequency parameters.
        peaks: Peak detection parameters.
        chart: Chart geometry and display range.
        strict: Raise instead of degrading to empty results on analysis errors.
    """

    sampling: SamplingParams = Field(
        default_factory=SamplingParams, description="Sampling parameters"
    )
    peaks: PeakDetectionParams = Field(
        default_factory=PeakDetectionParams, description="Peak detection parameters"
    )
    chart: ChartParams = Field(
        default_factory=ChartParams, description="Chart parameters"
    )
    strict: bool = Field(False, description="Raise on analysis errors")
