"""Domain models for the vibration FFT monitor.

This module provides a centralized location for all data models used
throughout the monitor. It includes:

- Core value types (SamplingContext, Peak, PlotRect, PlotPoint, PlotScale)
- Analysis stage inputs and results (VibrationPayload, FrameData,
  SeriesStatistics, ChannelResult, DashboardResult)
- Configuration parameters for sampling, peak detection and charts

All models are built using Pydantic for data validation and serialization,
ensuring type safety and clear interfaces between components.
"""

# Re-export core models
from vibration_fft.models.core_models import (
    SamplingContext,
    Peak,
    Padding,
    PlotRect,
    PlotPoint,
    PlotScale,
)

# Re-export pipeline models
from vibration_fft.models.pipeline_models import (
    SeriesStatistics,
    PeakMarker,
    AxisTick,
    ChannelResult,
    ChannelPayload,
    VibrationPayload,
    FrameData,
    DashboardResult,
)

# Re-export setting models
from vibration_fft.models.settings_models import (
    SamplingParams,
    PeakDetectionParams,
    ChartParams,
    MonitorParameters,
)
