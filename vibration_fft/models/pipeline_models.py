"""Models for representing analysis stages.

This module contains Pydantic models that encapsulate the input and output
of each stage of the monitor: the raw payload delivered by the data source,
the decoded frame of four channels, per-channel statistics and plot-space
geometry, and the aggregated dashboard result.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from vibration_fft.models.core_models import Peak, PlotPoint

Magnitude = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class SeriesStatistics(BaseModel):
    """Summary of a magnitude array.

    Recomputed in full on every call; an empty array yields the zero struct.

    Attributes:
        min: Smallest magnitude.
        max: Largest magnitude.
        avg: Arithmetic mean of the magnitudes.
        rms: Square root of the mean of squared magnitudes.
        peaks: Strongest local maxima, highest magnitude first (at most 5).
    """

    model_config = ConfigDict(frozen=True)

    min: float = Field(0.0, description="Smallest magnitude")
    max: float = Field(0.0, description="Largest magnitude")
    avg: float = Field(0.0, description="Mean magnitude")
    rms: float = Field(0.0, description="Root mean square magnitude")
    peaks: tuple[Peak, ...] = Field(
        (), max_length=5, description="Top peaks by magnitude"
    )


class PeakMarker(BaseModel):
    """A detected peak together with its position in plot space."""

    model_config = ConfigDict(frozen=True)

    peak: Peak
    point: PlotPoint


class AxisTick(BaseModel):
    """A tick along one chart axis.

    Attributes:
        position: Canvas coordinate of the tick (x for the frequency axis,
            y for the magnitude axis).
        value: Data value the tick stands for (Hz or magnitude).
    """

    model_config = ConfigDict(frozen=True)

    position: float
    value: float


class ChannelResult(BaseModel):
    """Everything needed to draw and summarize one channel.

    Attributes:
        name: Channel name, e.g. "Channel1".
        statistics: Aggregates and peaks of the channel's magnitude array.
        path: Plot-space points of the magnitude line, in bin order.
        markers: Plot-space positions of the peaks shown on the chart.
        baseline: Canvas y of the plot's bottom edge, or None when unplottable.
        x_ticks: Frequency axis ticks.
        y_ticks: Magnitude axis ticks.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="Channel name")
    statistics: SeriesStatistics = Field(
        default_factory=SeriesStatistics, description="Series statistics"
    )
    path: tuple[PlotPoint, ...] = Field((), description="Line points")
    markers: tuple[PeakMarker, ...] = Field((), description="Peak markers")
    baseline: float | None = Field(None, description="Bottom edge of the plot")
    x_ticks: tuple[AxisTick, ...] = Field((), description="X axis ticks")
    y_ticks: tuple[AxisTick, ...] = Field((), description="Y axis ticks")

    @property
    def has_data(self) -> bool:
        return bool(self.path)


class ChannelPayload(BaseModel):
    """Magnitude arrays as delivered under the payload's ``data`` key.

    Values are only required to be numbers here; the magnitude constraints
    are checked per channel when the frame is decoded.
    """

    v1: list[float] | None = Field(None, alias="V1")
    v2: list[float] | None = Field(None, alias="V2")
    v3: list[float] | None = Field(None, alias="V3")
    v4: list[float] | None = Field(None, alias="V4")


class VibrationPayload(BaseModel):
    """Top-level JSON document returned by the vibration endpoint.

    Attributes:
        success: Whether the endpoint produced data.
        data: Per-channel magnitude arrays, or None on failure.
        timestamp: Acquisition time as sent by the endpoint.
        message: Error description sent alongside ``success: false``.
    """

    success: bool = Field(False, description="Endpoint success flag")
    data: ChannelPayload | None = Field(None, description="Channel arrays")
    timestamp: str | int | float | None = Field(None, description="Acquisition time")
    message: str | None = Field(None, description="Endpoint error message")


class FrameData(BaseModel):
    """One decoded refresh of all four channels.

    Attributes:
        channels: Magnitude arrays keyed by channel name; missing channels
            are present as empty lists.
        timestamp: Acquisition time, or None if absent or unparseable.
    """

    channels: dict[str, list[float]] = Field(
        default_factory=dict, description="Magnitude arrays by channel"
    )
    timestamp: datetime | None = Field(None, description="Acquisition time")


class DashboardResult(BaseModel):
    """Analysis results for every channel of a frame.

    Attributes:
        channels: Per-channel results in display order.
        timestamp: Acquisition time of the analyzed frame.
    """

    channels: list[ChannelResult] = Field(
        default_factory=list, description="Per-channel results"
    )
    timestamp: datetime | None = Field(None, description="Acquisition time")

    def channel(self, name: str) -> ChannelResult:
        """Look up a channel result by name.

        Raises:
            KeyError: If no channel with that name was analyzed.
        """
        for result in self.channels:
            if result.name == name:
                return result
        raise KeyError(name)
