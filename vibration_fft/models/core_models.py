"""Core domain models for FFT magnitude analysis and plotting."""

from pydantic import BaseModel, ConfigDict, Field

from vibration_fft.constants import (
    DEFAULT_CHART_HEIGHT,
    DEFAULT_CHART_WIDTH,
    DEFAULT_PADDING,
)


class SamplingContext(BaseModel):
    """Acquisition parameters that give each FFT bin its frequency.

    A magnitude array produced by an FFT of ``fft_size`` samples taken at
    ``sampling_frequency`` has a fixed spacing between bins. The context is
    supplied once per series and never changes for its lifetime.

    Attributes:
        sampling_frequency: Sampling rate of the time-domain signal in Hz.
        fft_size: Number of samples fed to the FFT.
    """

    model_config = ConfigDict(frozen=True)

    sampling_frequency: float = Field(..., gt=0, description="Sampling rate in Hz")
    fft_size: int = Field(..., gt=0, description="FFT length in samples")

    def frequency(self, bin_index: int) -> float:
        """Return the frequency in Hz of the given bin.

        Args:
            bin_index: Zero-based index into the magnitude array.

        Returns:
            ``bin_index * sampling_frequency / fft_size``.
        """
        return bin_index * self.sampling_frequency / self.fft_size

    @property
    def resolution(self) -> float:
        """Frequency spacing between adjacent bins in Hz/bin."""
        return self.sampling_frequency / self.fft_size

    @property
    def nyquist(self) -> float:
        """Highest frequency representable by the sampled signal."""
        return self.sampling_frequency / 2


class Peak(BaseModel):
    """A local maximum found in a magnitude array.

    Peaks are only ever built by peak detection from a series and its
    sampling context. Two peaks with the same fields are equal.

    Attributes:
        bin_index: Index of the peak bin (non-negative).
        frequency: Frequency of the bin in Hz (non-negative).
        magnitude: Magnitude value at the bin.
    """

    model_config = ConfigDict(frozen=True)

    bin_index: int = Field(..., ge=0, description="Index of the peak bin")
    frequency: float = Field(..., ge=0, description="Frequency of the bin in Hz")
    magnitude: float = Field(..., description="Magnitude at the bin")


class Padding(BaseModel):
    """Margins between the canvas edge and the plotting area, in pixels."""

    model_config = ConfigDict(frozen=True)

    top: float = Field(DEFAULT_PADDING["top"], ge=0)
    right: float = Field(DEFAULT_PADDING["right"], ge=0)
    bottom: float = Field(DEFAULT_PADDING["bottom"], ge=0)
    left: float = Field(DEFAULT_PADDING["left"], ge=0)


class PlotRect(BaseModel):
    """Target canvas for coordinate mapping.

    The plotting area is the canvas minus its padding. Padding larger than
    the canvas is allowed here; such a rect simply has nothing to draw in.

    Attributes:
        width: Canvas width in pixels (positive).
        height: Canvas height in pixels (positive).
        padding: Margins around the plotting area.
    """

    model_config = ConfigDict(frozen=True)

    width: float = Field(DEFAULT_CHART_WIDTH, gt=0, description="Canvas width")
    height: float = Field(DEFAULT_CHART_HEIGHT, gt=0, description="Canvas height")
    padding: Padding = Field(default_factory=Padding, description="Plot margins")

    @property
    def plot_width(self) -> float:
        return self.width - self.padding.left - self.padding.right

    @property
    def plot_height(self) -> float:
        return self.height - self.padding.top - self.padding.bottom

    @property
    def is_plottable(self) -> bool:
        """True when both plot dimensions are strictly positive."""
        return self.plot_width > 0 and self.plot_height > 0


class PlotPoint(BaseModel):
    """A point in canvas space: origin top-left, y growing downward."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class PlotScale(BaseModel):
    """Linear mapping from (frequency, magnitude) to canvas coordinates.

    One scale is shared by the line path of a series and by the markers of
    its peaks, so a marker always lands on the line it annotates.

    Attributes:
        left: Canvas x of the plot's left edge.
        top: Canvas y of the plot's top edge.
        plot_width: Width of the plotting area (positive).
        plot_height: Height of the plotting area (positive).
        y_min: Magnitude shown at the bottom edge.
        y_range: Magnitude span from bottom to top edge (positive).
        max_frequency: Frequency shown at the right edge, in Hz.
    """

    model_config = ConfigDict(frozen=True)

    left: float
    top: float
    plot_width: float = Field(..., gt=0)
    plot_height: float = Field(..., gt=0)
    y_min: float = 0.0
    y_range: float = Field(..., gt=0)
    max_frequency: float = Field(..., gt=0)

    def x(self, frequency: float) -> float:
        return self.left + (frequency / self.max_frequency) * self.plot_width

    def y(self, magnitude: float) -> float:
        return (
            self.top
            + self.plot_height
            - ((magnitude - self.y_min) / self.y_range) * self.plot_height
        )

    @property
    def baseline(self) -> float:
        """Canvas y of the plot's bottom edge."""
        return self.top + self.plot_height

    def contains(self, frequency: float) -> bool:
        """Whether a frequency falls inside the displayed range."""
        return frequency <= self.max_frequency
