"""Shared constants for the vibration FFT monitor."""

# Channel names in display order, and the payload keys they are read from.
CHANNEL_NAMES: tuple[str, ...] = ("Channel1", "Channel2", "Channel3", "Channel4")
PAYLOAD_KEYS: dict[str, str] = {
    "Channel1": "V1",
    "Channel2": "V2",
    "Channel3": "V3",
    "Channel4": "V4",
}

# Acquisition defaults of the edge device
DEFAULT_SAMPLING_FREQUENCY = 128000.0  # Hz
DEFAULT_FFT_SIZE = 8192

# Display ceiling of the frequency axis (0 - 60 kHz)
DEFAULT_MAX_FREQUENCY = 60000.0

# Peak detection defaults
DEFAULT_MIN_HEIGHT = 0.1
DEFAULT_MIN_DISTANCE = 5
MAX_PEAKS = 5

# Floor applied to the magnitude range so flat series stay finite
MIN_Y_RANGE = 0.001

# Chart geometry defaults, in pixels
DEFAULT_CHART_WIDTH = 700.0
DEFAULT_CHART_HEIGHT = 300.0
DEFAULT_PADDING = {"top": 40.0, "right": 40.0, "bottom": 60.0, "left": 80.0}

# Axis tick ratios along each plot dimension
X_TICK_RATIOS: tuple[float, ...] = (0.0, 0.2, 0.4, 0.6, 0.8, 1.0)
Y_TICK_RATIOS: tuple[float, ...] = (0.0, 0.25, 0.5, 0.75, 1.0)
