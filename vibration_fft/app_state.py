"""Registry of magnitude arrays by content identifier.

Dashboard panels, peak cards and summaries all read the same fetched arrays.
Registering an array once gives it a stable identifier derived from its
contents, which the cached analysis functions use as their key.

The registry keeps the most recently registered arrays only. A monitor
polling every few seconds registers four new arrays per refresh, so older
entries are evicted once ``REGISTRY_SIZE`` is reached.
"""

import logging
import zlib
from collections import OrderedDict

import numpy as np

from vibration_fft.statistics import MagnitudeSeries, as_magnitude_array

logger = logging.getLogger(__name__)

# Twice the channel cache, so every cached result still has its array
REGISTRY_SIZE = 64

# In-memory registry of magnitude arrays by ID, oldest first
_series_registry: OrderedDict[str, np.ndarray] = OrderedDict()


def series_id_for(series: MagnitudeSeries | None) -> str:
    """Compute the content identifier of a magnitude series.

    Args:
        series: Magnitude values, possibly empty.

    Returns:
        Identifier of the form ``series_<crc32>_<length>`` over the float64
        bytes, so equal arrays always share an identifier.
    """
    data = as_magnitude_array(series)
    crc = zlib.crc32(data.tobytes()) & 0xFFFFFFFF
    return f"series_{crc:08x}_{data.size}"


def register_series(series: MagnitudeSeries | None, series_id: str | None = None) -> str:
    """Register a magnitude series in the global registry.

    Stores a read-only float64 copy so later changes to the caller's array
    cannot alter cached results. If no ID is provided, the content
    identifier is used. Registering an existing ID marks it as most recent;
    the oldest entries are dropped beyond ``REGISTRY_SIZE``.

    Args:
        series: Magnitude values to register.
        series_id: Optional identifier to register the series under.

    Returns:
        The series identifier (either provided or generated).
    """
    data = np.array(as_magnitude_array(series), dtype=np.float64)
    data.flags.writeable = False
    if series_id is None:
        series_id = series_id_for(data)

    _series_registry[series_id] = data
    _series_registry.move_to_end(series_id)
    while len(_series_registry) > REGISTRY_SIZE:
        evicted, _ = _series_registry.popitem(last=False)
        logger.debug(f"Evicted {evicted} from series registry")

    logger.debug(f"Registered {data.size} bins as {series_id}")
    return series_id


def get_series_by_id(series_id: str) -> np.ndarray | None:
    """Retrieve a registered series by its identifier.

    Args:
        series_id: Identifier returned by :func:`register_series`.

    Returns:
        The registered read-only array, or None if not found.
    """
    return _series_registry.get(series_id)


def registry_size() -> int:
    """Return the number of registered series."""
    return len(_series_registry)


def clear_registry() -> None:
    """Forget every registered series."""
    _series_registry.clear()
