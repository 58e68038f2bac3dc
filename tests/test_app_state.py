import numpy as np
import pytest

from vibration_fft.app_state import (
    REGISTRY_SIZE,
    clear_registry,
    get_series_by_id,
    register_series,
    registry_size,
    series_id_for,
)


@pytest.fixture(autouse=True)
def clean_registry():
    """Keep registered series from leaking between tests."""
    clear_registry()
    yield
    clear_registry()


def test_equal_series_share_an_id():
    assert series_id_for([0.1, 0.2, 0.3]) == series_id_for(np.array([0.1, 0.2, 0.3]))


def test_different_series_get_different_ids():
    assert series_id_for([0.1, 0.2]) != series_id_for([0.2, 0.1])
    assert series_id_for([]) != series_id_for([0.0])


def test_register_and_retrieve():
    series_id = register_series([0.5, 0.25])
    stored = get_series_by_id(series_id)
    assert series_id.startswith("series_")
    assert stored.tolist() == [0.5, 0.25]


def test_registered_copy_is_isolated():
    data = np.array([0.5, 0.25])
    series_id = register_series(data)
    data[0] = 9.0
    stored = get_series_by_id(series_id)
    assert stored[0] == 0.5
    assert not stored.flags.writeable


def test_explicit_id():
    assert register_series([1.0], series_id="custom") == "custom"
    assert get_series_by_id("custom").tolist() == [1.0]


def test_unknown_id_returns_none():
    assert get_series_by_id("series_missing") is None


def test_registry_evicts_oldest_series():
    first = register_series([0.0])
    for i in range(1, REGISTRY_SIZE + 10):
        register_series([float(i)])

    assert registry_size() == REGISTRY_SIZE
    assert get_series_by_id(first) is None
    assert get_series_by_id(series_id_for([float(REGISTRY_SIZE + 9)])) is not None


def test_reregistering_keeps_series_recent():
    kept = register_series([0.5])
    for i in range(REGISTRY_SIZE + 5):
        register_series([float(i)])
        register_series([0.5])

    assert get_series_by_id(kept).tolist() == [0.5]
    assert registry_size() == REGISTRY_SIZE
