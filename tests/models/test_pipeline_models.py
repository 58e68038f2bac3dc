import pytest
from pydantic import ValidationError
from vibration_fft.models import (
    SeriesStatistics,
    ChannelResult,
    DashboardResult,
    FrameData,
    VibrationPayload,
    Peak,
)


def test_seriesstatistics_defaults():
    s = SeriesStatistics()
    assert (s.min, s.max, s.avg, s.rms) == (0.0, 0.0, 0.0, 0.0)
    assert s.peaks == ()


def test_seriesstatistics_caps_peaks():
    peaks = [Peak(bin_index=i, frequency=float(i), magnitude=1.0) for i in range(6)]
    with pytest.raises(ValidationError):
        SeriesStatistics(peaks=peaks)


def test_channelresult_defaults():
    c = ChannelResult()
    assert c.path == ()
    assert c.markers == ()
    assert c.baseline is None
    assert not c.has_data


def test_framedata_defaults():
    f = FrameData()
    assert f.channels == {}
    assert f.timestamp is None


def test_dashboard_channel_lookup():
    d = DashboardResult(channels=[ChannelResult(name="Channel1")])
    assert d.channel("Channel1").name == "Channel1"
    with pytest.raises(KeyError):
        d.channel("Channel9")


def test_payload_reads_aliases():
    p = VibrationPayload.model_validate(
        {"success": True, "data": {"V1": [0.1, 0.2], "V4": [0.0]}}
    )
    assert p.data.v1 == [0.1, 0.2]
    assert p.data.v2 is None
    assert p.data.v4 == [0.0]


@pytest.mark.parametrize("bad", [["x"], [[0.1]], "0.1"])
def test_payload_rejects_non_numeric_channels(bad):
    with pytest.raises(ValidationError):
        VibrationPayload.model_validate({"success": True, "data": {"V1": bad}})


def test_payload_leaves_magnitude_range_to_decoding():
    p = VibrationPayload.model_validate({"success": True, "data": {"V1": [-0.1]}})
    assert p.data.v1 == [-0.1]


def test_channelresult_is_frozen():
    c = ChannelResult(name="Channel1", path=[{"x": 1.0, "y": 2.0}])
    assert isinstance(c.path, tuple)
    with pytest.raises(ValidationError):
        c.name = "Channel2"
