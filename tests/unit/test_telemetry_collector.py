import os
import pytest
from unittest.mock import patch

from hwmon_service.sensors.group import MonitoringGroup
from hwmon_service.sensors.input_reading import InputKind
from hwmon_service.telemetry import InputSnapshot, TelemetryCollector, format_reading


@pytest.fixture
def groups(make_group):
    coretemp = make_group("hwmon0", name="coretemp\n", files={
        "temp1_input": "45230\n",
        "temp1_label": "Package id 0\n",
        "temp2_input": "44000\n",
        "temp2_label": "Core 0\n",
    })
    nct = make_group("hwmon1", name="nct6775\n", files={
        "fan1_input": "1200\n",
        "in0_input": "3300\n",
        "curr1_input": "7\n",
    })
    loaded = [MonitoringGroup.load(os.fspath(coretemp)), MonitoringGroup.load(os.fspath(nct))]
    yield loaded
    for group in loaded:
        group.close()


# format_reading tests
def test_format_reading_fractional():
    assert format_reading("CPU Core", 45.23, "°C") == "CPU Core: 45.23°C"


def test_format_reading_integral_value_has_no_fraction():
    assert format_reading("in0", 3300.0, "V") == "in0: 3300V"
    assert format_reading("fan1", 1200.0, " RPM") == "fan1: 1200 RPM"


def test_format_reading_zero():
    assert format_reading("temp1", 0.0, "°C") == "temp1: 0°C"


# collect tests
def test_collect_returns_one_snapshot_per_input_in_order(groups):
    snapshots = TelemetryCollector(groups=groups).collect()

    assert snapshots == [
        InputSnapshot("coretemp", "Package id 0", 45.23, "°C", InputKind.TEMPERATURE),
        InputSnapshot("coretemp", "Core 0", 44.0, "°C", InputKind.TEMPERATURE),
        InputSnapshot("nct6775", "curr1", 7.0, "curr", InputKind.OTHER),
        InputSnapshot("nct6775", "fan1", 1200.0, " RPM", InputKind.FAN),
        InputSnapshot("nct6775", "in0", 3300.0, "V", InputKind.VOLTAGE),
    ]
    assert [s.as_line() for s in snapshots][-1] == "in0: 3300V"


def test_collect_with_workers_matches_sequential(groups):
    sequential = TelemetryCollector(groups=groups).collect()
    parallel = TelemetryCollector(groups=groups, max_workers=4).collect()
    assert parallel == sequential


def test_collect_survives_read_failure(groups, caplog):
    with patch("hwmon_service.filesystem.os.pread", side_effect=OSError("I/O error")):
        with caplog.at_level("ERROR"):
            snapshots = TelemetryCollector(groups=groups).collect()
    assert len(snapshots) == 5
    assert all(s.value == 0.0 for s in snapshots)
    assert "Error reading" in caplog.text


def test_collect_without_groups():
    assert TelemetryCollector().collect() == []


def test_invalid_worker_count():
    with pytest.raises(ValueError):
        TelemetryCollector(groups=[], max_workers=0)

