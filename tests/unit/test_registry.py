import os
import pytest
from unittest.mock import patch

from hwmon_service.exceptions import FilesystemError
from hwmon_service.sensors.group import MonitoringGroup
from hwmon_service.sensors.registry import Registry


def test_discover_all_loads_every_group(hwmon_root, make_group):
    make_group("hwmon0", name="acpitz\n", files={"temp1_input": "27800\n"})
    make_group("hwmon1", name="coretemp\n", files={
        "temp1_input": "45230\n",
        "temp1_label": "Package id 0\n",
        "temp2_input": "44000\n",
        "temp2_label": "Core 0\n",
    })

    with Registry(root=os.fspath(hwmon_root)) as registry:
        groups = registry.discover_all()
        assert [g.name for g in groups] == ["acpitz", "coretemp"]
        assert [len(g) for g in groups] == [1, 2]
        assert registry.groups == groups

    assert all(r.closed for g in groups for r in g.inputs)
    assert registry.groups == []


def test_empty_root_returns_no_groups(hwmon_root):
    assert Registry(root=os.fspath(hwmon_root)).discover_all() == []


def test_missing_root_raises(tmp_path):
    with pytest.raises(FilesystemError):
        Registry(root=os.fspath(tmp_path / "does-not-exist")).discover_all()


def test_failing_group_aborts_by_default_and_closes_loaded_groups(hwmon_root, make_group):
    make_group("hwmon0", name="acpitz\n", files={"temp1_input": "27800\n"})
    make_group("hwmon1", name=None, files={"temp1_input": "45230\n"})

    loaded = []
    real_load = MonitoringGroup.load

    def tracking_load(directory_path, filesystem=None):
        group = real_load(directory_path, filesystem=filesystem)
        loaded.append(group)
        return group

    registry = Registry(root=os.fspath(hwmon_root))
    with patch.object(MonitoringGroup, "load", side_effect=tracking_load):
        with pytest.raises(FilesystemError):
            registry.discover_all()

    assert registry.groups == []
    assert [g.name for g in loaded] == ["acpitz"]
    assert all(r.closed for r in loaded[0].inputs)
    assert len(loaded[0].inputs) == 1


def test_failing_group_skipped_when_configured(hwmon_root, make_group, caplog):
    make_group("hwmon0", name="acpitz\n", files={"temp1_input": "27800\n"})
    make_group("hwmon1", name=None, files={"temp1_input": "45230\n"})
    make_group("hwmon2", name="nvme\n", files={"temp1_input": "38850\n", "temp1_label": "Composite\n"})

    registry = Registry(root=os.fspath(hwmon_root), skip_failed_groups=True)
    with caplog.at_level("WARNING"):
        groups = registry.discover_all()

    assert [g.name for g in groups] == ["acpitz", "nvme"]
    assert "Skipping group" in caplog.text
    assert groups[1].inputs[0].update() == 38.85
    registry.close()


def test_plain_file_in_root_is_a_group_failure(hwmon_root, make_group):
    make_group("hwmon0", name="acpitz\n")
    (hwmon_root / "README").write_text("not a group\n")

    with pytest.raises(FilesystemError):
        Registry(root=os.fspath(hwmon_root)).discover_all()

    groups = Registry(root=os.fspath(hwmon_root), skip_failed_groups=True).discover_all()
    assert [g.name for g in groups] == ["acpitz"]


def test_broken_input_does_not_abort_discovery(hwmon_root, make_group):
    group_dir = make_group("hwmon0", name="nct6775\n", files={
        "in0_input": "3300\n",
        "temp2_input": "41000\n",
    })
    os.symlink(os.fspath(group_dir / "gone"), os.fspath(group_dir / "fan1_input"))
    (group_dir / "in0_label").mkdir()
    make_group("hwmon1", name="acpitz\n", files={"temp1_input": "27800\n"})

    with Registry(root=os.fspath(hwmon_root)) as registry:
        groups = registry.discover_all()
        assert [g.name for g in groups] == ["nct6775", "acpitz"]
        assert [r.stem for r in groups[0]] == ["temp2"]
        assert groups[0].inputs[0].update() == 41.0
