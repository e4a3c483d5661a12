import os
import pytest


def write_group(root, dir_name, name="coretemp\n", files=None):
    """Create a fake hwmon directory under `root` with a name file and the given files."""
    group_dir = root / dir_name
    group_dir.mkdir(parents=True)
    if name is not None:
        (group_dir / "name").write_text(name)
    for file_name, content in (files or {}).items():
        path = group_dir / file_name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
    return group_dir


@pytest.fixture
def hwmon_root(tmp_path):
    root = tmp_path / "hwmon"
    root.mkdir()
    return root


@pytest.fixture
def make_group(hwmon_root):
    def _make(dir_name, name="coretemp\n", files=None):
        return write_group(hwmon_root, dir_name, name=name, files=files)
    return _make


@pytest.fixture
def input_path(tmp_path):
    """Write a single input (and optional label) file and return its path."""
    def _make(file_name, value, label=None):
        path = tmp_path / file_name
        if isinstance(value, bytes):
            path.write_bytes(value)
        else:
            path.write_text(value)
        if label is not None:
            stem = file_name[: -len("_input")]
            (tmp_path / f"{stem}_label").write_text(label)
        return os.fspath(path)
    return _make
