from pathlib import Path

import pytest
from kbake.tools.fs import find_config_file, new_manifest_path


def test__find_config_file__searches_parents(tmp_path: Path) -> None:
    (tmp_path / "kbake.yaml").write_text("{}")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_config_file("kbake.yaml", nested) == tmp_path / "kbake.yaml"


def test__find_config_file__not_found(tmp_path: Path) -> None:
    assert find_config_file("does-not-exist.yaml", tmp_path, required=False) is None
    with pytest.raises(FileNotFoundError):
        find_config_file("does-not-exist.yaml", tmp_path)


def test__new_manifest_path__is_unique() -> None:
    first = new_manifest_path(Path("/tmp"))
    second = new_manifest_path(Path("/tmp"))
    assert first != second
    assert first.parent == Path("/tmp")
    assert first.name.startswith("baked-template-")
    assert first.suffix == ".yaml"
