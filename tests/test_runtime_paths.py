from __future__ import annotations

from pathlib import Path

from daisythemes import runtime_paths


def test_package_root_is_the_package_directory() -> None:
    root = runtime_paths.package_root()
    assert root.name == "daisythemes"
    assert (root / "themes").is_dir()
    assert (root / "cli.py").is_file()


def test_default_config_path(tmp_path: Path) -> None:
    assert runtime_paths.default_config_path(tmp_path) == tmp_path / "daisythemes.yaml"


def test_default_config_path_uses_cwd(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert runtime_paths.default_config_path() == Path.cwd() / "daisythemes.yaml"
