"""Tests for offspring.toml discovery."""

from pathlib import Path

import pytest

from offspring.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    candidate_paths,
    find_config,
)


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert find_config(tmp_path) == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None

    def test_env_var_expands_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / "types.toml").write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, "~/types.toml")
        assert find_config() == tmp_path / "types.toml"


class TestCandidatePaths:
    def test_nearest_first(self, tmp_path: Path) -> None:
        child = tmp_path / "a"
        child.mkdir()
        paths = list(candidate_paths(child))
        assert paths[0] == child.resolve() / CONFIG_FILENAME
        assert paths[1] == tmp_path.resolve() / CONFIG_FILENAME
        assert paths[-1].parent == paths[-1].parent.parent
