import tomllib

import pytest

from oxirun.config import get_allowed_plugins, get_config, get_oxirun_dir, read_config


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    home = tmp_path / "xdg"
    home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home


def test_allowed_plugins_keeps_only_strings():
    config = {"plugins": ["libapplications.so", 3, True, "other.so", {"a": 1}]}
    assert get_allowed_plugins(config) == ["libapplications.so", "other.so"]


def test_allowed_plugins_missing_key():
    assert get_allowed_plugins({"applications": {"max_entries": 3}}) == []


def test_allowed_plugins_not_a_list():
    assert get_allowed_plugins({"plugins": "libapplications.so"}) == []


def test_get_oxirun_dir_creates_directory(config_home):
    result = get_oxirun_dir()
    assert result == config_home / "oxirun"
    assert result.is_dir()


def test_get_oxirun_dir_is_idempotent(config_home):
    first = get_oxirun_dir()
    second = get_oxirun_dir()
    assert first == second
    assert second.is_dir()


def test_relative_xdg_config_home_falls_back_to_home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", "relative/path")
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / ".config").mkdir()
    assert get_oxirun_dir() == tmp_path / ".config" / "oxirun"


def test_missing_config_home_parent_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "does" / "not" / "exist"))
    with pytest.raises(FileNotFoundError):
        get_oxirun_dir()


def test_get_config_without_file_is_empty(config_home):
    assert get_config() == {}


def test_get_config_reads_file(config_home):
    directory = config_home / "oxirun"
    directory.mkdir()
    (directory / "config.toml").write_text(
        'plugins = ["libapplications.so"]\n\n[applications]\nmax_entries = 3\n'
    )
    config = get_config()
    assert config == {"plugins": ["libapplications.so"], "applications": {"max_entries": 3}}
    assert get_allowed_plugins(config) == ["libapplications.so"]


def test_read_config_invalid_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("plugins = [")
    with pytest.raises(tomllib.TOMLDecodeError):
        read_config(path)


def test_read_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_config(tmp_path / "missing.toml")