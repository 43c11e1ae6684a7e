"""Unit tests for postmore.api.config.PostMoreConfig module."""

import json

import pytest

from postmore.api.config import ConfigError, PostMoreConfig, get_home_dir

pytestmark = pytest.mark.config


class TestPostMoreConfig:
    """Test loading and saving the config file."""

    def test_defaults_when_file_missing(self, postmore_home):
        config = PostMoreConfig.load()
        assert config.filter_name == "postmore"
        assert config.link_text == "Read more"
        assert config.log_level == "INFO"
        assert not (postmore_home / "config.json").exists()

    def test_config_path_under_home(self, postmore_home):
        assert PostMoreConfig.get_config_path() == postmore_home.resolve() / "config.json"

    def test_load_values(self, write_config):
        write_config({"filter_name": "excerpt", "link_text": "Continue", "log_level": "debug"})
        config = PostMoreConfig.load()
        assert config.filter_name == "excerpt"
        assert config.link_text == "Continue"
        assert config.log_level == "DEBUG"

    def test_invalid_json(self, write_config):
        write_config("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            PostMoreConfig.load()

    def test_non_object_json(self, write_config):
        write_config("[1, 2]")
        with pytest.raises(ConfigError, match="must contain a JSON object"):
            PostMoreConfig.load()

    def test_unknown_field_rejected(self, write_config):
        write_config({"markers": ["<!--cut-->"]})
        with pytest.raises(ConfigError, match="markers"):
            PostMoreConfig.load()

    def test_bad_filter_name(self, write_config):
        write_config({"filter_name": "not a name"})
        with pytest.raises(ConfigError, match="filter_name"):
            PostMoreConfig.load()

    def test_bad_log_level(self, write_config):
        write_config({"log_level": "LOUD"})
        with pytest.raises(ConfigError, match="log_level"):
            PostMoreConfig.load()

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)

    def test_save_round_trip(self, postmore_home):
        PostMoreConfig(link_text="More...").save()
        path = postmore_home / "config.json"
        assert json.loads(path.read_text(encoding="utf-8"))["link_text"] == "More..."
        assert not path.with_suffix(".json.tmp").exists()
        assert PostMoreConfig.load().link_text == "More..."

    def test_save_failure_raises_runtime_error(self, postmore_home):
        postmore_home.parent.mkdir(parents=True, exist_ok=True)
        postmore_home.write_text("a file, not a directory", encoding="utf-8")
        with pytest.raises(RuntimeError, match="Failed to save config"):
            PostMoreConfig().save()


class TestGetHomeDir:
    """Test home directory resolution."""

    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("POSTMORE_HOME", str(tmp_path / "elsewhere"))
        assert get_home_dir() == (tmp_path / "elsewhere").resolve()
        assert get_home_dir("config.json") == (tmp_path / "elsewhere").resolve() / "config.json"

    def test_falls_back_to_home(self, tmp_path, monkeypatch):
        monkeypatch.delenv("POSTMORE_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_home_dir() == tmp_path / ".postmore"
