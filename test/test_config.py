import pytest

from cssrename.errors import ConfigError
from cssrename.utils.config import (
    DEFAULT_CONFIG,
    get_config_path,
    load_config,
    require_setting,
    save_config,
)


class TestLoadConfig:
    def test_defaults(self, isolated_config):
        config = load_config()
        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_config_path_follows_xdg(self, isolated_config):
        assert get_config_path() == isolated_config["config"] / "cssrename" / "config.toml"

    def test_merges_user_config(self, isolated_config):
        path = get_config_path()
        path.parent.mkdir(parents=True)
        path.write_text('[files]\nextensions = [".css", ".scss"]\n')

        config = load_config()
        assert config["files"]["extensions"] == [".css", ".scss"]
        assert config["logging"]["level"] == "info"
        assert config["summary"]["path"] == "changes-summary.json"

    def test_does_not_mutate_defaults(self, isolated_config):
        config = load_config()
        config["files"]["extensions"].append(".less")
        assert DEFAULT_CONFIG["files"]["extensions"] == [".css"]

    def test_malformed_toml(self, isolated_config):
        path = get_config_path()
        path.parent.mkdir(parents=True)
        path.write_text("[files\n")

        with pytest.raises(ConfigError, match="Invalid config file"):
            load_config()

    def test_invalid_extensions(self, isolated_config):
        path = get_config_path()
        path.parent.mkdir(parents=True)
        path.write_text('[files]\nextensions = ".css"\n')

        with pytest.raises(ConfigError, match="files.extensions"):
            load_config()


class TestSaveConfig:
    def test_round_trip(self, isolated_config):
        config = load_config()
        config["summary"]["path"] = "out/summary.json"

        path = save_config(config)

        assert path == get_config_path()
        assert load_config()["summary"]["path"] == "out/summary.json"


class TestRequireSetting:
    def test_strips_value(self):
        assert require_setting("  https://example.com/x.txt \n", "CHANGES_URL") == "https://example.com/x.txt"

    def test_missing(self):
        with pytest.raises(ConfigError, match="CHANGES_URL is not set"):
            require_setting(None, "CHANGES_URL")

    def test_blank(self):
        with pytest.raises(ConfigError, match="FILES_INPUT is not set"):
            require_setting("   ", "FILES_INPUT")
