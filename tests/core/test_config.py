"""Tests for configuration loading."""

from pathlib import Path

import pytest

from vk_audio.core.config import (
    Config,
    LoggingConfig,
    create_default_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    load_config,
    write_default_config,
)

ENV_VARS = ("VK_AUDIO_API_VERSION", "VK_AUDIO_LOG_LEVEL")


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate XDG dirs, the working directory and override variables."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        # setenv first so teardown also removes values loaded from .env
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path / "config" / "vk-audio"


class TestPaths:
    """Tests for config/data directory resolution."""

    def test_xdg_dirs(self, config_home: Path, tmp_path: Path) -> None:
        assert get_config_dir() == config_home
        assert get_data_dir() == tmp_path / "data" / "vk-audio"

    def test_config_path_prefers_cwd(self, config_home: Path, tmp_path: Path) -> None:
        assert get_config_path() == config_home / "config.toml"

        (tmp_path / "config.toml").write_text("")
        assert get_config_path() == tmp_path / "config.toml"

    def test_log_file_path(self, config_home: Path, tmp_path: Path) -> None:
        assert get_log_file_path(LoggingConfig()) == tmp_path / "data" / "vk-audio" / "vk-audio.log"
        custom = LoggingConfig(log_file=str(tmp_path / "custom.log"))
        assert get_log_file_path(custom) == tmp_path / "custom.log"


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self, config_home: Path) -> None:
        config = load_config()

        assert config == Config()
        assert config.api.default_version is None
        assert config.logging.level == "INFO"

    def test_reads_toml(self, config_home: Path) -> None:
        config_home.mkdir(parents=True)
        (config_home / "config.toml").write_text(
            '[api]\ndefault_version = "5.92"\n\n'
            '[logging]\nlevel = "debug"\nconsole_output = true\n'
        )

        config = load_config()

        assert config.api.default_version == "5.92"
        assert config.logging.level == "DEBUG"
        assert config.logging.console_output is True
        assert config.logging.backup_count == 5

    def test_explicit_path(self, config_home: Path, tmp_path: Path) -> None:
        path = tmp_path / "other.toml"
        path.write_text("[api]\ndefault_version = 5.4\n")

        assert load_config(path).api.default_version == "5.4"

    def test_environment_overrides(
        self, config_home: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_home.mkdir(parents=True)
        (config_home / "config.toml").write_text('[api]\ndefault_version = "5.92"\n')
        monkeypatch.setenv("VK_AUDIO_API_VERSION", "5.131")
        monkeypatch.setenv("VK_AUDIO_LOG_LEVEL", "warning")

        config = load_config()

        assert config.api.default_version == "5.131"
        assert config.logging.level == "WARNING"

    def test_dotenv_in_config_dir(self, config_home: Path) -> None:
        config_home.mkdir(parents=True)
        (config_home / ".env").write_text("VK_AUDIO_API_VERSION=5.21\n")

        assert load_config().api.default_version == "5.21"

    def test_invalid_log_level_raises(self, config_home: Path) -> None:
        config_home.mkdir(parents=True)
        (config_home / "config.toml").write_text('[logging]\nlevel = "LOUD"\n')

        with pytest.raises(ValueError, match="Invalid log level"):
            load_config()


class TestDefaultConfig:
    """Tests for the default config template."""

    def test_default_template_loads_as_defaults(self, config_home: Path) -> None:
        path = write_default_config()

        assert path == config_home / "config.toml"
        assert path.read_text().startswith("# vk-audio Configuration")
        assert load_config() == Config()

    def test_write_does_not_overwrite(self, config_home: Path) -> None:
        config_home.mkdir(parents=True)
        existing = config_home / "config.toml"
        existing.write_text('[api]\ndefault_version = "5.92"\n')

        write_default_config()

        assert existing.read_text() == '[api]\ndefault_version = "5.92"\n'

    def test_template_mentions_every_section(self) -> None:
        template = create_default_config()
        assert "[api]" in template
        assert "[logging]" in template
