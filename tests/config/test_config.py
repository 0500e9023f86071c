"""Test configuration management."""

from pathlib import Path

import pytest

from setlistfm.config.config import Config, ConfigError
from setlistfm.config.paths import default_config_path
from setlistfm.shared.language import Language


def test_default_config(repo_root: Path) -> None:
    """Defaults are usable without a file and save to the portable location."""
    _ = repo_root
    config = Config()
    assert config.api_key is None
    assert config.language == "en"
    assert config.timeout_seconds == 15.0
    assert config.log_file is None

    written = config.save()
    assert written == default_config_path()
    assert written.exists()


def test_load_without_file_uses_defaults(repo_root: Path) -> None:
    _ = repo_root
    config = Config.load()

    assert config == Config()
    assert not default_config_path().exists()


def test_save_load_toml(repo_root: Path) -> None:
    """Saved values survive a reload."""
    _ = repo_root
    original_config = Config(
        api_key="abc123",
        language="de",
        timeout_seconds=5.5,
        log_file=Path("/test/logs/setlistfm.log"),
    )
    _ = original_config.save()

    Config.reset()
    loaded_config = Config.load()

    assert loaded_config.api_key == "abc123"
    assert loaded_config.resolved_language is Language.GERMAN
    assert loaded_config.timeout_seconds == 5.5
    assert loaded_config.log_file == Path("/test/logs/setlistfm.log")


def test_save_load_none_values(repo_root: Path) -> None:
    """Optional values left unset are omitted and load back as None."""
    _ = repo_root
    _ = Config(api_key=None, log_file=None).save()

    Config.reset()
    loaded_config = Config.load()

    assert loaded_config.api_key is None
    assert loaded_config.log_file is None


def test_singleton_behavior(repo_root: Path) -> None:
    _ = repo_root
    config1 = Config.load()
    config1.api_key = "first"

    config2 = Config.load()
    assert config2 is config1
    assert config2.api_key == "first"


def test_load_explicit_path(tmp_path: Path) -> None:
    config_file = tmp_path / "custom.toml"
    _ = config_file.write_text('language = "pl"\ntimeout_seconds = 2\n', encoding="utf-8")

    config = Config.load(config_file)

    assert config.resolved_language is Language.POLISH
    assert config.timeout_seconds == 2


def test_load_honours_config_environment_variable(
    repo_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _ = repo_root
    config_file = tmp_path / "env" / "setlistfm.toml"
    config_file.parent.mkdir()
    _ = config_file.write_text('api_key = "from-env-file"\n', encoding="utf-8")
    monkeypatch.setenv("SETLISTFM_CONFIG", str(config_file))

    assert Config.load().api_key == "from-env-file"


def test_api_key_environment_variable_wins(repo_root: Path) -> None:
    _ = repo_root
    config = Config(api_key="from-file")

    assert config.resolved_api_key({"SETLISTFM_API_KEY": "from-env"}) == "from-env"
    assert config.resolved_api_key({"SETLISTFM_API_KEY": "  "}) == "from-file"
    assert Config().resolved_api_key({}) is None


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    config_file = tmp_path / "broken.toml"
    _ = config_file.write_text("language = \n", encoding="utf-8")

    with pytest.raises(ConfigError):
        _ = Config.load(config_file)


@pytest.mark.parametrize(
    "content",
    ['language = "ja"\n', "language = 3\n", "timeout_seconds = 0\n", 'timeout_seconds = "fast"\n', "timeout_seconds = true\n"],
)
def test_invalid_values_raise_config_error(tmp_path: Path, content: str) -> None:
    config_file = tmp_path / "invalid.toml"
    _ = config_file.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        _ = Config.load(config_file)


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    config_file = tmp_path / "extra.toml"
    _ = config_file.write_text('language = "it"\nbase_path = "/music"\n', encoding="utf-8")

    config = Config.load(config_file)

    assert config.resolved_language is Language.ITALIAN


def test_toml_comments(repo_root: Path) -> None:
    """Test TOML file contains comments."""
    _ = repo_root
    _ = Config(api_key="abc").save()

    with open(default_config_path(), "r", encoding="utf-8") as f:
        content = f.read()

    assert "# setlistfm configuration file" in content
    assert "# setlist.fm API key (optional)" in content
    assert "# Log file path (optional)" in content
    assert 'api_key = "abc"' in content
