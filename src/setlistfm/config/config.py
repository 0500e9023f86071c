"""Configuration management for setlistfm."""

from __future__ import annotations

import os
import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, ClassVar, Final

from setlistfm.config.file_ops import write_text_file
from setlistfm.config.paths import default_config_path
from setlistfm.config.settings import DEFAULT_LANGUAGE_CODE, DEFAULT_TIMEOUT_SECONDS
from setlistfm.platform.logging import logger
from setlistfm.shared.language import Language

_ENV_API_KEY: Final[str] = "SETLISTFM_API_KEY"


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or holds invalid values."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # API key generated at https://www.setlist.fm/settings/api
    api_key: str | None = None

    # Two-letter response language code
    language: str = DEFAULT_LANGUAGE_CODE

    # Per-request timeout for the default transport
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    # Optional log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Normalize path fields and validate the language and timeout values."""
        from dataclasses import fields

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if not isinstance(self.language, str):
            raise ConfigError(f"language must be a string, got {self.language!r}")
        try:
            _ = Language.from_code(self.language)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

        if isinstance(self.timeout_seconds, bool) or not isinstance(self.timeout_seconds, (int, float)):
            raise ConfigError(f"timeout_seconds must be a number, got {self.timeout_seconds!r}")
        if self.timeout_seconds <= 0:
            raise ConfigError(f"timeout_seconds must be positive, got {self.timeout_seconds}")

    @property
    def resolved_language(self) -> Language:
        return Language.from_code(self.language)

    def resolved_api_key(self, env: dict[str, str] | None = None) -> str | None:
        """Return the API key, preferring the ``SETLISTFM_API_KEY`` environment variable."""

        mapping = env if env is not None else os.environ
        candidate = (mapping.get(_ENV_API_KEY) or "").strip()
        if candidate:
            return candidate
        if self.api_key and self.api_key.strip():
            return self.api_key.strip()
        return None

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file and return the written path."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# setlistfm configuration file")
        lines.append("")

        lines.append("# setlist.fm API key (optional)")
        lines.append("# The SETLISTFM_API_KEY environment variable takes precedence")
        if config["api_key"]:
            lines.append(f"api_key = {self._format_toml_value(config['api_key'])}")
        lines.append("")

        lines.append("# Response language: en, es, fr, de, pt, tr, it, pl")
        lines.append(f"language = {self._format_toml_value(config['language'])}")
        lines.append("")

        lines.append("# Timeout in seconds for each HTTP request")
        lines.append(f"timeout_seconds = {self._format_toml_value(config['timeout_seconds'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/setlistfm.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file, falling back to defaults when absent.

        Args:
            path: Explicit config file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values.
        """
        config_file = path or default_config_path()
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            logger.debug("No configuration at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise ConfigError(f"Cannot read {config_file}: {e}") from e

            known = {"api_key", "language", "timeout_seconds", "log_file"}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

            try:
                instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            except TypeError as e:
                raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e
            logger.info("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "ConfigError"]
