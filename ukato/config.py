"""Configuration management for ukato."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass
from pathlib import Path

import click

DEFAULT_CONFIG_DIR = Path(click.get_app_dir("ukato"))
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"

DEFAULT_DIRECTORY = "~/notes"
DEFAULT_EDITOR = "vim"
DEFAULT_VIEWER = "inlyne"

CONFIG_SECTION = "ukato"


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class MissingConfigError(ConfigError):
    """Raised when the configuration file cannot be found."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found at {path}")
        self.path = path


class InvalidConfigError(ConfigError):
    """Raised when the configuration file misses required keys or values."""


@dataclass(slots=True)
class UkatoConfig:
    """In-memory representation of the ukato configuration file."""

    directory: Path
    editor: str = DEFAULT_EDITOR
    viewer: str | None = DEFAULT_VIEWER
    source_path: Path | None = None


def default_config() -> UkatoConfig:
    """Return the configuration used before ``ukato init`` has ever run."""

    return UkatoConfig(directory=Path(DEFAULT_DIRECTORY))


def load_config(path: Path | None = None) -> UkatoConfig:
    """Load configuration from ``path`` or the default location.

    Parameters
    ----------
    path:
        Optional location of the configuration file. When ``None`` the
        default path under the user's application directory is used.

    Raises
    ------
    MissingConfigError
        If the file cannot be found.
    InvalidConfigError
        If mandatory settings are missing or malformed.
    """

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    if not config_path.exists():
        raise MissingConfigError(config_path)

    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidConfigError(f"Invalid TOML in {config_path}: {exc}") from exc

    section = raw.get(CONFIG_SECTION)
    if not isinstance(section, dict):
        raise InvalidConfigError(
            f"'{CONFIG_SECTION}' section is required and must be a table"
        )

    directory_raw = section.get("directory")
    if not isinstance(directory_raw, str) or not directory_raw.strip():
        raise InvalidConfigError("'directory' is required and must be a string")

    editor_raw = section.get("editor", DEFAULT_EDITOR)
    if not isinstance(editor_raw, str):
        raise InvalidConfigError("'editor' must be a string when provided")
    editor = editor_raw.strip() or DEFAULT_EDITOR

    viewer_raw = section.get("viewer", DEFAULT_VIEWER)
    if not isinstance(viewer_raw, str):
        raise InvalidConfigError("'viewer' must be a string when provided")
    # An empty viewer disables the preview process.
    viewer = viewer_raw.strip() or None

    return UkatoConfig(
        directory=Path(directory_raw.strip()),
        editor=editor,
        viewer=viewer,
        source_path=config_path,
    )


def load_config_or_default(path: Path | None = None) -> UkatoConfig:
    """Like :func:`load_config`, but fall back to defaults when the file is missing."""

    try:
        return load_config(path)
    except MissingConfigError:
        return default_config()


def save_config(config: UkatoConfig, path: Path | None = None) -> Path:
    """Persist ``config`` to ``path`` (or the default location) and return it."""

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(format_config(config), encoding="utf-8")
    config.source_path = config_path
    return config_path


def format_config(config: UkatoConfig) -> str:
    """Render ``config`` as the TOML document stored on disk."""

    def quote(value: str | None) -> str:
        # JSON escapes are valid in TOML basic strings, but TOML also forbids a
        # raw DEL character, which JSON leaves as is.
        return json.dumps(value or "", ensure_ascii=False).replace("\x7f", "\\u007f")

    lines = [
        f"[{CONFIG_SECTION}]",
        f"directory = {quote(str(config.directory))}",
        f"editor = {quote(config.editor)}",
        f"viewer = {quote(config.viewer)}",
    ]
    return "\n".join(lines) + "\n"
