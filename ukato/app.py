"""Application bootstrap and context container for ukato."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import UkatoConfig, load_config
from .paths import ensure_directory, expand_path
from .storage import NoteStore


@dataclass(slots=True)
class AppContext:
    """Aggregates the configuration and services for one CLI invocation."""

    config: UkatoConfig
    notes_dir: Path
    store: NoteStore


def bootstrap(config_path: Path | None) -> AppContext:
    """Load configuration and make sure the notes directory is usable."""

    # Defer error mapping to the CLI, which knows how to present messages.
    config = load_config(config_path)
    notes_dir = ensure_directory(expand_path(config.directory))
    return AppContext(config=config, notes_dir=notes_dir, store=NoteStore(notes_dir))
