"""Note templates: lookup, placeholder rendering and starter bootstrap."""

from __future__ import annotations

from datetime import date
from importlib import resources
from pathlib import Path
from typing import Callable

from .storage import MARKDOWN_SUFFIX, note_filename
from .utils.datetime_fmt import to_creation_date, today_local

WarnFunc = Callable[[str], None]

TEMPLATES_DIRNAME = "templates"
DEFAULT_TEMPLATE = "basic"

TITLE_TOKEN = "_TITLE_"
DATE_TOKEN = "_CREATION_DATE_"

STARTER_TEMPLATE_PACKAGE = "ukato.starter_templates"

# Seed for templates created through ``ukato template NAME``.
TEMPLATE_SKELETON = f"{TITLE_TOKEN}\n\n{DATE_TOKEN}\n\n"


def templates_dir(base_dir: Path) -> Path:
    """Return the templates directory inside the notes directory ``base_dir``."""

    return base_dir / TEMPLATES_DIRNAME


def template_path(name: str, base_dir: Path) -> Path:
    """Return the path of template ``name`` (``.md`` optional) under ``base_dir``."""

    return templates_dir(base_dir) / note_filename(name)


def resolve_template_path(
    name: str | None, base_dir: Path, *, warn: WarnFunc | None = None
) -> Path:
    """Pick the template file to seed a new note with.

    A requested template is used when ``templates/<name>.md`` exists.
    Otherwise the default ``templates/basic.md`` is returned, and a warning is
    emitted if a template had been explicitly requested.
    """

    if name:
        candidate = template_path(name, base_dir)
        if candidate.is_file():
            return candidate
        if warn is not None:
            warn(
                f"Template '{name}' not found in {templates_dir(base_dir)}; "
                f"using '{DEFAULT_TEMPLATE}' instead."
            )
    return template_path(DEFAULT_TEMPLATE, base_dir)


def load_template(path: Path, *, warn: WarnFunc | None = None) -> str:
    """Return the template text, or an empty string when it cannot be used.

    A missing file is silent; an unreadable or non UTF-8 file is reported
    through ``warn``.
    """

    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""
    except (OSError, UnicodeDecodeError) as exc:
        if warn is not None:
            warn(f"Could not read template {path}: {exc}; using an empty note.")
        return ""


def render(template_text: str, title: str, created: date | str) -> str:
    """Substitute the title and creation date placeholders in ``template_text``.

    Every occurrence of each token is replaced; the substituted values are
    inserted verbatim and never expanded again.
    """

    rendered = template_text.replace(TITLE_TOKEN, f"# {title}")
    return rendered.replace(DATE_TOKEN, to_creation_date(created))


def render_new_note(
    base_dir: Path,
    title: str,
    template: str | None = None,
    *,
    today: date | None = None,
    warn: WarnFunc | None = None,
) -> str:
    """Load the selected template and render it for a note titled ``title``."""

    path = resolve_template_path(template, base_dir, warn=warn)
    return render(load_template(path, warn=warn), title, today or today_local())


def bootstrap_templates(base_dir: Path) -> list[Path]:
    """Copy the bundled starter templates into ``base_dir/templates``.

    Existing files are left untouched. Returns the paths that were created.
    The templates directory itself must already exist.
    """

    target_dir = templates_dir(base_dir)
    created: list[Path] = []
    package_root = resources.files(STARTER_TEMPLATE_PACKAGE)
    for entry in sorted(package_root.iterdir(), key=lambda item: item.name):
        if not entry.name.endswith(MARKDOWN_SUFFIX):
            continue
        target_path = target_dir / entry.name
        if target_path.exists():
            continue
        target_path.write_text(entry.read_text("utf-8"), encoding="utf-8")
        created.append(target_path)
    return created
