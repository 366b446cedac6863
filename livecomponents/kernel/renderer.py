"""
livecomponents Kernel — Renderer

Pure function: component → HTML string, via chevron (mustache).

Templates are addressed by key "lvt:<kind>:<variant>:<version>" and stored
as "<kind>/<variant>.mustache". A project template directory (settings
TEMPLATE_DIR, or the `template_dir` argument) takes precedence over the
templates packaged with the library.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import chevron

from livecomponents.config import settings
from livecomponents.kernel.errors import TemplateNotFoundError
from livecomponents.kernel.types import Component

logger = logging.getLogger(__name__)

PACKAGED_TEMPLATES = Path(__file__).resolve().parent.parent / "templates"
TEMPLATE_SUFFIX = ".mustache"


# ---------------------------------------------------------------------------
# Template lookup
# ---------------------------------------------------------------------------


def template_key(kind: str, variant: str = "default") -> str:
    return f"lvt:{kind}:{variant}:{settings.TEMPLATE_VERSION}"


def _override_dir(template_dir: str | Path | None) -> Path | None:
    chosen = template_dir if template_dir is not None else settings.TEMPLATE_DIR
    if not chosen:
        return None
    return Path(chosen)


@lru_cache(maxsize=128)
def _packaged_source(kind: str, variant: str) -> str | None:
    path = PACKAGED_TEMPLATES / kind / f"{variant}{TEMPLATE_SUFFIX}"
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")


def load_template(kind: str, variant: str = "default", template_dir: str | Path | None = None) -> str:
    override = _override_dir(template_dir)
    if override is not None:
        path = override / kind / f"{variant}{TEMPLATE_SUFFIX}"
        if path.is_file():
            logger.debug("Using override template %s", path)
            return path.read_text(encoding="utf-8")

    source = _packaged_source(kind, variant)
    if source is None:
        raise TemplateNotFoundError(f"No template for {template_key(kind, variant)}")
    return source


def _scan(root: Path) -> set[str]:
    keys: set[str] = set()
    if not root.is_dir():
        return keys
    for path in root.glob(f"*/*{TEMPLATE_SUFFIX}"):
        keys.add(template_key(path.parent.name, path.name[: -len(TEMPLATE_SUFFIX)]))
    return keys


def template_names(template_dir: str | Path | None = None) -> list[str]:
    """Every template key available, packaged and overridden, sorted."""
    keys = _scan(PACKAGED_TEMPLATES)
    override = _override_dir(template_dir)
    if override is not None:
        keys |= _scan(override)
    return sorted(keys)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render_context(
    kind: str,
    context: dict[str, Any],
    variant: str = "default",
    template_dir: str | Path | None = None,
) -> str:
    return chevron.render(load_template(kind, variant, template_dir), context)


def render(
    component: Component,
    variant: str | None = None,
    template_dir: str | Path | None = None,
) -> str:
    """
    Render a component with its own template variant unless one is given.
    No side effects on the component.
    """
    return render_context(
        component.kind,
        component.to_context(),
        variant or component.template,
        template_dir,
    )
