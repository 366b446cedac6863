"""
livecomponents configuration — all environment variables in one place.

Read from environment at import time. Tests override attributes on the
`settings` singleton instead of touching the environment.
"""

from __future__ import annotations

import os

TRUE_TOKENS: frozenset[str] = frozenset({"true", "1", "yes", "on"})


def env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in TRUE_TOKENS


class Settings:
    """Library settings from environment variables."""

    # Templates
    TEMPLATE_DIR: str = os.environ.get("LIVECOMPONENTS_TEMPLATE_DIR", "")
    TEMPLATE_VERSION: str = "v1"

    # Components
    DEFAULT_STYLED: bool = env_bool("LIVECOMPONENTS_DEFAULT_STYLED", True)

    # Dispatch
    STRICT_ACTIONS: bool = env_bool("LIVECOMPONENTS_STRICT_ACTIONS", False)


settings = Settings()


def default_styled() -> bool:
    return settings.DEFAULT_STYLED
