"""
Component test configuration.

Components read library settings at construction and render time, so every
test starts from the defaults regardless of the environment.
"""

import pytest

from livecomponents.config import settings


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    monkeypatch.setattr(settings, "TEMPLATE_DIR", "")
    monkeypatch.setattr(settings, "DEFAULT_STYLED", True)
    monkeypatch.setattr(settings, "STRICT_ACTIONS", False)
