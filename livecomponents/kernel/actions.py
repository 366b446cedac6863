"""
livecomponents Kernel — Action payloads

ActionContext wraps the string-keyed payload extracted from a UI event.
Every accessor is total: missing or malformed values fall back to a
documented default and never raise.

ActionRequest is the validated boundary model for a full action call.
"""

from __future__ import annotations

from datetime import date
from typing import Mapping

from pydantic import BaseModel, Field

from livecomponents.config import TRUE_TOKENS


class ActionContext:
    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(data or {})

    def data(self, key: str) -> str:
        return self._data.get(key, "")

    def data_int(self, key: str) -> int:
        try:
            return int(self.data(key))
        except ValueError:
            return 0

    def data_float(self, key: str) -> float:
        try:
            return float(self.data(key))
        except ValueError:
            return 0.0

    def data_bool(self, key: str) -> bool:
        return self.data(key).lower() in TRUE_TOKENS

    def data_date(self, key: str) -> date | None:
        """ISO "YYYY-MM-DD" date, or None when missing or malformed."""
        raw = self.data(key)
        if len(raw) != 10:
            return None
        try:
            return date.fromisoformat(raw)
        except ValueError:
            return None

    def has_data(self, key: str) -> bool:
        return key in self._data

    def all_data(self) -> dict[str, str]:
        return dict(self._data)

    def __repr__(self) -> str:  # pragma: no cover
        return f"ActionContext({self._data!r})"


class ActionRequest(BaseModel):
    """
    One action call arriving from the UI event layer.

    `action` is the namespaced name ("<action>_<id>"). `component_id` is
    optional; without it the component is resolved from the name suffix.
    """

    model_config = {"extra": "forbid"}

    action: str = Field(..., min_length=1)
    component_id: str | None = None
    data: dict[str, str] = Field(default_factory=dict)

    def context(self) -> ActionContext:
        return ActionContext(self.data)
