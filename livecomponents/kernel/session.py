"""
livecomponents Kernel — Component set

The per-session container a host framework keeps for one connection:
register components by id, route namespaced action names to them, and
render them. One set per session; never shared.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Mapping

from livecomponents.config import settings
from livecomponents.kernel.actions import ActionContext, ActionRequest
from livecomponents.kernel.dispatch import dispatch, split_action_name
from livecomponents.kernel.errors import DuplicateComponentError, UnknownActionError
from livecomponents.kernel.renderer import render
from livecomponents.kernel.types import ActionResult, Component, rejected

logger = logging.getLogger(__name__)


class ComponentSet:
    def __init__(self, *components: Component, strict: bool | None = None) -> None:
        self._components: dict[str, Component] = {}
        self.strict = settings.STRICT_ACTIONS if strict is None else strict
        for component in components:
            self.add(component)

    # -- registry -----------------------------------------------------------

    def add(self, component: Component) -> Component:
        if component.id in self._components:
            raise DuplicateComponentError(f"Component {component.id!r} is already registered")
        self._components[component.id] = component
        return component

    def remove(self, component_id: str) -> bool:
        return self._components.pop(component_id, None) is not None

    def get(self, component_id: str) -> Component | None:
        return self._components.get(component_id)

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._components

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components.values())

    # -- routing ------------------------------------------------------------

    def resolve(self, action_name: str) -> Component | None:
        """
        The component addressed by a "<action>_<id>" name. Ids may contain
        underscores, so the longest registered id that is a suffix wins.
        """
        for component_id in sorted(self._components, key=len, reverse=True):
            if split_action_name(action_name, component_id) != action_name:
                return self._components[component_id]
        return None

    def handle(
        self,
        action_name: str,
        payload: Mapping[str, str] | ActionContext | None = None,
        component_id: str | None = None,
    ) -> ActionResult:
        if component_id is not None:
            component = self.get(component_id)
        else:
            component = self.resolve(action_name)

        if component is None:
            logger.warning("No component for action %r (id=%r)", action_name, component_id)
            if self.strict:
                raise UnknownActionError(f"No component handles {action_name!r}")
            return rejected(f"UNKNOWN_COMPONENT: no component handles {action_name!r}")

        result = dispatch(component, action_name, payload)
        if self.strict and not result and (result.reason or "").startswith("UNKNOWN_ACTION"):
            raise UnknownActionError(result.reason)
        return result

    def handle_request(self, request: ActionRequest) -> ActionResult:
        return self.handle(request.action, request.context(), request.component_id)

    # -- rendering ----------------------------------------------------------

    def render(
        self,
        component_id: str,
        variant: str | None = None,
        template_dir: str | Path | None = None,
    ) -> str:
        component = self._components.get(component_id)
        if component is None:
            raise KeyError(component_id)
        return render(component, variant, template_dir)
