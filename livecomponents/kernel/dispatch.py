"""
livecomponents Kernel — Dispatch

Pure function: (component, action name, payload) → ActionResult

The namespaced name arriving from the UI layer is mapped once, here, onto
the component's closed action table. Never throws — unknown actions and
refused mutations come back as rejected results.
"""

from __future__ import annotations

import logging
from typing import Mapping

from livecomponents.kernel.actions import ActionContext
from livecomponents.kernel.types import ActionResult, Component, accepted, rejected

logger = logging.getLogger(__name__)


def split_action_name(action_name: str, component_id: str) -> str:
    """Strip the trailing "_<id>" suffix; names without it pass through."""
    suffix = f"_{component_id}"
    if component_id and action_name.endswith(suffix) and len(action_name) > len(suffix):
        return action_name[: -len(suffix)]
    return action_name


def dispatch(
    component: Component,
    action_name: str,
    payload: Mapping[str, str] | ActionContext | None = None,
) -> ActionResult:
    ctx = payload if isinstance(payload, ActionContext) else ActionContext(payload)
    action = split_action_name(action_name, component.id)

    handler = component.ACTIONS.get(action)
    if handler is None:
        logger.warning("Unknown action %r for %s %r", action, component.kind, component.id)
        return rejected(f"UNKNOWN_ACTION: {component.kind} has no action {action!r}")

    outcome = handler(component, ctx)
    if outcome is False:
        logger.debug("Rejected %s.%s on %r", component.kind, action, component.id)
        return rejected(f"REJECTED: {component.kind}.{action} refused for {component.id!r}")
    return accepted()
