"""
livecomponents Kernel — the shared component contract.

  types       — Identity, Component, Option, ActionResult
  actions     — ActionContext payload accessors, ActionRequest boundary model
  dispatch    — (component, action name, payload) → ActionResult
  session     — ComponentSet routing actions for one session
  renderer    — chevron templates keyed lvt:<kind>:<variant>:v1

Shared algorithms:
  selection, pagination, calendar_grid
"""

from livecomponents.kernel.actions import ActionContext, ActionRequest
from livecomponents.kernel.dispatch import dispatch, split_action_name
from livecomponents.kernel.errors import (
    ComponentError,
    DuplicateComponentError,
    TemplateNotFoundError,
    UnknownActionError,
    UnknownFieldError,
)
from livecomponents.kernel.renderer import render, template_key, template_names
from livecomponents.kernel.session import ComponentSet
from livecomponents.kernel.types import (
    ActionResult,
    Component,
    Identity,
    Option,
    apply_options,
    configure,
    with_styled,
)

__all__ = [
    "ActionContext",
    "ActionRequest",
    "ActionResult",
    "Component",
    "ComponentError",
    "ComponentSet",
    "DuplicateComponentError",
    "Identity",
    "Option",
    "TemplateNotFoundError",
    "UnknownActionError",
    "UnknownFieldError",
    "apply_options",
    "configure",
    "dispatch",
    "render",
    "split_action_name",
    "template_key",
    "template_names",
    "with_styled",
]
