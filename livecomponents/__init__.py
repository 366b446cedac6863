"""
livecomponents — server-side state objects for live-templated UI components.

  kernel      — identity, options, dispatch, component set, rendering
  components  — one module per component kind
  templates   — packaged mustache templates, "<kind>/<variant>.mustache"
"""

from livecomponents.kernel import (
    ActionContext,
    ActionRequest,
    ActionResult,
    Component,
    ComponentSet,
    Identity,
    configure,
    dispatch,
    render,
    template_key,
    template_names,
    with_styled,
)

__version__ = "0.1.0"

__all__ = [
    "ActionContext",
    "ActionRequest",
    "ActionResult",
    "Component",
    "ComponentSet",
    "Identity",
    "configure",
    "dispatch",
    "render",
    "template_key",
    "template_names",
    "with_styled",
    "__version__",
]
