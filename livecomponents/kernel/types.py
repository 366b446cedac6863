"""
livecomponents Kernel — Shared Types

The contract every component kind is built on:

- `Identity` is the immutable id + kind pair; it namespaces action names
  as "<action>_<id>".
- `Component` is the shared behavior over a concrete dataclass: styled
  flag, action table, canonical render context.
- `Option` callables configure a component after its defaults are set,
  applied left to right, later options win.
- `ActionResult` is what dispatch returns. Never an exception.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Iterable, TypeVar

from livecomponents.kernel.errors import UnknownFieldError

if TYPE_CHECKING:
    from livecomponents.kernel.actions import ActionContext

C = TypeVar("C", bound="Component")

Option = Callable[[Any], None]
Handler = Callable[[Any, "ActionContext"], "bool | None"]


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Identity:
    id: str
    kind: str

    def action_name(self, action: str) -> str:
        return f"{action}_{self.id}"


# ---------------------------------------------------------------------------
# ActionResult
# ---------------------------------------------------------------------------


class ActionResult:
    """
    Result of dispatching one action to a component.
    Truthy when the handler accepted the mutation.
    """

    __slots__ = ("accepted", "reason")

    def __init__(self, accepted: bool, reason: str | None = None) -> None:
        self.accepted = accepted
        self.reason = reason

    def __bool__(self) -> bool:
        return self.accepted

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActionResult):
            return NotImplemented
        return self.accepted == other.accepted and self.reason == other.reason

    def __repr__(self) -> str:  # pragma: no cover
        if self.accepted:
            return "ActionResult(accepted=True)"
        return f"ActionResult(accepted=False, reason={self.reason!r})"


def accepted() -> ActionResult:
    return ActionResult(accepted=True)


def rejected(reason: str) -> ActionResult:
    return ActionResult(accepted=False, reason=reason)


# ---------------------------------------------------------------------------
# Component
# ---------------------------------------------------------------------------


class Component:
    """
    Shared behavior for every component kind.

    Concrete kinds are dataclasses whose first field is `identity` and which
    carry a `styled` field. Subclasses set KIND, ACTIONS and TEMPLATE and
    implement `to_context()`.
    """

    KIND: ClassVar[str] = ""
    TEMPLATE: ClassVar[str] = "default"
    ACTIONS: ClassVar[dict[str, Handler]] = {}

    identity: Identity
    styled: bool

    @property
    def id(self) -> str:
        return self.identity.id

    @property
    def kind(self) -> str:
        return self.identity.kind

    @property
    def template(self) -> str:
        return self.TEMPLATE

    def set_styled(self, styled: bool) -> None:
        self.styled = styled

    def action_name(self, action: str) -> str:
        return self.identity.action_name(action)

    def action_names(self) -> dict[str, str]:
        return {name: self.action_name(name) for name in self.ACTIONS}

    def base_context(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind,
            "styled": self.styled,
            "actions": self.action_names(),
        }

    def to_context(self) -> dict[str, Any]:
        """The one serialized shape templates are rendered from."""
        return self.base_context()


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


def apply_options(component: C, options: Iterable[Option]) -> C:
    for option in options:
        option(component)
    return component


def configure(**values: Any) -> Option:
    """
    Option that assigns dataclass fields directly.

    This is the configuration bypass: it does not run action guards, so a
    disabled item may be placed in a selection this way.
    """

    def apply(component: Any) -> None:
        known = {f.name for f in fields(component)} if is_dataclass(component) else set()
        for name, value in values.items():
            if name == "identity" or name not in known:
                raise UnknownFieldError(
                    f"{type(component).__name__} has no configurable field {name!r}"
                )
            setattr(component, name, value)

    return apply


def with_styled(styled: bool) -> Option:
    def apply(component: Component) -> None:
        component.set_styled(styled)

    return apply
