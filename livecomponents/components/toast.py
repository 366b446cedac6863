"""
Toast — stack of transient notifications.

Messages without an id get the next value of a per-container counter.
With `max_visible > 0` only the newest messages are kept.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "toast"

INFO = "info"
SUCCESS = "success"
WARNING = "warning"
ERROR = "error"
MESSAGE_TYPES: set[str] = {INFO, SUCCESS, WARNING, ERROR}


@dataclass
class Message:
    body: str = ""
    title: str = ""
    type: str = INFO
    dismissible: bool = True
    icon: str = ""
    id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ToastContainer(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    messages: list[Message] = field(default_factory=list)
    position: str = "top-right"
    max_visible: int = 0
    counter: int = 0
    styled: bool = field(default_factory=default_styled)

    def add(self, message: Message) -> Message:
        if not message.id:
            self.counter += 1
            message.id = str(self.counter)
        if message.type not in MESSAGE_TYPES:
            message.type = INFO
        self.messages.append(message)
        if self.max_visible > 0 and len(self.messages) > self.max_visible:
            self.messages = self.messages[-self.max_visible:]
        return message

    def add_info(self, title: str, body: str) -> Message:
        return self.add(Message(title=title, body=body, type=INFO))

    def add_success(self, title: str, body: str) -> Message:
        return self.add(Message(title=title, body=body, type=SUCCESS))

    def add_warning(self, title: str, body: str) -> Message:
        return self.add(Message(title=title, body=body, type=WARNING))

    def add_error(self, title: str, body: str) -> Message:
        return self.add(Message(title=title, body=body, type=ERROR))

    def dismiss(self, message_id: str) -> bool:
        for position, message in enumerate(self.messages):
            if message.id == message_id:
                if not message.dismissible:
                    return False
                del self.messages[position]
                return True
        return False

    def dismiss_all(self) -> None:
        self.messages = []

    def count(self) -> int:
        return len(self.messages)

    def has_messages(self) -> bool:
        return bool(self.messages)

    def visible_messages(self) -> list[Message]:
        if self.max_visible <= 0:
            return list(self.messages)
        return self.messages[-self.max_visible:]

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "dismiss": lambda c, ctx: c.dismiss(ctx.data("id")),
        "dismiss_all": lambda c, ctx: c.dismiss_all(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "position": self.position,
            "count": self.count(),
            "has_messages": self.has_messages(),
            "messages": [message.to_dict() for message in self.visible_messages()],
        })
        return ctx


def new(id: str, *options: Option) -> ToastContainer:
    return apply_options(ToastContainer(Identity(id, KIND)), options)


def new_message(body: str, type: str = INFO, title: str = "", **extra: Any) -> Message:
    return Message(body=body, type=type, title=title, **extra)
