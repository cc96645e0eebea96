"""Toast notifications: message type, display protocol and a nullable ref."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Protocol, runtime_checkable

Severity = Literal["success", "info", "warn", "error"]

DEFAULT_LIFE_MS = 3000


@dataclass(frozen=True)
class ToastMessage:
    severity: Severity
    summary: str
    detail: str
    life: int = DEFAULT_LIFE_MS


@runtime_checkable
class Toast(Protocol):
    """Anything that can display a toast."""

    def show(self, message: ToastMessage) -> None: ...


@dataclass
class ToastRef:
    """Mutable handle to a toast display.

    ``current`` is ``None`` until a display is attached, the same way a page
    holds a reference before its toast area is rendered.
    """

    current: Toast | None = None

    def attach(self, toast: Toast) -> None:
        self.current = toast

    def detach(self) -> None:
        self.current = None


@dataclass
class ToastBuffer:
    """Toast display that keeps messages until the next render drains them."""

    messages: list[ToastMessage] = field(default_factory=list)

    def show(self, message: ToastMessage) -> None:
        self.messages.append(message)

    def drain(self) -> list[ToastMessage]:
        pending, self.messages = self.messages, []
        return pending
