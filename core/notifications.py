# core/notifications.py

"""
Collaborator contracts for the roster: the transient Notifier, the View renderer, and the
key-value persistence backend.

Implementations live in `cli/` (terminal) and `core/storage.py`. Tests supply fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from models.student_record import StudentRecord


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class Notifier(Protocol):
    def notify(self, message: str, kind: NotificationKind) -> None: ...


class Renderer(Protocol):
    def render_all(self, records: Sequence[StudentRecord]) -> None: ...


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...
