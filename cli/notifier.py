# cli/notifier.py

"""
Terminal implementation of the Notifier collaborator.

A notification occupies a single display slot and moves through three phases:
VISIBLE -> FADING -> HIDDEN. Dismissal runs on a restartable background timer, so
notifying never blocks, and a new message replaces the current one and restarts the
timer (last write wins, nothing is queued).
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import TextIO

from core.config import NOTIFY_DISPLAY_SECONDS, NOTIFY_FADE_SECONDS
from core.notifications import NotificationKind

logger = logging.getLogger(__name__)

KIND_LABELS = {
    NotificationKind.SUCCESS: "[OK]",
    NotificationKind.ERROR: "[ERROR]",
    NotificationKind.INFO: "[INFO]",
}


class NotificationPhase(Enum):
    VISIBLE = "VISIBLE"
    FADING = "FADING"
    HIDDEN = "HIDDEN"


class ConsoleNotifier:

    def __init__(
        self,
        display_seconds: float = NOTIFY_DISPLAY_SECONDS,
        fade_seconds: float = NOTIFY_FADE_SECONDS,
        stream: TextIO | None = None,
    ):
        self._display_seconds = display_seconds
        self._fade_seconds = fade_seconds
        self._stream = stream

        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        # incremented on every notify() so stale timers can tell they were replaced
        self._generation = 0

        self._message: str | None = None
        self._kind: NotificationKind | None = None
        self._phase = NotificationPhase.HIDDEN

    # === properties ===

    @property
    def message(self) -> str | None:
        return self._message

    @property
    def kind(self) -> NotificationKind | None:
        return self._kind

    @property
    def phase(self) -> NotificationPhase:
        return self._phase

    @property
    def is_visible(self) -> bool:
        return self._phase is not NotificationPhase.HIDDEN

    # === notifier contract ===

    def notify(self, message: str, kind: NotificationKind = NotificationKind.INFO) -> None:
        with self._lock:
            self._cancel_timer()
            self._generation += 1

            self._message = message
            self._kind = kind
            self._phase = NotificationPhase.VISIBLE

            self._start_timer(self._display_seconds, self._fade, self._generation)

        print(f"\n{format_notification(message, kind)}", file=self._stream)

    def close(self) -> None:
        """Cancels any pending dismissal and hides the current message."""
        with self._lock:
            self._cancel_timer()
            self._generation += 1
            self._phase = NotificationPhase.HIDDEN

    # === timer callbacks ===

    def _fade(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return

            self._phase = NotificationPhase.FADING
            self._start_timer(self._fade_seconds, self._hide, generation)

    def _hide(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return

            self._phase = NotificationPhase.HIDDEN
            self._timer = None
            logger.debug("Dismissed notification: %s", self._message)

    # === helper methods ===

    def _start_timer(self, delay: float, callback, generation: int) -> None:
        self._timer = threading.Timer(delay, callback, args=(generation,))
        self._timer.daemon = True
        self._timer.start()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None


def format_notification(message: str, kind: NotificationKind) -> str:
    return f"{KIND_LABELS.get(kind, '[INFO]')} {message}"
