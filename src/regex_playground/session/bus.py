"""Minimal event bus letting the session notify host widgets."""

from __future__ import annotations

from typing import Callable, Dict

PATTERN_CHANGED = "pattern.changed"
FLAGS_CHANGED = "flags.changed"
TEXT_CHANGED = "text.changed"
DECORATION_UPDATED = "decoration.updated"

Callback = Callable[[object], None]


class DecorationBus:
    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callback]] = {}

    def subscribe(self, event: str, callback: Callback) -> Callable[[], None]:
        """Register ``callback`` and return a function that removes it again."""

        self._subscribers.setdefault(event, []).append(callback)

        def unsubscribe() -> None:
            callbacks = self._subscribers.get(event, [])
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


__all__ = [
    "DECORATION_UPDATED",
    "DecorationBus",
    "FLAGS_CHANGED",
    "PATTERN_CHANGED",
    "TEXT_CHANGED",
]
