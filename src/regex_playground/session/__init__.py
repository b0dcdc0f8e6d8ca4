"""Reactive session that reruns decoration passes on pattern/flag changes."""

from .bus import DecorationBus
from .playground import PlaygroundSession

__all__ = ["DecorationBus", "PlaygroundSession"]
