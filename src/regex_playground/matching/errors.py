"""Error types raised by the matching layer."""

from __future__ import annotations

import re


class PatternCompileError(ValueError):
    """Raised when a pattern cannot be compiled into a matcher."""

    def __init__(self, pattern: str, flags: str, cause: re.error) -> None:
        super().__init__(f"Cannot compile /{pattern}/{flags}: {cause}")
        self.pattern = pattern
        self.flags = flags
        self.cause = cause

    @property
    def position(self) -> int | None:
        return self.cause.pos


__all__ = ["PatternCompileError"]
