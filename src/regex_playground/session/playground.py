"""Session state owning the pristine text, pattern, flags and last result."""

from __future__ import annotations

from typing import Optional

from regex_playground.document import BlockDocument
from regex_playground.matching import (
    DecorationResult,
    FlagSet,
    compute_decoration,
    normalize_flags,
)
from regex_playground.matching.flags import FlagInput
from regex_playground.runtime import telemetry

from .bus import (
    DECORATION_UPDATED,
    FLAGS_CHANGED,
    PATTERN_CHANGED,
    TEXT_CHANGED,
    DecorationBus,
)


class PlaygroundSession:
    """Reruns ``compute_decoration`` whenever pattern, flags or text change.

    Every pass reads ``self.document``, which only ever holds plain text, so
    a new pass can never pick up highlights left over from the previous one.
    """

    def __init__(
        self,
        *,
        text: str = "",
        pattern: str = "",
        flags: FlagInput = "",
        bus: Optional[DecorationBus] = None,
    ) -> None:
        self.bus = bus or DecorationBus()
        self._document = BlockDocument.from_text(text)
        self._pattern = pattern
        self._flags = normalize_flags(flags)
        self._result: DecorationResult = self._run_pass()
        self._passes = 1

    @property
    def document(self) -> BlockDocument:
        return self._document

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def flags(self) -> FlagSet:
        return self._flags

    @property
    def result(self) -> DecorationResult:
        return self._result

    @property
    def pass_count(self) -> int:
        return self._passes

    def set_pattern(self, pattern: str) -> DecorationResult:
        pattern = pattern or ""
        if pattern == self._pattern:
            return self._result
        self._pattern = pattern
        self.bus.emit(PATTERN_CHANGED, pattern)
        return self.recompute()

    def set_flags(self, flags: FlagInput) -> DecorationResult:
        normalized = normalize_flags(flags)
        if normalized == self._flags:
            return self._result
        self._flags = normalized
        self.bus.emit(FLAGS_CHANGED, normalized)
        return self.recompute()

    def toggle_flag(self, flag: str) -> DecorationResult:
        return self.set_flags(self._flags.toggle(flag))

    def replace_text(self, text: str) -> DecorationResult:
        if text == self._document.text:
            return self._result
        self._document = self._document.replace(text)
        self.bus.emit(TEXT_CHANGED, self._document)
        return self.recompute()

    def recompute(self) -> DecorationResult:
        self._result = self._run_pass()
        self._passes += 1
        telemetry.record_event(
            "session.recompute",
            level="debug",
            data={
                "pattern": self._pattern,
                "flags": str(self._flags),
                "version": self._document.version,
                "result": type(self._result).__name__,
            },
            logger_name="regex_playground.session",
        )
        self.bus.emit(DECORATION_UPDATED, self._result)
        return self._result

    def _run_pass(self) -> DecorationResult:
        return compute_decoration(self._document, self._pattern, self._flags)


__all__ = ["PlaygroundSession"]
