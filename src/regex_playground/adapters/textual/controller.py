"""Textual adapter that wires session events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from rich.text import Text

from regex_playground.matching import DecorationResult
from regex_playground.render import render_text, summarize
from regex_playground.render.highlight import DEFAULT_STYLE
from regex_playground.session import PlaygroundSession
from regex_playground.session.bus import DECORATION_UPDATED


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[Text], None]
    update_status: Callable[[str], None] = _noop
    update_flags: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualPlaygroundAdapter:
    """Bridges widget change events to a ``PlaygroundSession``."""

    def __init__(
        self,
        session: PlaygroundSession,
        hooks: TextualUIHooks,
        *,
        highlight_style: str = DEFAULT_STYLE,
    ) -> None:
        self.session = session
        self.hooks = hooks
        self.highlight_style = highlight_style
        self._unsubscribe = session.bus.subscribe(
            DECORATION_UPDATED, self._on_decoration
        )
        self._publish(session.result)

    def close(self) -> None:
        self._unsubscribe()

    def pattern_changed(self, pattern: str) -> DecorationResult:
        self._log_state("pattern ->", pattern=pattern)
        return self.session.set_pattern(pattern)

    def flags_changed(self, flags: str) -> DecorationResult:
        self._log_state("flags ->", flags=flags)
        return self.session.set_flags(flags)

    def flag_toggled(self, flag: str) -> DecorationResult:
        self._log_state("toggle ->", flag=flag)
        return self.session.toggle_flag(flag)

    def text_changed(self, text: str) -> DecorationResult:
        self._log_state("text ->", length=len(text))
        return self.session.replace_text(text)

    def _on_decoration(self, payload: object | None) -> None:
        if payload is None:
            return
        self._publish(payload)  # type: ignore[arg-type]

    def _publish(self, result: DecorationResult) -> None:
        self.hooks.update_view(render_text(result, style=self.highlight_style))
        self.hooks.update_status(summarize(result).describe())
        self.hooks.update_flags(str(self.session.flags))
        self._log_state("result <-", result=type(result).__name__)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.session
        return {
            "pattern": session.pattern,
            "flags": str(session.flags),
            "blocks": session.document.block_count,
            "version": session.document.version,
            "passes": session.pass_count,
        }


__all__ = ["TextualPlaygroundAdapter", "TextualUIHooks"]
