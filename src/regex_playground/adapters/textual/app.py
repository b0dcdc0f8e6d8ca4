"""Executable Textual app hosting the regex playground."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical
    from textual.widgets import Checkbox, Footer, Header, Input, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use regex_playground.adapters.textual.app"
    ) from exc

from rich.console import Console
from rich.text import Text

from regex_playground.document import BlockDocument
from regex_playground.matching import (
    CANONICAL_ORDER,
    compute_decoration,
    normalize_flags,
)
from regex_playground.render import render_text, summarize
from regex_playground.runtime import telemetry
from regex_playground.runtime.config import PlaygroundConfig
from regex_playground.session import PlaygroundSession

from .controller import TextualPlaygroundAdapter, TextualUIHooks

FLAG_LABELS = {
    "g": "global",
    "m": "multiline",
    "i": "insensitive",
}


@dataclass
class UIState:
    preview: Text | None = None
    status_text: str = ""
    flags_text: str = ""


class RegexPlaygroundApp(App[None]):
    """Pattern bar, flag picker, text editor and a live highlighted preview."""

    TITLE = "Regex Playground"

    CSS = """
	Screen {
		layout: vertical;
	}

	#pattern-bar {
		height: 3;
		padding: 0 1;
	}

	#pattern-input {
		width: 1fr;
	}

	.delimiter {
		width: auto;
		padding: 1 0;
		color: $text-muted;
	}

	#flags-label {
		width: 6;
		padding: 1 0;
		color: $success;
	}

	#text-input {
		height: 1fr;
		border: round $accent;
	}

	#preview {
		height: 1fr;
		border: round $success;
		padding: 0 1;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+g", "toggle_flag('g')", "Global"),
        ("ctrl+l", "toggle_flag('m')", "Multiline"),
        ("ctrl+t", "toggle_flag('i')", "Insensitive"),
    ]

    def __init__(self, config: Optional[PlaygroundConfig] = None) -> None:
        super().__init__()
        self.config = config or PlaygroundConfig()
        self._state = UIState()
        self.session: PlaygroundSession | None = None
        self.adapter: TextualPlaygroundAdapter | None = None
        self.logger = telemetry.get_logger("regex_playground.ui")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="pattern-bar"):
            yield Static("/", classes="delimiter")
            yield Input(
                value=self.config.pattern,
                placeholder="pattern",
                id="pattern-input",
            )
            yield Static("/", classes="delimiter")
            yield Static("", id="flags-label")
            for flag in CANONICAL_ORDER:
                yield Checkbox(
                    FLAG_LABELS[flag],
                    value=flag in self.config.flags,
                    id=f"flag-{flag}",
                )
        with Vertical(id="editor-area"):
            yield TextArea(self.config.text, id="text-input")
            yield Static("", id="preview")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        self.session = PlaygroundSession(
            text=self.config.text,
            pattern=self.config.pattern,
            flags=self.config.flags,
        )
        hooks = TextualUIHooks(
            update_view=self._update_preview,
            update_status=self._update_status,
            update_flags=self._update_flags,
            log=self._log_line,
        )
        self.adapter = TextualPlaygroundAdapter(
            self.session, hooks, highlight_style=self.config.highlight_style
        )
        self.query_one("#pattern-input", Input).focus()

    def on_unmount(self) -> None:
        if self.adapter:
            self.adapter.close()

    def on_input_changed(self, event: Input.Changed) -> None:
        if self.adapter and event.input.id == "pattern-input":
            self.adapter.pattern_changed(event.value)

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        if not self.adapter or not self.session:
            return
        flag = (event.checkbox.id or "").removeprefix("flag-")
        if flag and (flag in self.session.flags) != event.value:
            self.adapter.flag_toggled(flag)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self.adapter:
            self.adapter.text_changed(event.text_area.text)

    def action_toggle_flag(self, flag: str) -> None:
        checkbox = self.query_one(f"#flag-{flag}", Checkbox)
        checkbox.toggle()

    def _update_preview(self, text: Text) -> None:
        self._state.preview = text
        self.query_one("#preview", Static).update(text)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        self.query_one("#status-line", Static).update(status)

    def _update_flags(self, flags: str) -> None:
        self._state.flags_text = flags
        self.query_one("#flags-label", Static).update(flags)

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="regex-playground",
        description="Type a regular expression and watch its matches highlight live.",
    )
    parser.add_argument("--pattern", help="Initial pattern (default: [A-Z]\\w+)")
    parser.add_argument("--flags", help="Initial flags drawn from g, m, i (default: g)")
    parser.add_argument(
        "--text-file",
        type=Path,
        help="Load the text to match against from this UTF-8 file",
    )
    parser.add_argument("--style", help="Rich style used for highlighted spans")
    parser.add_argument(
        "--no-tui",
        action="store_true",
        help="Print the highlighted text once and exit",
    )
    return parser


def _parse_args(
    argv: Optional[Sequence[str]] = None,
    parser: Optional[argparse.ArgumentParser] = None,
) -> argparse.Namespace:
    parser = parser or _build_parser()
    args = parser.parse_args(argv)
    if args.text_file is not None and not args.text_file.is_file():
        parser.error(f"text file not found: {args.text_file}")
    return args


def build_config(args: argparse.Namespace) -> PlaygroundConfig:
    """Environment first, command line on top; ``--text-file`` wins outright."""

    config = PlaygroundConfig.from_env(
        load_text_file=args.text_file is None
    ).override(
        pattern=args.pattern, flags=args.flags, highlight_style=args.style
    )
    if args.text_file is not None:
        config = config.with_text_file(args.text_file)
    return config


def print_once(config: PlaygroundConfig, console: Optional[Console] = None) -> None:
    console = console or Console()
    flags = normalize_flags(config.flags)
    result = compute_decoration(
        BlockDocument.from_text(config.text), config.pattern, flags
    )
    console.print(render_text(result, style=config.highlight_style))
    console.print(
        f"/{config.pattern}/{flags}: {summarize(result).describe()}",
        markup=False,
        highlight=False,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = _parse_args(argv, parser)
    try:
        config = build_config(args)
    except OSError as exc:
        parser.error(f"cannot read text file: {exc}")
    if args.no_tui:
        print_once(config)
        return
    telemetry.configure(tui=True)
    RegexPlaygroundApp(config).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
