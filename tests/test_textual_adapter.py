from __future__ import annotations

from typing import List

from rich.text import Text

from regex_playground.adapters.textual import TextualPlaygroundAdapter, TextualUIHooks
from regex_playground.session import PlaygroundSession


def make_session() -> PlaygroundSession:
    return PlaygroundSession(text="Cat\ncat", pattern=r"[A-Z]\w+", flags="g")


def test_adapter_publishes_initial_view_and_status() -> None:
    views: List[Text] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_view=views.append,
        update_status=statuses.append,
    )

    TextualPlaygroundAdapter(make_session(), hooks)

    assert views[-1].plain == "Cat\ncat"
    assert [(span.start, span.end) for span in views[-1].spans] == [(0, 3)]
    assert statuses[-1] == "1 match in 1 block"


def test_adapter_relays_pattern_and_flag_changes() -> None:
    statuses: List[str] = []
    flags: List[str] = []
    hooks = TextualUIHooks(
        update_view=lambda text: None,
        update_status=statuses.append,
        update_flags=flags.append,
    )
    adapter = TextualPlaygroundAdapter(make_session(), hooks)

    adapter.pattern_changed("cat")
    adapter.flag_toggled("i")

    assert statuses[-2:] == ["no matches", "2 matches in 2 blocks"]
    assert flags[-1] == "gi"


def test_adapter_text_changes_use_new_content() -> None:
    views: List[Text] = []
    hooks = TextualUIHooks(update_view=views.append)
    adapter = TextualPlaygroundAdapter(make_session(), hooks)

    adapter.text_changed("Dog")

    assert views[-1].plain == "Dog"
    assert len(views[-1].spans) == 1


def test_adapter_applies_highlight_style() -> None:
    views: List[Text] = []
    hooks = TextualUIHooks(update_view=views.append)

    TextualPlaygroundAdapter(make_session(), hooks, highlight_style="bold red")

    assert str(views[-1].spans[0].style) == "bold red"


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    hooks = TextualUIHooks(update_view=lambda text: None, log=logs.append)
    adapter = TextualPlaygroundAdapter(make_session(), hooks)

    adapter.flags_changed("gm")

    assert any(line.startswith("flags ->") for line in logs)
    assert any("result=" in line for line in logs)


def test_closed_adapter_stops_updating() -> None:
    views: List[Text] = []
    session = make_session()
    adapter = TextualPlaygroundAdapter(session, TextualUIHooks(update_view=views.append))

    adapter.close()
    session.set_pattern("cat")

    assert len(views) == 1
