"""Unit tests for help modal, context help and the tutorial."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from beadview.core.triggers import BindingSet
from beadview.tui.messages import ShowTutorial
from beadview.tui.screens.help.help_modal import HelpModal, format_key_rows
from beadview.tui.screens.tutorial.content import build_tutorial_pages
from beadview.tui.screens.tutorial.tutorial import TutorialScreen


def _fake_app(bindings: BindingSet) -> SimpleNamespace:
    posted: list[object] = []
    return SimpleNamespace(
        tutorial_bindings=bindings, post_message=posted.append, posted=posted
    )


def test_format_key_rows_aligns_columns() -> None:
    assert format_key_rows([("j", "Down"), ("enter", "Open")]) == (
        "j         Down\nenter     Open"
    )


def test_help_space_opens_tutorial_when_enabled(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    app = _fake_app(BindingSet())
    modal = HelpModal()
    dismissed: list[Any] = []
    monkeypatch.setattr(HelpModal, "app", property(lambda self: app))
    monkeypatch.setattr(modal, "dismiss", dismissed.append)

    modal.action_open_tutorial()

    assert dismissed == [None]
    assert isinstance(app.posted[0], ShowTutorial)
    assert app.posted[0].context_only is False


def test_help_space_does_nothing_when_disabled(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    app = _fake_app(BindingSet(help_modal_space=False))
    modal = HelpModal()
    dismissed: list[Any] = []
    monkeypatch.setattr(HelpModal, "app", property(lambda self: app))
    monkeypatch.setattr(modal, "dismiss", dismissed.append)

    modal.action_open_tutorial()

    assert dismissed == []
    assert app.posted == []


def test_help_hint_mentions_trigger_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    app = _fake_app(BindingSet(direct_tutorial="t", context_help="T"))
    monkeypatch.setattr(HelpModal, "app", property(lambda self: app))

    hint = HelpModal()._hint_text()

    assert "Space tutorial" in hint
    assert "t tutorial | T context help" in hint


def test_tutorial_pages_use_configured_keys() -> None:
    pages = build_tutorial_pages(BindingSet(direct_tutorial="F1", context_help="F2"))
    help_page = next(p for p in pages if p.title == "Getting help")
    assert "F1" in help_page.body
    assert "F2" in help_page.body
    assert "twice quickly" in help_page.body


def test_tutorial_pages_mention_disabled_double_tap() -> None:
    pages = build_tutorial_pages(BindingSet(double_tap_enabled=False))
    assert any("turned off" in p.body for p in pages)


def test_tutorial_paging_stays_in_bounds() -> None:
    screen = TutorialScreen(BindingSet())

    screen.action_prev_page()
    assert screen.page_index == 0

    for _ in range(screen.page_count + 3):
        screen.action_next_page()
    assert screen.page_index == screen.page_count - 1


def test_tutorial_renders_current_page(monkeypatch: pytest.MonkeyPatch) -> None:
    screen = TutorialScreen(BindingSet())
    values: dict[str, object] = {}

    class _Static:
        def __init__(self, selector: str) -> None:
            self._selector = selector

        def update(self, value: object) -> None:
            values[self._selector] = value

    monkeypatch.setattr(TutorialScreen, "is_mounted", property(lambda self: True))
    monkeypatch.setattr(
        screen, "query_one", lambda selector, *_args, **_kwargs: _Static(selector)
    )

    screen.action_next_page()

    assert "Moving around" in str(values["#tutorial-title"])
    assert f"(2/{screen.page_count})" in str(values["#tutorial-title"])
