"""Tutorial screen: paged walkthrough of beadview."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static

from beadview.core.triggers import BindingSet, default_bindings
from beadview.tui.common.base_screen import BeadModalScreen
from beadview.tui.common.keybindings import (
    TUTORIAL_NEXT_BINDING,
    TUTORIAL_NEXT_RIGHT_BINDING,
    TUTORIAL_PREV_BINDING,
    TUTORIAL_PREV_LEFT_BINDING,
    with_modal_bindings,
)
from beadview.tui.screens.tutorial.content import build_tutorial_pages


class TutorialScreen(BeadModalScreen[None]):
    """Full tutorial, one page at a time."""

    BINDINGS = with_modal_bindings(
        TUTORIAL_NEXT_BINDING,
        TUTORIAL_NEXT_RIGHT_BINDING,
        TUTORIAL_PREV_BINDING,
        TUTORIAL_PREV_LEFT_BINDING,
    )

    DEFAULT_CSS = """
    TutorialScreen {
        align: center middle;
    }

    #tutorial-dialog {
        width: 76;
        height: auto;
        border: round $primary;
        background: $surface;
        padding: 1 2;
    }

    #tutorial-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #tutorial-footer {
        margin-top: 1;
        color: $text-muted;
    }
    """

    def __init__(self, bindings: BindingSet | None = None) -> None:
        super().__init__()
        self._pages = build_tutorial_pages(bindings or default_bindings())
        self._index = 0

    @property
    def page_index(self) -> int:
        return self._index

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def compose(self) -> ComposeResult:
        with Vertical(id="tutorial-dialog"):
            yield Static("", id="tutorial-title")
            yield Static("", id="tutorial-body")
            yield Static("", id="tutorial-footer")

    def on_mount(self) -> None:
        self._render_page()

    def action_next_page(self) -> None:
        if self._index < len(self._pages) - 1:
            self._index += 1
            self._render_page()

    def action_prev_page(self) -> None:
        if self._index > 0:
            self._index -= 1
            self._render_page()

    def _render_page(self) -> None:
        if not self.is_mounted:
            return
        page = self._pages[self._index]
        self.query_one("#tutorial-title", Static).update(
            f"📘 {page.title}  ({self._index + 1}/{len(self._pages)})"
        )
        self.query_one("#tutorial-body", Static).update(page.body)
        self.query_one("#tutorial-footer", Static).update(
            "n/→ next │ p/← previous │ Esc close"
        )
