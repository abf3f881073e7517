"""Help modal (?) and per-screen context help."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static

from beadview.core.triggers import trigger_key_hint
from beadview.tui.common.base_screen import BeadModalScreen
from beadview.tui.common.keybindings import (
    HELP_SPACE_TUTORIAL_BINDING,
    with_modal_bindings,
)
from beadview.tui.messages import ShowTutorial


def _dialog_css(screen: str) -> str:
    return f"""
    {screen} {{
        align: center middle;
    }}

    #help-dialog {{
        width: 64;
        height: auto;
        border: round $primary;
        background: $surface;
        padding: 1 2;
    }}

    #help-title {{
        text-style: bold;
        margin-bottom: 1;
    }}

    #help-hint {{
        margin-top: 1;
        color: $text-muted;
    }}
    """


def format_key_rows(rows: list[tuple[str, str]]) -> str:
    """Render (key, description) rows as aligned text."""
    return "\n".join(f"{key:<10}{desc}" for key, desc in rows)


class HelpModal(BeadModalScreen[None]):
    """Global key reference. Space opens the full tutorial when enabled."""

    BINDINGS = with_modal_bindings(HELP_SPACE_TUTORIAL_BINDING)

    DEFAULT_CSS = _dialog_css("HelpModal")

    def _key_rows(self) -> list[tuple[str, str]]:
        bindings = getattr(self.app, "tutorial_bindings", None)
        rows = [
            ("j / k", "Move down / up"),
            ("enter", "Run on_select hook"),
            ("s", "Cycle status filter"),
            ("r", "Reload beads"),
            ("?", "This help"),
            ("q", "Quit"),
        ]
        if bindings is not None:
            rows.append((bindings.direct_tutorial, "Tutorial"))
            rows.append((bindings.context_help, "Help for this screen"))
        return rows

    def compose(self) -> ComposeResult:
        with Vertical(id="help-dialog"):
            yield Static("⌨ Keyboard Reference", id="help-title")
            yield Static(format_key_rows(self._key_rows()), id="help-body")
            yield Static(self._hint_text(), id="help-hint")

    def _hint_text(self) -> str:
        bindings = getattr(self.app, "tutorial_bindings", None)
        if bindings is None:
            return "Esc close"
        hint = trigger_key_hint(bindings)
        if bindings.help_modal_space:
            return f"Space tutorial │ {hint} │ Esc close"
        return f"{hint} │ Esc close"

    def action_open_tutorial(self) -> None:
        """Swap this modal for the full tutorial, if Space is enabled."""
        bindings = getattr(self.app, "tutorial_bindings", None)
        if bindings is not None and not bindings.help_modal_space:
            return
        self.dismiss(None)
        self.app.post_message(ShowTutorial(context_only=False))


class ContextHelpModal(BeadModalScreen[None]):
    """Help for the screen the user was looking at."""

    DEFAULT_CSS = _dialog_css("ContextHelpModal")

    def __init__(self, title: str, rows: list[tuple[str, str]]) -> None:
        super().__init__()
        self._title = title
        self._rows = rows

    def compose(self) -> ComposeResult:
        with Vertical(id="help-dialog"):
            yield Static(f"❔ {self._title}", id="help-title")
            yield Static(
                format_key_rows(self._rows) or "No additional help for this screen.",
                id="help-body",
            )
            yield Static("Esc close", id="help-hint")
