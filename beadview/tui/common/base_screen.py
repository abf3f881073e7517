"""Shared base screen classes for beadview TUI."""

from __future__ import annotations

from typing import ClassVar, Generic, TypeVar

from textual.screen import ModalScreen, Screen

from beadview.tui.common.keybindings import with_global_bindings, with_modal_bindings

_T = TypeVar("_T")


class BeadScreen(Screen):
    """Base class for beadview screens with unified global bindings.

    ``HELP_TITLE`` and ``CONTEXT_HELP`` feed the context help modal opened by
    the context help key (or a double tap on the tutorial key).
    """

    BINDINGS = with_global_bindings()

    HELP_TITLE: ClassVar[str] = "beadview"
    CONTEXT_HELP: ClassVar[list[tuple[str, str]]] = []

    def action_quit(self) -> None:
        """Quit the app from any screen."""
        self.app.exit()

    def action_go_back(self) -> None:
        """Default back behavior for screens."""
        if len(self.app.screen_stack) <= 2:
            self.app.exit()
        else:
            self.app.pop_screen()

    def action_show_help(self) -> None:
        """Open the help modal."""
        from beadview.tui.screens.help.help_modal import HelpModal

        self.app.push_screen(HelpModal())

    def action_cursor_down(self) -> None:
        """Default no-op cursor movement hook."""
        return

    def action_cursor_up(self) -> None:
        """Default no-op cursor movement hook."""
        return


class BeadModalScreen(ModalScreen[_T], Generic[_T]):
    """Base class for beadview modals with unified modal bindings."""

    BINDINGS = with_modal_bindings()

    def action_close(self) -> None:
        """Close modal with no result."""
        self.dismiss(None)
