"""Shared keybinding contract for TUI screens and modals."""

from __future__ import annotations

from typing import TypeAlias

Binding: TypeAlias = tuple[str, str, str]

QUIT_Q_BINDING: Binding = ("q", "quit", "Quit")
BACK_ESCAPE_BINDING: Binding = ("escape", "go_back", "Back")
HELP_BINDING: Binding = ("?", "show_help", "Help")
NAV_DOWN_BINDING: Binding = ("j", "cursor_down", "Down")
NAV_UP_BINDING: Binding = ("k", "cursor_up", "Up")

MODAL_CLOSE_ESCAPE_BINDING: Binding = ("escape", "close", "Close")
MODAL_CLOSE_Q_BINDING: Binding = ("q", "close", "Close")
HELP_SPACE_TUTORIAL_BINDING: Binding = ("space", "open_tutorial", "Tutorial")

TUTORIAL_NEXT_BINDING: Binding = ("n", "next_page", "Next")
TUTORIAL_NEXT_RIGHT_BINDING: Binding = ("right", "next_page", "Next")
TUTORIAL_PREV_BINDING: Binding = ("p", "prev_page", "Previous")
TUTORIAL_PREV_LEFT_BINDING: Binding = ("left", "prev_page", "Previous")


def compose_bindings(*bindings: Binding) -> list[Binding]:
    """Return keybinding tuples in order."""
    return list(bindings)


def with_global_bindings(*bindings: Binding) -> list[Binding]:
    """Prefix bindings with the global screen contract."""
    return compose_bindings(
        QUIT_Q_BINDING,
        BACK_ESCAPE_BINDING,
        NAV_DOWN_BINDING,
        NAV_UP_BINDING,
        HELP_BINDING,
        *bindings,
    )


def with_modal_bindings(*bindings: Binding) -> list[Binding]:
    """Prefix bindings with the global modal contract."""
    return compose_bindings(
        MODAL_CLOSE_ESCAPE_BINDING,
        MODAL_CLOSE_Q_BINDING,
        *bindings,
    )
