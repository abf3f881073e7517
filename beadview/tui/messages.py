"""App-level messages for tutorial triggers."""

from __future__ import annotations

from textual.message import Message


class TutorialTimerExpired(Message):
    """The single-tap window closed without a second tap."""


class ShowTutorial(Message):
    """Open the tutorial, or only help for the current screen."""

    def __init__(self, context_only: bool = False) -> None:
        self.context_only = context_only
        super().__init__()
