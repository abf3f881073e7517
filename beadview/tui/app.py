"""Main TUI app: bead browser and tutorial trigger handling."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from textual import events
from textual.app import App
from textual.screen import Screen

from beadview.config import KeyConfig
from beadview.core.triggers import (
    BindingSet,
    TimerRequest,
    TriggerEngine,
    TriggerKind,
    dispatch_trigger_key,
    is_caps_lock,
)
from beadview.core.updater import UpdateCheckError, check_latest_release
from beadview.database import BeadStore
from beadview.hooks import HookExecutor
from beadview.tui.common.base_screen import BeadScreen
from beadview.tui.messages import ShowTutorial, TutorialTimerExpired
from beadview.tui.screens.beads.beads import BeadsScreen
from beadview.tui.screens.help.help_modal import ContextHelpModal, HelpModal
from beadview.tui.screens.tutorial.tutorial import TutorialScreen

logger = logging.getLogger(__name__)

PENDING_HINT = "… tap again for context help"


def key_text(event: events.Key) -> str:
    """Textual form of a key press: the printed character, else the key name."""
    if event.character and event.character.isprintable():
        return event.character
    return event.key


class BeadViewApp(App):
    """beadview TUI. Default screen: Beads list."""

    TITLE = "beadview"
    SUB_TITLE = "Beads Browser"

    BINDINGS = []

    def __init__(
        self,
        store: BeadStore,
        key_config: Optional[KeyConfig] = None,
        hooks: Optional[HookExecutor] = None,
        update_url: Optional[str] = None,
        update_timeout: float = 5.0,
        **kwargs,
    ):  # type: ignore[no-untyped-def]
        super().__init__(**kwargs)
        self._store = store
        self._key_config = key_config or KeyConfig()
        self._hooks = hooks
        self._update_url = update_url
        self._update_timeout = update_timeout
        self.trigger_engine = TriggerEngine(self._key_config.threshold)

    @property
    def tutorial_bindings(self) -> BindingSet:
        """Tutorial key bindings in effect."""
        return self._key_config.bindings

    def on_mount(self) -> None:
        """Push the beads screen and kick off the update check."""
        self.push_screen(BeadsScreen(self._store, self._hooks))
        if self._update_url:
            asyncio.create_task(self._check_updates_async())

    async def _check_updates_async(self) -> None:
        """Best-effort update notice; failures only reach the log."""
        try:
            tag, url = await asyncio.to_thread(
                check_latest_release, self._update_url, self._update_timeout
            )
        except UpdateCheckError as e:
            logger.debug("%s", e)
            return
        if tag:
            self.notify(f"beadview {tag} is available: {url}", timeout=6)

    # -- tutorial triggers -------------------------------------------------

    def on_key(self, event: events.Key) -> None:
        """Feed trigger keys to the tap engine."""
        if is_caps_lock(event):
            logger.debug("Caps Lock detected")
        kind, timer = dispatch_trigger_key(
            key_text(event), self.tutorial_bindings, self.trigger_engine
        )
        if kind is TriggerKind.NONE and timer is None:
            return
        event.stop()
        self._apply_trigger(kind, timer)

    def _apply_trigger(self, kind: TriggerKind, timer: Optional[TimerRequest]) -> None:
        if timer is not None:
            self.set_timer(timer.delay, self._on_trigger_timer)
        if kind is TriggerKind.FULL_TUTORIAL:
            self.post_message(ShowTutorial(context_only=False))
        elif kind is TriggerKind.CONTEXT_HELP:
            self.post_message(ShowTutorial(context_only=True))
        self._update_pending_hint()

    def _on_trigger_timer(self) -> None:
        self.post_message(TutorialTimerExpired())

    def on_tutorial_timer_expired(self, message: TutorialTimerExpired) -> None:
        """Single-tap window closed."""
        self._apply_trigger(self.trigger_engine.handle_timer_expired(), None)

    def on_app_blur(self, event: events.AppBlur) -> None:
        """Abandon a half-finished double tap when the terminal loses focus."""
        self.trigger_engine.reset()
        self._update_pending_hint()

    def _update_pending_hint(self) -> None:
        if self.trigger_engine.is_pending():
            self.sub_title = f"{self.SUB_TITLE} {PENDING_HINT}"
        else:
            self.sub_title = self.SUB_TITLE

    def _context_screen(self) -> Optional[BeadScreen]:
        """Topmost regular screen, beneath any open modals."""
        for screen in reversed(self.screen_stack):
            if isinstance(screen, BeadScreen):
                return screen
        return None

    def build_help_screen(self, context_only: bool) -> Screen:
        """Tutorial, or context help for the current screen."""
        if not context_only:
            return TutorialScreen(self.tutorial_bindings)
        screen = self._context_screen()
        if screen is None:
            return ContextHelpModal("beadview", [])
        return ContextHelpModal(screen.HELP_TITLE, list(screen.CONTEXT_HELP))

    def on_show_tutorial(self, message: ShowTutorial) -> None:
        """Open tutorial or context help, replacing any open help modal."""
        if isinstance(self.screen, (TutorialScreen, ContextHelpModal, HelpModal)):
            self.pop_screen()
        self.push_screen(
            self.build_help_screen(message.context_only),
            callback=self._on_help_dismissed,
        )

    def _on_help_dismissed(self, _result: object) -> None:
        self.trigger_engine.reset()
        self._update_pending_hint()
