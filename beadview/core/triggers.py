"""Tutorial trigger keys and single/double tap disambiguation.

Caps Lock does not reach the application on most terminals: the OS or the
terminal emulator consumes it to toggle letter case. Tutorial access is
therefore driven by plain printable keys that always arrive:

- ``?`` opens the help modal, Space inside it opens the tutorial
- `` ` `` (backtick) opens the tutorial directly
- ``~`` (tilde) opens context help for the current screen

On top of the direct tutorial key a double-tap gesture is layered: one tap
waits for the threshold and then opens the full tutorial, two taps inside the
threshold open context help instead.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_TUTORIAL_KEY = "`"
DEFAULT_CONTEXT_HELP_KEY = "~"
DEFAULT_DOUBLE_TAP_THRESHOLD = 0.3  # seconds


class TriggerKind(Enum):
    """What the user asked for with a trigger key."""

    NONE = "none"
    FULL_TUTORIAL = "full tutorial"
    CONTEXT_HELP = "context help"

    def __str__(self) -> str:
        return self.value


class KeyMatch(Enum):
    """Which binding a key press matches."""

    DIRECT_TUTORIAL = "direct_tutorial"
    CONTEXT_HELP = "context_help"
    NEITHER = "neither"


class TimerExpired:
    """Marker the host hands back once a requested delay has passed."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "TimerExpired()"


@dataclass(frozen=True)
class TimerRequest:
    """Ask the host to call ``handle_timer_expired`` after ``delay`` seconds."""

    delay: float
    marker: TimerExpired


@dataclass(frozen=True)
class BindingSet:
    """Key bindings for tutorial access."""

    direct_tutorial: str = DEFAULT_TUTORIAL_KEY
    context_help: str = DEFAULT_CONTEXT_HELP_KEY
    help_modal_space: bool = True  # Space in the help modal opens the tutorial
    double_tap_enabled: bool = True

    def is_direct_tutorial(self, key: Optional[str]) -> bool:
        """Return True if ``key`` is the direct tutorial binding."""
        return bool(key) and key == self.direct_tutorial

    def is_context_help(self, key: Optional[str]) -> bool:
        """Return True if ``key`` is the context help binding."""
        return bool(key) and key == self.context_help


def default_bindings() -> BindingSet:
    """Return the default tutorial bindings (backtick / tilde, both gestures on)."""
    return BindingSet()


def classify_trigger(key: Optional[str], bindings: BindingSet) -> KeyMatch:
    """Classify a key's textual form against ``bindings``.

    Matching is exact and case-sensitive. Unknown, empty or missing keys are
    simply ``KeyMatch.NEITHER``.
    """
    if bindings.is_direct_tutorial(key):
        return KeyMatch.DIRECT_TUTORIAL
    if bindings.is_context_help(key):
        return KeyMatch.CONTEXT_HELP
    return KeyMatch.NEITHER


def is_caps_lock(key_event: Any) -> bool:
    """Best-effort Caps Lock detection. Always conservative.

    Terminals that forward Caps Lock at all (kitty, alacritty with custom
    config) do so through protocol extensions Textual does not surface, and
    everything else looks like an ordinary printable key or a bare modifier.
    Neither is evidence of Caps Lock, so this never claims a detection. Hosts
    should rely on the bound trigger keys instead.
    """
    return False


def trigger_key_hint(bindings: BindingSet) -> str:
    """Return a short hint such as "` tutorial | ~ context help"."""
    return f"{bindings.direct_tutorial} tutorial | {bindings.context_help} context help"


class TriggerEngine:
    """Tells a single tap of the trigger key from a double tap.

    The engine never sleeps and never starts timers. A first press returns a
    ``TimerRequest`` that the host schedules on its own loop; when it fires the
    host calls ``handle_timer_expired``. No timer handle is kept, so a stale
    expiry (after a double tap or a reset) resolves to ``TriggerKind.NONE``.

    Not thread-safe: feed it from one event loop, in arrival order.
    """

    def __init__(self, threshold: float = DEFAULT_DOUBLE_TAP_THRESHOLD) -> None:
        self._threshold = threshold
        self._last_press: Optional[float] = None
        self._pending = False

    @property
    def threshold(self) -> float:
        """Double-tap window in seconds."""
        return self._threshold

    def handle_press(
        self, now: Optional[float] = None
    ) -> tuple[TriggerKind, Optional[TimerRequest]]:
        """Register a trigger key press.

        Returns ``(CONTEXT_HELP, None)`` when this press completes a double tap,
        otherwise ``(NONE, TimerRequest)`` and the engine waits for either a
        second press or the timer.
        """
        if now is None:
            now = time.monotonic()

        if self._pending and self._last_press is not None:
            elapsed = now - self._last_press
            if 0 <= elapsed < self._threshold:
                self._clear()
                logger.debug("Double tap after %.3fs: context help", elapsed)
                return TriggerKind.CONTEXT_HELP, None

        # Idle, or the previous window already lapsed without its timer firing.
        self._last_press = now
        self._pending = True
        return TriggerKind.NONE, TimerRequest(
            delay=max(self._threshold, 0.0), marker=TimerExpired()
        )

    def handle_timer_expired(self) -> TriggerKind:
        """Resolve a pending single tap.

        Returns ``FULL_TUTORIAL`` if a tap was waiting, ``NONE`` otherwise.
        """
        if not self._pending:
            return TriggerKind.NONE
        self._clear()
        logger.debug("No second tap within %.3fs: full tutorial", self._threshold)
        return TriggerKind.FULL_TUTORIAL

    def reset(self) -> None:
        """Drop any pending tap."""
        self._clear()

    def is_pending(self) -> bool:
        """Return True while waiting for a possible second tap."""
        return self._pending

    def _clear(self) -> None:
        self._last_press = None
        self._pending = False


def dispatch_trigger_key(
    key: Optional[str],
    bindings: BindingSet,
    engine: TriggerEngine,
    now: Optional[float] = None,
) -> tuple[TriggerKind, Optional[TimerRequest]]:
    """Route one key press through ``bindings`` and ``engine``.

    Keys that are not trigger keys leave the engine untouched.
    """
    match = classify_trigger(key, bindings)
    if match is KeyMatch.CONTEXT_HELP:
        engine.reset()
        return TriggerKind.CONTEXT_HELP, None
    if match is KeyMatch.DIRECT_TUTORIAL:
        if bindings.double_tap_enabled:
            return engine.handle_press(now)
        return TriggerKind.FULL_TUTORIAL, None
    return TriggerKind.NONE, None
