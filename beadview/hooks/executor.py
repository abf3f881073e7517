"""Run user-configured shell hooks for bead events."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

from beadview.models import Bead

logger = logging.getLogger(__name__)

DEFAULT_HOOK_TIMEOUT = 10.0  # seconds

# Known hook events
HOOK_EVENTS = ("on_select",)


class HookError(Exception):
    """Hook command could not be started or did not finish in time."""


@dataclass
class HookResult:
    """Outcome of one hook run."""

    event: str
    command: str
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def get_shell_command() -> tuple[str, str]:
    """Return the shell and its command flag for this OS."""
    if sys.platform == "win32":
        return "cmd", "/C"
    return "sh", "-c"


def bead_environment(bead: Bead) -> dict[str, str]:
    """Environment variables describing ``bead`` for hook commands."""
    return {
        "BEADVIEW_BEAD_ID": bead.id,
        "BEADVIEW_BEAD_TITLE": bead.title,
        "BEADVIEW_BEAD_STATUS": bead.status,
    }


class HookExecutor:
    """Runs hook commands configured per event in ``[hooks]``."""

    def __init__(
        self,
        hooks: Optional[Mapping[str, str]] = None,
        timeout: float = DEFAULT_HOOK_TIMEOUT,
    ) -> None:
        self._hooks = {k: v for k, v in (hooks or {}).items() if v and v.strip()}
        self._timeout = timeout

    def has_hook(self, event: str) -> bool:
        return event in self._hooks

    def run(self, event: str, bead: Bead) -> Optional[HookResult]:
        """Run the hook for ``event`` with ``bead`` in its environment.

        Returns:
            HookResult, or None if no hook is configured for the event.

        Raises:
            HookError: If the shell cannot be spawned or the hook times out.
        """
        command = self._hooks.get(event)
        if command is None:
            return None

        shell, flag = get_shell_command()
        env = {**os.environ, **bead_environment(bead)}
        logger.info("Running %s hook for %s: %s", event, bead.id, command)
        try:
            result = subprocess.run(
                [shell, flag, command],
                capture_output=True,
                text=True,
                timeout=self._timeout,
                env=env,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise HookError(
                f"{event} hook timed out after {self._timeout:g}s"
            ) from e
        except OSError as e:
            raise HookError(f"{event} hook could not start: {e}") from e

        if result.returncode != 0:
            logger.warning(
                "%s hook exited with %d: %s",
                event,
                result.returncode,
                result.stderr.strip(),
            )
        return HookResult(
            event=event,
            command=command,
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
