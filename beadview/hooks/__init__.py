"""Shell hooks."""

from .executor import (
    HOOK_EVENTS,
    HookError,
    HookExecutor,
    HookResult,
    get_shell_command,
)

__all__ = [
    "HOOK_EVENTS",
    "HookError",
    "HookExecutor",
    "HookResult",
    "get_shell_command",
]
