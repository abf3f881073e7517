"""Application logic layer."""

from .triggers import (
    BindingSet,
    KeyMatch,
    TimerExpired,
    TimerRequest,
    TriggerEngine,
    TriggerKind,
    classify_trigger,
    default_bindings,
    dispatch_trigger_key,
    is_caps_lock,
    trigger_key_hint,
)

__all__ = [
    "BindingSet",
    "KeyMatch",
    "TimerExpired",
    "TimerRequest",
    "TriggerEngine",
    "TriggerKind",
    "classify_trigger",
    "default_bindings",
    "dispatch_trigger_key",
    "is_caps_lock",
    "trigger_key_hint",
]
