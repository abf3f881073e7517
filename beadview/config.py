"""Environment and settings (Pydantic Settings) plus ~/.beadview/config.toml."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Mapping, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from beadview.core.triggers import (
    DEFAULT_CONTEXT_HELP_KEY,
    DEFAULT_DOUBLE_TAP_THRESHOLD,
    DEFAULT_TUTORIAL_KEY,
    BindingSet,
)
from beadview.core.updater import DEFAULT_TIMEOUT, RELEASES_URL
from beadview.hooks.executor import DEFAULT_HOOK_TIMEOUT, HOOK_EVENTS

logger = logging.getLogger(__name__)

# Default state directory: ~/.beadview/
_state_dir = Path.home() / ".beadview"

DEFAULT_CONFIG_PATH = _state_dir / "config.toml"


class Settings(BaseSettings):
    """beadview settings loaded from environment and .env.

    Key bindings and hooks live in ~/.beadview/config.toml (see
    ``load_key_config`` / ``load_hooks``).
    """

    model_config = SettingsConfigDict(
        env_prefix="BEADVIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Explicit issues.jsonl; otherwise discovered from the working directory
    beads_path: Optional[Path] = None
    config_path: Path = DEFAULT_CONFIG_PATH

    # Update check
    update_check: bool = True
    update_url: str = RELEASES_URL
    update_timeout: float = DEFAULT_TIMEOUT

    # Hooks
    hook_timeout: float = DEFAULT_HOOK_TIMEOUT

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: Path = _state_dir / "beadview.log"


def get_settings() -> Settings:
    """Return application settings (singleton-like)."""
    return Settings()


@dataclass(frozen=True)
class KeyConfig:
    """Effective tutorial bindings plus the double-tap window."""

    bindings: BindingSet = field(default_factory=BindingSet)
    threshold: float = DEFAULT_DOUBLE_TAP_THRESHOLD  # seconds


def _load_toml(path: Path) -> dict[str, Any]:
    """Load a TOML file. Missing or unreadable files yield an empty dict."""
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return {}


def _key_value(env_name: str, section: Mapping[str, Any], name: str, default: str) -> str:
    raw = os.environ.get(env_name, "").strip() or section.get(name)
    if not isinstance(raw, str) or not raw.strip():
        if raw is not None:
            logger.warning("Invalid key binding %s=%r, using %r", name, raw, default)
        return default
    return raw.strip()


def _bool_value(section: Mapping[str, Any], name: str, default: bool) -> bool:
    raw = section.get(name, default)
    if not isinstance(raw, bool):
        logger.warning("Invalid boolean %s=%r, using %s", name, raw, default)
        return default
    return raw


def _threshold_value(section: Mapping[str, Any]) -> float:
    raw: Any = os.environ.get("BEADVIEW_DOUBLE_TAP_THRESHOLD_MS", "").strip() or None
    if raw is None:
        raw = section.get("double_tap_threshold_ms")
    if raw is None:
        return DEFAULT_DOUBLE_TAP_THRESHOLD
    try:
        millis = int(raw)
    except (TypeError, ValueError):
        millis = -1
    if millis <= 0:
        logger.warning("Invalid double_tap_threshold_ms=%r, using default", raw)
        return DEFAULT_DOUBLE_TAP_THRESHOLD
    return millis / 1000.0


def load_key_config(config_path: Optional[Path] = None) -> KeyConfig:
    """Build the tutorial key configuration.

    Configuration sources (in order of precedence):
    1. Environment variables (BEADVIEW_TUTORIAL_KEY, BEADVIEW_CONTEXT_HELP_KEY,
       BEADVIEW_DOUBLE_TAP_THRESHOLD_MS)
    2. ``[keys]`` in the config file
    3. Defaults (backtick, tilde, 300 ms)
    """
    section = _load_toml(config_path or DEFAULT_CONFIG_PATH).get("keys", {})
    if not isinstance(section, dict):
        section = {}

    bindings = BindingSet(
        direct_tutorial=_key_value(
            "BEADVIEW_TUTORIAL_KEY", section, "direct_tutorial", DEFAULT_TUTORIAL_KEY
        ),
        context_help=_key_value(
            "BEADVIEW_CONTEXT_HELP_KEY",
            section,
            "context_help",
            DEFAULT_CONTEXT_HELP_KEY,
        ),
        help_modal_space=_bool_value(section, "help_modal_space", True),
        double_tap_enabled=_bool_value(section, "double_tap", True),
    )
    if bindings.direct_tutorial == bindings.context_help:
        logger.warning(
            "Tutorial and context help share key %r; tutorial wins",
            bindings.direct_tutorial,
        )
    return KeyConfig(bindings=bindings, threshold=_threshold_value(section))


def load_hooks(config_path: Optional[Path] = None) -> dict[str, str]:
    """Read ``[hooks]``: event name -> shell command."""
    section = _load_toml(config_path or DEFAULT_CONFIG_PATH).get("hooks", {})
    if not isinstance(section, dict):
        return {}
    hooks: dict[str, str] = {}
    for event, command in section.items():
        if event not in HOOK_EVENTS:
            logger.warning("Unknown hook event %r ignored", event)
            continue
        if isinstance(command, str) and command.strip():
            hooks[event] = command.strip()
    return hooks
