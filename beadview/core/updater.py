"""Check GitHub releases for a newer beadview version."""

from __future__ import annotations

import logging
import re
from importlib.metadata import PackageNotFoundError, version as get_package_version
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

RELEASES_URL = (
    "https://api.github.com/repos/Dicklesworthstone/beads_viewer/releases/latest"
)
DEFAULT_TIMEOUT = 5.0

# GitHub answers 403 (unauthenticated) or 429 once the API quota is used up.
QUOTA_STATUS_CODES = frozenset({403, 429})

_VERSION_RE = re.compile(r"^v?(\d+)(?:\.(\d+))?(?:\.(\d+))?")


class UpdateCheckError(Exception):
    """Update check failed (server error, bad payload, network failure)."""


def current_version() -> str:
    """Installed package version (single source of truth: pyproject.toml)."""
    try:
        return get_package_version("beadview")
    except PackageNotFoundError:
        return "0.0.0-dev"


def parse_version(tag: str) -> Optional[tuple[int, int, int]]:
    """Parse ``v1.2.3`` / ``1.2`` into a comparable tuple, or None."""
    match = _VERSION_RE.match(tag.strip())
    if not match:
        return None
    return tuple(int(part or 0) for part in match.groups())  # type: ignore[return-value]


def is_newer(tag: str, installed: str) -> bool:
    """True if release ``tag`` is strictly newer than ``installed``."""
    remote = parse_version(tag)
    local = parse_version(installed)
    if remote is None or local is None:
        return False
    return remote > local


def check_for_updates(
    client: httpx.Client,
    url: str = RELEASES_URL,
    installed: Optional[str] = None,
) -> tuple[str, str]:
    """Fetch the latest release and compare it with the installed version.

    Returns:
        ``(tag, html_url)`` if a newer release exists, ``("", "")`` otherwise.
        Rate limiting is not an error and also yields ``("", "")``.

    Raises:
        UpdateCheckError: Non-quota HTTP failure, transport error, or a
            payload that is not a release object.
    """
    installed = installed or current_version()
    try:
        response = client.get(url, headers={"Accept": "application/vnd.github+json"})
    except httpx.HTTPError as e:
        raise UpdateCheckError(f"Update check failed: {e}") from e

    if response.status_code in QUOTA_STATUS_CODES:
        logger.debug("Update check rate limited (HTTP %d)", response.status_code)
        return "", ""
    if not response.is_success:
        raise UpdateCheckError(f"Update check failed: HTTP {response.status_code}")

    try:
        payload = response.json()
    except ValueError as e:
        raise UpdateCheckError(f"Invalid release payload: {e}") from e

    if not isinstance(payload, dict) or not isinstance(payload.get("tag_name"), str):
        raise UpdateCheckError("Invalid release payload: missing tag_name")

    tag = payload["tag_name"]
    if not is_newer(tag, installed):
        logger.debug("Up to date (installed %s, latest %s)", installed, tag)
        return "", ""
    return tag, str(payload.get("html_url") or "")


def check_latest_release(
    url: str = RELEASES_URL, timeout: float = DEFAULT_TIMEOUT
) -> tuple[str, str]:
    """Run ``check_for_updates`` with a short-lived client."""
    with httpx.Client(timeout=timeout, follow_redirects=True) as client:
        return check_for_updates(client, url)
