"""Unit tests for the GitHub release update check."""

from __future__ import annotations

import httpx
import pytest

from beadview.core.updater import (
    UpdateCheckError,
    check_for_updates,
    check_latest_release,
    is_newer,
    parse_version,
)

RELEASE_URL = "https://api.example.test/releases/latest"


def _client(status: int, body: str) -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, text=body)

    return httpx.Client(transport=httpx.MockTransport(handler))


def test_newer_release_returns_tag_and_url() -> None:
    client = _client(
        200, '{"tag_name": "v99.0.0", "html_url": "http://example.com/release"}'
    )
    assert check_for_updates(client, RELEASE_URL, installed="0.9.2") == (
        "v99.0.0",
        "http://example.com/release",
    )


def test_same_or_older_release_returns_empty() -> None:
    client = _client(
        200, '{"tag_name": "v0.0.0", "html_url": "http://example.com/release"}'
    )
    assert check_for_updates(client, RELEASE_URL, installed="0.9.2") == ("", "")


@pytest.mark.parametrize("status", [403, 429])
def test_rate_limit_is_swallowed(status: int) -> None:
    client = _client(status, '{"message": "rate limit exceeded"}')
    assert check_for_updates(client, RELEASE_URL, installed="0.9.2") == ("", "")


def test_server_error_raises() -> None:
    client = _client(500, "")
    with pytest.raises(UpdateCheckError, match="HTTP 500"):
        check_for_updates(client, RELEASE_URL, installed="0.9.2")


def test_invalid_json_raises() -> None:
    client = _client(200, "{invalid json}")
    with pytest.raises(UpdateCheckError):
        check_for_updates(client, RELEASE_URL, installed="0.9.2")


def test_payload_without_tag_raises() -> None:
    client = _client(200, '{"html_url": "http://example.com/release"}')
    with pytest.raises(UpdateCheckError, match="tag_name"):
        check_for_updates(client, RELEASE_URL, installed="0.9.2")


def test_transport_error_is_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    with pytest.raises(UpdateCheckError, match="connection refused"):
        check_for_updates(client, RELEASE_URL, installed="0.9.2")


def test_parse_version() -> None:
    assert parse_version("v1.2.3") == (1, 2, 3)
    assert parse_version("1.2") == (1, 2, 0)
    assert parse_version("0.0.0-dev") == (0, 0, 0)
    assert parse_version("nightly") is None


def test_is_newer_ignores_unparseable_tags() -> None:
    assert is_newer("v1.0.1", "1.0.0") is True
    assert is_newer("v1.0.0", "1.0.0") is False
    assert is_newer("nightly", "1.0.0") is False


def test_other_success_status_is_not_an_error() -> None:
    client = _client(
        203, '{"tag_name": "v99.0.0", "html_url": "http://example.com/release"}'
    )
    assert check_for_updates(client, RELEASE_URL, installed="0.9.2")[0] == "v99.0.0"


def test_check_latest_release_uses_its_own_client(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """The short-lived client gets the timeout and is handed to the check."""
    seen: dict[str, object] = {}

    def fake_check(client: httpx.Client, url: str) -> tuple[str, str]:
        seen["timeout"] = client.timeout.read
        seen["url"] = url
        return "v99.0.0", "http://example.com/release"

    monkeypatch.setattr("beadview.core.updater.check_for_updates", fake_check)

    assert check_latest_release(RELEASE_URL, timeout=2.5) == (
        "v99.0.0",
        "http://example.com/release",
    )
    assert seen == {"timeout": 2.5, "url": RELEASE_URL}
