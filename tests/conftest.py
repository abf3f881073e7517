"""Global fixtures: temp beads file, store, isolated config."""

import json
from pathlib import Path

import pytest

from beadview.database import BeadStore

SAMPLE_BEADS = [
    {
        "id": "bv-3",
        "title": "Closed chore",
        "status": "closed",
        "priority": 3,
        "issue_type": "chore",
    },
    {
        "id": "bv-1",
        "title": "Fix tutorial trigger",
        "description": "Backtick should open the tutorial.",
        "status": "open",
        "priority": 1,
        "issue_type": "bug",
        "labels": ["tui", "help"],
    },
    {
        "id": "bv-2",
        "title": "Ship status filter",
        "status": "in_progress",
        "priority": 2,
        "issue_type": "feature",
        "assignee": "sam",
    },
    {
        "id": "bv-4",
        "title": "Urgent open bug",
        "status": "open",
        "priority": 0,
        "issue_type": "bug",
    },
]


@pytest.fixture
def beads_file(tmp_path: Path) -> Path:
    """issues.jsonl with a few beads in mixed order."""
    path = tmp_path / ".beads" / "issues.jsonl"
    path.parent.mkdir()
    path.write_text("\n".join(json.dumps(b) for b in SAMPLE_BEADS) + "\n")
    return path


@pytest.fixture
def store(beads_file: Path) -> BeadStore:
    """BeadStore over the sample beads file."""
    return BeadStore(beads_file)


@pytest.fixture(autouse=True)
def _clean_beadview_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's BEADVIEW_* variables out of tests."""
    for name in (
        "BEADVIEW_TUTORIAL_KEY",
        "BEADVIEW_CONTEXT_HELP_KEY",
        "BEADVIEW_DOUBLE_TAP_THRESHOLD_MS",
        "BEADVIEW_BEADS_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
