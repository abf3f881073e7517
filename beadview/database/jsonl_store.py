"""Read-only access to a beads ``issues.jsonl`` file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from beadview.models import STATUS_ORDER, Bead, BeadStatus

logger = logging.getLogger(__name__)

BEADS_DIR = ".beads"
ISSUES_FILE = "issues.jsonl"


def find_beads_file(start: Optional[Path] = None) -> Optional[Path]:
    """Walk up from ``start`` (default: cwd) to the nearest ``.beads/issues.jsonl``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / BEADS_DIR / ISSUES_FILE
        if candidate.is_file():
            return candidate
    return None


class BeadStore:
    """Loads beads from a JSONL export. One JSON object per line."""

    def __init__(self, path: Optional[Path]) -> None:
        self.path = path
        self._beads: Optional[list[Bead]] = None

    def load(self) -> list[Bead]:
        """(Re)read the file. A missing file yields no beads."""
        beads: list[Bead] = []
        if self.path is None or not self.path.exists():
            logger.info("No beads file at %s", self.path)
            self._beads = beads
            return beads

        with open(self.path, "rb") as f:
            for lineno, raw in enumerate(f, start=1):
                raw = raw.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw.decode("utf-8"))
                    beads.append(Bead.model_validate(record))
                except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
                    logger.warning("Skipping %s:%d: %s", self.path, lineno, e)

        self._beads = beads
        logger.debug("Loaded %d beads from %s", len(beads), self.path)
        return beads

    def _all(self) -> list[Bead]:
        if self._beads is None:
            return self.load()
        return self._beads

    def list_beads(self, status: Optional[BeadStatus] = None) -> list[Bead]:
        """Beads sorted by status, then priority, then id."""
        beads = [b for b in self._all() if status is None or b.status == status]
        return sorted(
            beads, key=lambda b: (STATUS_ORDER.index(b.status), b.priority, b.id)
        )

    def get(self, bead_id: str) -> Optional[Bead]:
        """Return bead by id or None."""
        for bead in self._all():
            if bead.id == bead_id:
                return bead
        return None

    def status_counts(self) -> dict[str, int]:
        """Count beads per status, in display order."""
        counts = {status: 0 for status in STATUS_ORDER}
        for bead in self._all():
            counts[bead.status] += 1
        return counts
