"""Schema for beads (issues) as stored in a beads ``issues.jsonl`` export."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

BeadStatus = Literal["open", "in_progress", "blocked", "closed"]
BeadType = Literal["bug", "feature", "task", "epic", "chore"]

# Display / sort order for statuses
STATUS_ORDER: tuple[BeadStatus, ...] = ("in_progress", "open", "blocked", "closed")


class Bead(BaseModel):
    """Single work item tracked by beads."""

    id: str
    title: str
    description: str = ""
    status: BeadStatus = "open"
    priority: int = Field(default=2, ge=0, le=4)  # 0 = critical, 4 = backlog
    issue_type: str = "task"  # usually a BeadType
    assignee: Optional[str] = None
    labels: list[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None

    @property
    def priority_label(self) -> str:
        """Short priority badge, e.g. ``P1``."""
        return f"P{self.priority}"
