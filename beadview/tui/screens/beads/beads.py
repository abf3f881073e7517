"""Beads screen: list of beads with a detail panel."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, ScrollableContainer, Vertical
from textual.widgets import Footer, Header, OptionList, Static
from textual.widgets.option_list import Option

from beadview.database import BeadStore
from beadview.hooks import HookError, HookExecutor
from beadview.models import STATUS_ORDER, Bead, BeadStatus
from beadview.tui.common.base_screen import BeadScreen
from beadview.tui.common.keybindings import with_global_bindings

logger = logging.getLogger(__name__)

STATUS_ICONS: dict[str, str] = {
    "in_progress": "●",
    "open": "○",
    "blocked": "⊘",
    "closed": "✓",
}

# None means "all statuses"
STATUS_FILTERS: tuple[Optional[BeadStatus], ...] = (None, *STATUS_ORDER)


def format_bead_row(bead: Bead, width: int = 48) -> str:
    """One-line list preview: icon, priority, id, title."""
    title = bead.title.split("\n")[0].strip()
    if len(title) > width:
        title = title[:width] + "…"
    return f" {STATUS_ICONS.get(bead.status, '·')} {bead.priority_label} {bead.id}  {title}"


def next_status_filter(current: Optional[BeadStatus]) -> Optional[BeadStatus]:
    """Cycle all -> in_progress -> open -> blocked -> closed -> all."""
    index = STATUS_FILTERS.index(current)
    return STATUS_FILTERS[(index + 1) % len(STATUS_FILTERS)]


class BeadsScreen(BeadScreen):
    """Default landing screen: every bead in the repository."""

    BINDINGS = with_global_bindings(
        ("enter", "select_bead", "Open"),
        ("s", "cycle_status", "Status"),
        ("r", "reload", "Reload"),
    )

    HELP_TITLE = "Beads list"
    CONTEXT_HELP = [
        ("j / k", "Move through the list"),
        ("enter", "Run the on_select hook for the highlighted bead"),
        ("s", "Cycle status filter"),
        ("r", "Reload issues.jsonl"),
        ("●○⊘✓", "In progress / open / blocked / closed"),
    ]

    DEFAULT_CSS = """
    #beads-content {
        height: 1fr;
    }

    #beads-left {
        width: 3fr;
    }

    #beads-right {
        width: 2fr;
        border-left: solid $primary;
        padding: 0 1;
    }

    #beads-empty {
        display: none;
        align: center middle;
    }

    #beads-help-text {
        color: $text-muted;
    }
    """

    def __init__(
        self,
        store: BeadStore,
        hooks: Optional[HookExecutor] = None,
    ) -> None:
        super().__init__()
        self._store = store
        self._hooks = hooks or HookExecutor()
        self._beads: list[Bead] = []
        self._status_filter: Optional[BeadStatus] = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="beads-header"):
            yield Static("", id="beads-count")
        with Horizontal(id="beads-content"):
            with Vertical(id="beads-left"):
                yield OptionList(id="beads-list")
            with Vertical(id="beads-right"):
                yield Static("📄 Bead", id="beads-detail-title")
                with ScrollableContainer(id="beads-detail-scroll"):
                    yield Static("", id="beads-detail-body")
                yield Static("", id="beads-detail-labels")
        with Vertical(id="beads-empty"):
            yield Static("📭 No beads found", id="beads-empty-text")
            yield Static(
                "Run beadview inside a repository with .beads/issues.jsonl",
                id="beads-empty-hint",
            )
        with Container(id="beads-help"):
            yield Static(
                "j/k: Navigate │ Enter: Hook │ s: Status │ r: Reload │ ?: Help",
                id="beads-help-text",
            )
        yield Footer()

    def on_mount(self) -> None:
        """Load beads on mount."""
        asyncio.create_task(self._reload_async())

    async def _reload_async(self) -> None:
        """Re-read the store in background, then render."""
        try:
            await asyncio.to_thread(self._store.load)
        except OSError as e:
            logger.error("Failed to read beads: %s", e)
            self.notify(f"Failed to read beads: {e}", severity="error", timeout=4)
        self._beads = self._store.list_beads(self._status_filter)
        if self.is_mounted:
            self._refresh_list()

    def _filter_label(self) -> str:
        if self._status_filter is None:
            return "all"
        return self._status_filter.replace("_", " ")

    def _refresh_list(self) -> None:
        """Render list from current in-memory beads."""
        opt_list = self.query_one("#beads-list", OptionList)
        opt_list.clear_options()

        count_widget = self.query_one("#beads-count", Static)
        count_widget.update(f"🧿 Beads ({len(self._beads)}, {self._filter_label()})")

        empty_container = self.query_one("#beads-empty", Vertical)
        content_container = self.query_one("#beads-content", Horizontal)
        if not self._beads:
            empty_container.display = True
            content_container.display = False
            self._update_detail_panel(None)
            return

        empty_container.display = False
        content_container.display = True
        for i, bead in enumerate(self._beads):
            opt_list.add_option(Option(format_bead_row(bead), id=str(i)))
        opt_list.highlighted = 0
        self._update_detail_panel(self._beads[0])
        opt_list.focus()

    def _update_detail_panel(self, bead: Bead | None) -> None:
        """Show full bead text and labels on the right."""
        body = self.query_one("#beads-detail-body", Static)
        labels_widget = self.query_one("#beads-detail-labels", Static)
        if bead is None:
            body.update("Select a bead to view its details.")
            labels_widget.update("")
            return

        lines = [
            bead.title,
            "",
            f"{bead.id} · {bead.issue_type} · {bead.priority_label} · "
            f"{bead.status.replace('_', ' ')}",
        ]
        if bead.assignee:
            lines.append(f"Assignee: {bead.assignee}")
        if bead.description:
            lines.extend(["", bead.description])
        body.update("\n".join(lines))

        if bead.labels:
            label_text = Text()
            label_text.append("Labels: ", style="dim")
            label_text.append(", ".join(bead.labels), style="bold #a78bfa")
            labels_widget.update(label_text)
        else:
            labels_widget.update("")

    def on_option_list_option_highlighted(
        self, event: OptionList.OptionHighlighted
    ) -> None:
        """Update detail panel when selection changes."""
        try:
            idx = int(event.option.id)
        except (ValueError, TypeError):
            idx = -1
        if 0 <= idx < len(self._beads):
            self._update_detail_panel(self._beads[idx])

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Enter on a list row."""
        self.action_select_bead()

    def action_cursor_down(self) -> None:
        """Move cursor down in list."""
        self.query_one("#beads-list", OptionList).action_cursor_down()

    def action_cursor_up(self) -> None:
        """Move cursor up in list."""
        self.query_one("#beads-list", OptionList).action_cursor_up()

    def _selected_bead(self) -> Bead | None:
        """Return currently highlighted bead."""
        if not self._beads:
            return None
        idx = self.query_one("#beads-list", OptionList).highlighted
        if idx is not None and 0 <= idx < len(self._beads):
            return self._beads[idx]
        return None

    def action_cycle_status(self) -> None:
        """Switch to the next status filter."""
        self._status_filter = next_status_filter(self._status_filter)
        self._beads = self._store.list_beads(self._status_filter)
        self._refresh_list()

    def action_reload(self) -> None:
        asyncio.create_task(self._reload_async())

    def action_select_bead(self) -> None:
        """Run the on_select hook for the highlighted bead."""
        bead = self._selected_bead()
        if bead is None:
            return
        if not self._hooks.has_hook("on_select"):
            self.notify("No on_select hook configured", timeout=2)
            return
        asyncio.create_task(self._run_select_hook_async(bead))

    async def _run_select_hook_async(self, bead: Bead) -> None:
        """Run hook in a background thread; report the outcome."""
        try:
            result = await asyncio.to_thread(self._hooks.run, "on_select", bead)
        except HookError as exc:
            self.notify(str(exc), severity="error", timeout=4)
            return
        if result is None:
            return
        if result.ok:
            output = result.stdout.strip().splitlines()
            self.notify(output[0][:80] if output else f"Hook ran for {bead.id}", timeout=2)
        else:
            self.notify(
                f"Hook exited with {result.returncode}", severity="warning", timeout=3
            )
