"""Tutorial pages."""

from __future__ import annotations

from dataclasses import dataclass

from beadview.core.triggers import BindingSet


@dataclass(frozen=True)
class TutorialPage:
    title: str
    body: str


def build_tutorial_pages(bindings: BindingSet) -> list[TutorialPage]:
    """Return tutorial pages with the user's actual trigger keys filled in."""
    tutorial_key = bindings.direct_tutorial
    help_key = bindings.context_help
    double_tap = (
        f"Tap {tutorial_key} twice quickly for help on the current screen."
        if bindings.double_tap_enabled
        else "Double-tap detection is turned off."
    )
    return [
        TutorialPage(
            "Welcome to beadview",
            "beadview is a read-only browser for beads, the git-backed issue\n"
            "tracker. It reads .beads/issues.jsonl from your repository and\n"
            "lists every bead with its status, priority and labels.",
        ),
        TutorialPage(
            "Moving around",
            "j / k     move down / up\n"
            "enter     run the on_select hook for the highlighted bead\n"
            "s         cycle the status filter (all, open, in progress, ...)\n"
            "r         reload issues.jsonl from disk\n"
            "q         quit",
        ),
        TutorialPage(
            "Statuses and priorities",
            "● in progress   ○ open   ⊘ blocked   ✓ closed\n\n"
            "Priorities run from P0 (critical) to P4 (backlog). Beads are\n"
            "sorted by status first, then priority.",
        ),
        TutorialPage(
            "Getting help",
            f"?         help modal (Space inside it reopens this tutorial)\n"
            f"{tutorial_key:<10}this tutorial\n"
            f"{help_key:<10}help for the current screen\n\n"
            f"{double_tap}\n\n"
            "Caps Lock rarely reaches terminal applications, so these keys\n"
            "are the reliable way in. Change them under [keys] in\n"
            "~/.beadview/config.toml.",
        ),
        TutorialPage(
            "Hooks",
            "Configure shell commands under [hooks] in ~/.beadview/config.toml:\n\n"
            '    on_select = "bd show $BEADVIEW_BEAD_ID"\n\n'
            "Hooks see BEADVIEW_BEAD_ID, BEADVIEW_BEAD_TITLE and\n"
            "BEADVIEW_BEAD_STATUS in their environment.",
        ),
    ]
