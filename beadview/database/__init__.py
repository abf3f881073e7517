"""Bead storage."""

from .jsonl_store import BeadStore, find_beads_file

__all__ = ["BeadStore", "find_beads_file"]
