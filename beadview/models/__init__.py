"""Domain models."""

from .bead import STATUS_ORDER, Bead, BeadStatus, BeadType

__all__ = ["STATUS_ORDER", "Bead", "BeadStatus", "BeadType"]
