"""beadview: terminal browser for beads issues."""
