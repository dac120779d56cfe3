"""Single-process Texas Hold'em betting engine."""
