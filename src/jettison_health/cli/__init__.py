"""Command-line interface for jettison-health."""
