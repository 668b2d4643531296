"""Command-line interface for codescope."""
