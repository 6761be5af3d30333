"""Command-line tools for the footprint pipeline."""
