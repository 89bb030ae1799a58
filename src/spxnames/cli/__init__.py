"""Command line interface for spxnames."""
