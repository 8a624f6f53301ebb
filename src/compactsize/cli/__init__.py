"""Command line interface for compactsize."""
