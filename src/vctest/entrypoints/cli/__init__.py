"""Command-line interface for VCTEST."""
