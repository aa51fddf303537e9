"""Command-line interface for the fixture engine."""
