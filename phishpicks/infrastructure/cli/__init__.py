"""Command line interface for phishpicks."""
