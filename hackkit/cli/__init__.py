"""Command line interface for the toolchain (argument parsing, goals, user-facing errors)."""
