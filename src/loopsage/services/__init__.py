"""Detection engine and its I/O collaborators."""
