"""Command-line surface for LoopSage."""
