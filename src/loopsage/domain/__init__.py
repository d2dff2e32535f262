"""Core entities without I/O for LoopSage."""
