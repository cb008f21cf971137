"""Project logging helpers."""
