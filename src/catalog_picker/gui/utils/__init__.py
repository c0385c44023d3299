"""GUI utility helpers."""
