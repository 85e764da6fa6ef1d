"""Low-level binary helpers."""
