"""HTTP auth helpers."""
