"""Request parsing helpers."""
