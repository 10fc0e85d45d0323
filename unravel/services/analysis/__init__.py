"""Statistical helpers."""
