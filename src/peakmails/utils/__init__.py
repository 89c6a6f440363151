"""Internal helpers for Peakmails Python SDK."""
