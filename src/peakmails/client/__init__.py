"""HTTP dispatch core for Peakmails Python SDK."""
