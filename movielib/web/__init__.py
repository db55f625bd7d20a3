"""Interface web (API JSON FastAPI)."""
