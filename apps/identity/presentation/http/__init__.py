"""HTTP presentation (FastAPI)."""
