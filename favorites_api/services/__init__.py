"""Application services and FastAPI dependency factories."""
