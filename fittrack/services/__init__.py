"""Domain services used by the endpoints."""
