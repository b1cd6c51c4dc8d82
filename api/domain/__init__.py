"""Domain records and pure rules (no FastAPI, no storage)."""
