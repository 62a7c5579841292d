"""FastAPI frontend for the printspec engine."""
