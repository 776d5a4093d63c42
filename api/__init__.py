"""FastAPI service exposing the margin dashboard API."""
