"""Pydantic models for data exchanged with the Turf API."""
