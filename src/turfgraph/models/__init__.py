"""Core domain models."""

from .domain import Coords, Line, Zone

__all__ = ["Coords", "Line", "Zone"]
