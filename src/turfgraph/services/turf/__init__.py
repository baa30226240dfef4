"""Turf API access."""

from .client import TurfClient, check_health

__all__ = ["TurfClient", "check_health"]
