"""Turf zone graph construction and metadata enrichment."""
