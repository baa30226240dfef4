"""Zone sets, directed connections and graph construction."""

from .connection import Connection, Direction, resolve_connection
from .graph import ZoneGraph, build_zone_graph
from .models import Diagnostic, EnrichmentReport, ZoneMetadataFetcher, ZoneSetKind
from .zone_set import ZoneSet

__all__ = [
    "Connection",
    "Diagnostic",
    "Direction",
    "EnrichmentReport",
    "ZoneGraph",
    "ZoneMetadataFetcher",
    "ZoneSet",
    "ZoneSetKind",
    "build_zone_graph",
    "resolve_connection",
]
