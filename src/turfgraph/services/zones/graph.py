"""Build the directed zone graph from raw boundary segments."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ...config import settings
from ...models.domain import Line, Zone
from .connection import Connection, Direction, resolve_connection
from .zone_set import ZoneSet

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ZoneGraph:
    zones: ZoneSet
    connections: List[Connection] = field(default_factory=list)
    skipped_duplicates: int = 0
    skipped_self_loops: int = 0

    @property
    def edge_count(self) -> int:
        return len(self.connections)

    def neighbors_of(self, name: str) -> List[Zone]:
        zone = self.zones.find_by_name(name)
        if zone is None:
            raise KeyError(f"Unknown zone '{name}'")
        return [connection.neighbor for connection in zone.connections]


def build_zone_graph(
    lines: Iterable[Line],
    zones: ZoneSet,
    *,
    exclude_self_loops: Optional[bool] = None,
) -> ZoneGraph:
    """Turn every line into a pair of opposite connections between zones.

    Connections already registered for the same ordered pair of zones are
    skipped, so the first line seen for a boundary decides its distance.
    """
    if exclude_self_loops is None:
        exclude_self_loops = settings.exclude_self_loops

    graph = ZoneGraph(zones=zones)
    seen = {connection for zone in zones for connection in zone.connections}
    line_count = 0

    for line in lines:
        line_count += 1
        for direction in (Direction.PARENT_IS_LEFT, Direction.PARENT_IS_RIGHT):
            connection = resolve_connection(line, zones, direction)
            if exclude_self_loops and connection.is_self_loop:
                graph.skipped_self_loops += 1
                continue
            if connection in seen:
                graph.skipped_duplicates += 1
                continue
            seen.add(connection)
            connection.parent.add_connection(connection)
            graph.connections.append(connection)
            logger.debug("Added connection %s (%.1f m)", connection, connection.distance)

    logger.info(
        "Built zone graph from %d lines: %d connections, %d duplicates skipped, %d self-loops skipped",
        line_count,
        graph.edge_count,
        graph.skipped_duplicates,
        graph.skipped_self_loops,
    )
    return graph
