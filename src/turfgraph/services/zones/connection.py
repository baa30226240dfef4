"""Directed connections between neighbouring zones."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ...models.domain import Line, Zone

if TYPE_CHECKING:
    from .zone_set import ZoneSet


class Direction(str, Enum):
    PARENT_IS_LEFT = "left"
    PARENT_IS_RIGHT = "right"


@dataclass(frozen=True, slots=True, eq=False)
class Connection:
    """One-way connection from a parent zone to its neighbour.

    Two connections are equal when they join the same ordered pair of zones,
    whatever distance they carry.
    """

    parent: Zone
    neighbor: Zone
    distance: float  # meters

    @property
    def key(self) -> tuple[str, str]:
        return (self.parent.name, self.neighbor.name)

    @property
    def is_self_loop(self) -> bool:
        return self.parent == self.neighbor

    def reversed(self) -> "Connection":
        return Connection(parent=self.neighbor, neighbor=self.parent, distance=self.distance)

    @classmethod
    def from_line(cls, line: Line, zones: "ZoneSet", direction: Direction) -> "Connection":
        """Resolve ``line`` against ``zones`` and register the result on its parent."""
        connection = resolve_connection(line, zones, direction)
        connection.parent.add_connection(connection)
        return connection

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Connection):
            return NotImplemented
        return self.parent == other.parent and self.neighbor == other.neighbor

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.parent.name} -> {self.neighbor.name}"


def resolve_connection(line: Line, zones: "ZoneSet", direction: Direction) -> Connection:
    """Build the connection for ``line`` without registering it anywhere.

    Each endpoint is snapped to its closest zone; the line's own length is
    kept as the connection distance. Both endpoints may snap to the same zone.
    """
    left = zones.closest_zone_to(line.left)
    right = zones.closest_zone_to(line.right)
    if direction is Direction.PARENT_IS_LEFT:
        return Connection(parent=left, neighbor=right, distance=line.distance)
    if direction is Direction.PARENT_IS_RIGHT:
        return Connection(parent=right, neighbor=left, distance=line.distance)
    raise ValueError(f"Unknown direction {direction!r}")
