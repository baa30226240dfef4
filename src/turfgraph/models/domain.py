"""Domain models for zones, their locations and raw boundary segments."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from ..errors import AlreadyEnrichedError
from ..services.geospatial import haversine_m

if TYPE_CHECKING:
    from ..services.zones.connection import Connection


@dataclass(frozen=True, slots=True)
class Coords:
    """Immutable WGS84 point in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            raise ValueError(f"Coordinates must be finite, got ({self.latitude}, {self.longitude})")

    def distance_to(self, other: Coords) -> float:
        """Great-circle distance in meters."""
        return haversine_m(self.latitude, self.longitude, other.latitude, other.longitude)


@dataclass(frozen=True, slots=True)
class Line:
    """Undirected raw segment between two points, with its measured length in meters."""

    left: Coords
    right: Coords
    distance: float

    def __post_init__(self) -> None:
        if not self.distance >= 0:
            raise ValueError(f"Line distance must be non-negative, got {self.distance}")


@dataclass(slots=True, eq=False)
class Zone:
    """A named, located node of the territory graph.

    Zones compare and hash by name only. ``score`` holds the takeover points
    and stays ``None`` until metadata has been applied.
    """

    name: str
    coords: Coords
    score: Optional[int] = None
    points_per_hour: Optional[int] = None
    connections: List["Connection"] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Zone name must not be empty")

    @property
    def key(self) -> str:
        """Lookup key used by zone set indexes."""
        return self.name.lower()

    @property
    def is_enriched(self) -> bool:
        return self.score is not None

    def set_points(self, takeover_points: int, points_per_hour: int = 0) -> None:
        """Apply points metadata. A zone can only be scored once per run."""
        if self.is_enriched:
            raise AlreadyEnrichedError(self.name)
        self.score = takeover_points
        self.points_per_hour = points_per_hour

    def add_connection(self, connection: "Connection") -> None:
        if connection.parent is not self:
            raise ValueError(f"Connection {connection} does not start at zone '{self.name}'")
        self.connections.append(connection)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Zone):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Zone(name={self.name!r}, coords={self.coords!r}, score={self.score!r})"

    def __str__(self) -> str:
        return self.name
