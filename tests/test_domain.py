import math

import pytest

from turfgraph.errors import AlreadyEnrichedError
from turfgraph.models.domain import Coords, Line, Zone
from turfgraph.services.zones.connection import Connection


def test_coords_distance_is_symmetric_and_in_meters():
    stockholm = Coords(59.3293, 18.0686)
    uppsala = Coords(59.8586, 17.6389)

    there = stockholm.distance_to(uppsala)
    back = uppsala.distance_to(stockholm)

    assert there == pytest.approx(back)
    assert 60_000 < there < 70_000
    assert stockholm.distance_to(stockholm) == 0.0


def test_coords_are_immutable():
    point = Coords(59.0, 18.0)
    with pytest.raises(AttributeError):
        point.latitude = 60.0  # type: ignore[misc]


def test_coords_reject_non_finite_values():
    with pytest.raises(ValueError):
        Coords(math.nan, 18.0)


def test_line_rejects_negative_distance():
    with pytest.raises(ValueError):
        Line(Coords(0.0, 0.0), Coords(0.0, 1.0), -1.0)


def test_zones_compare_by_name_only():
    first = Zone("Central", Coords(59.0, 18.0))
    same_name = Zone("Central", Coords(10.0, 10.0))
    other = Zone("Norrmalm", Coords(59.0, 18.0))

    assert first == same_name
    assert hash(first) == hash(same_name)
    assert first != other
    assert len({first, same_name, other}) == 2


def test_zone_points_can_only_be_set_once():
    zone = Zone("Central", Coords(59.0, 18.0))
    assert not zone.is_enriched
    assert zone.score is None

    zone.set_points(185, 9)

    assert zone.is_enriched
    assert zone.score == 185
    assert zone.points_per_hour == 9
    with pytest.raises(AlreadyEnrichedError) as excinfo:
        zone.set_points(200)
    assert excinfo.value.name == "Central"
    assert zone.score == 185


def test_zone_only_accepts_its_own_connections():
    parent = Zone("Central", Coords(59.0, 18.0))
    neighbor = Zone("Norrmalm", Coords(59.1, 18.0))
    connection = Connection(parent=parent, neighbor=neighbor, distance=10.0)

    with pytest.raises(ValueError):
        neighbor.add_connection(connection)

    parent.add_connection(connection)
    assert parent.connections == [connection]
