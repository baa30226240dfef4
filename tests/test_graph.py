import pytest

from turfgraph.config import settings
from turfgraph.models.domain import Coords, Line, Zone
from turfgraph.services.zones.graph import build_zone_graph
from turfgraph.services.zones.zone_set import ZoneSet


def _zones() -> ZoneSet:
    return ZoneSet(
        [
            Zone("x", Coords(0.0, 0.0)),
            Zone("y", Coords(0.0, 1.0)),
            Zone("z", Coords(1.0, 0.0)),
        ]
    )


def _line(left: tuple[float, float], right: tuple[float, float], distance: float) -> Line:
    return Line(Coords(*left), Coords(*right), distance)


def test_build_zone_graph_adds_both_directions():
    zones = _zones()
    lines = [
        _line((0.0, 0.1), (0.0, 0.9), 100.0),
        _line((0.1, 0.0), (0.9, 0.0), 120.0),
    ]

    graph = build_zone_graph(lines, zones)

    assert [str(c) for c in graph.connections] == ["x -> y", "y -> x", "x -> z", "z -> x"]
    assert graph.edge_count == 4
    assert [zone.name for zone in graph.neighbors_of("X")] == ["y", "z"]
    assert [zone.name for zone in graph.neighbors_of("z")] == ["x"]


def test_overlapping_lines_are_deduplicated_first_distance_wins():
    zones = _zones()
    lines = [
        _line((0.0, 0.1), (0.0, 0.9), 100.0),
        _line((0.05, 0.2), (0.02, 0.8), 250.0),
    ]

    graph = build_zone_graph(lines, zones)

    assert graph.edge_count == 2
    assert graph.skipped_duplicates == 2
    assert [c.distance for c in zones.find_by_name("x").connections] == [100.0]


def test_self_loops_are_kept_unless_excluded():
    lines = [_line((0.01, 0.0), (0.0, 0.01), 3.0)]

    kept = build_zone_graph(lines, _zones(), exclude_self_loops=False)
    dropped = build_zone_graph(lines, _zones(), exclude_self_loops=True)

    assert [str(c) for c in kept.connections] == ["x -> x"]
    assert kept.skipped_duplicates == 1
    assert dropped.connections == []
    assert dropped.skipped_self_loops == 2


def test_self_loop_policy_defaults_to_settings(monkeypatch):
    monkeypatch.setattr(settings, "exclude_self_loops", True)

    graph = build_zone_graph([_line((0.01, 0.0), (0.0, 0.01), 3.0)], _zones())

    assert graph.connections == []


def test_existing_connections_are_not_duplicated():
    zones = _zones()
    line = _line((0.0, 0.1), (0.0, 0.9), 100.0)
    build_zone_graph([line], zones)

    graph = build_zone_graph([line], zones)

    assert graph.connections == []
    assert len(zones.find_by_name("x").connections) == 1


def test_neighbors_of_unknown_zone_raises():
    graph = build_zone_graph([], _zones())

    with pytest.raises(KeyError):
        graph.neighbors_of("nowhere")
