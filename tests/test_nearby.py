"""Tests for get_nearby_cities."""

import math

import pytest

from nearby_cities.domain.errors import InvalidArgumentError
from nearby_cities.domain.models import NearbyResult
from nearby_cities.graph import SAMPLE_DATA, GraphStore, build_graph, get_nearby_cities


@pytest.fixture(scope="module")
def graph():
    return build_graph(SAMPLE_DATA["cities"], SAMPLE_DATA["edges"])


def _pairs(results):
    return [(r.city, r.distance) for r in results]


class TestGetNearbyCities:
    """Test suite for get_nearby_cities on the sample dataset."""

    def test_default_max_distance(self, graph):
        results = get_nearby_cities(graph, "Guadalajara")
        assert _pairs(results) == [
            ("Tlaquepaque", 10),
            ("Zapopan", 12),
            ("Tequila", 60),
            ("Tepatitlán", 78),
        ]

    def test_boundary_is_inclusive(self, graph):
        results = get_nearby_cities(graph, "Guadalajara", 60)
        assert _pairs(results) == [("Tlaquepaque", 10), ("Zapopan", 12), ("Tequila", 60)]

    def test_custom_max_distance_excludes_farther(self, graph):
        results = get_nearby_cities(graph, "Guadalajara", 50)
        assert _pairs(results) == [("Tlaquepaque", 10), ("Zapopan", 12)]

    def test_boundary_at_farthest_neighbor(self, graph):
        results = get_nearby_cities(graph, "Guadalajara", 78)
        assert len(results) == 4
        assert results[-1] == NearbyResult(city="Tepatitlán", distance=78)

    def test_unknown_destination_returns_empty(self, graph):
        assert get_nearby_cities(graph, "Cancun") == []

    @pytest.mark.parametrize("destination", [123, None, ["Guadalajara"], b"Tala"])
    def test_non_string_destination_returns_empty(self, graph, destination):
        assert get_nearby_cities(graph, destination) == []

    def test_destination_is_not_trimmed(self, graph):
        assert get_nearby_cities(graph, " Guadalajara ") == []

    def test_one_hop_only(self, graph):
        # Tala is reachable from Guadalajara only through Zapopan.
        cities = [r.city for r in get_nearby_cities(graph, "Guadalajara", 1000)]
        assert "Tala" not in cities
        assert "Lagos de Moreno" not in cities

    def test_neighbors_seen_from_other_endpoint(self, graph):
        assert _pairs(get_nearby_cities(graph, "Zapopan")) == [
            ("Guadalajara", 12),
            ("Tala", 35),
        ]

    def test_zero_ceiling(self, graph):
        assert get_nearby_cities(graph, "Guadalajara", 0) == []

    def test_nan_ceiling_matches_nothing(self, graph):
        assert get_nearby_cities(graph, "Guadalajara", math.nan) == []

    def test_results_serialise(self, graph):
        results = get_nearby_cities(graph, "Tepatitlán")
        assert [r.to_dict() for r in results] == [
            {"city": "Guadalajara", "distance": 78},
            {"city": "Lagos de Moreno", "distance": 85},
        ]


class TestGetNearbyCitiesEdgeCases:
    """Edge cases outside the sample dataset."""

    @pytest.mark.parametrize("bad_graph", [None, {}, {"A": []}, "graph"])
    def test_rejects_non_graph(self, bad_graph):
        with pytest.raises(InvalidArgumentError) as excinfo:
            get_nearby_cities(bad_graph, "Guadalajara")
        assert excinfo.value.argument == "graph"

    def test_non_graph_rejected_even_for_unknown_destination(self):
        with pytest.raises(InvalidArgumentError):
            get_nearby_cities(None, 123)

    @pytest.mark.parametrize("max_distance", ["60", None, True])
    def test_rejects_non_numeric_ceiling(self, max_distance):
        graph = build_graph(["A"], [])
        with pytest.raises(InvalidArgumentError):
            get_nearby_cities(graph, "A", max_distance)

    def test_isolated_city(self):
        graph = GraphStore()
        graph.add_city("Isolate")
        assert get_nearby_cities(graph, "Isolate") == []

    def test_ties_keep_insertion_order(self):
        graph = build_graph(
            ["Hub", "C", "A", "B", "D"],
            [
                {"from": "Hub", "to": "C", "distance": 5},
                {"from": "Hub", "to": "A", "distance": 5},
                {"from": "Hub", "to": "D", "distance": 1},
                {"from": "B", "to": "Hub", "distance": 5},
            ],
        )
        assert _pairs(get_nearby_cities(graph, "Hub")) == [
            ("D", 1),
            ("C", 5),
            ("A", 5),
            ("B", 5),
        ]

    def test_output_is_sorted(self):
        distances = [40, 3, 17.5, 0, 250, 251, 99]
        cities = ["Hub"] + [f"C{i}" for i in range(len(distances))]
        edges = [
            {"from": "Hub", "to": f"C{i}", "distance": d}
            for i, d in enumerate(distances)
        ]
        results = get_nearby_cities(build_graph(cities, edges), "Hub")

        found = [r.distance for r in results]
        assert found == sorted(found)
        assert found == [0, 3, 17.5, 40, 99, 250]

    def test_self_loop_reports_destination_once(self):
        graph = build_graph(["A", "B"], [
            {"from": "A", "to": "A", "distance": 0},
            {"from": "A", "to": "B", "distance": 4},
        ])
        assert _pairs(get_nearby_cities(graph, "A")) == [("A", 0), ("B", 4)]

    def test_does_not_mutate_graph(self):
        graph = build_graph(
            ["A", "B", "C"],
            [
                {"from": "A", "to": "B", "distance": 9},
                {"from": "A", "to": "C", "distance": 1},
            ],
        )
        before = graph.neighbors("A")
        get_nearby_cities(graph, "A")
        assert graph.neighbors("A") == before
