"""Build a GraphStore from a dataset.

build_graph does not validate. Run validate_dataset first; unvalidated
data fails with whatever GraphStore.add_city / add_edge raise.
"""

from __future__ import annotations

from typing import Any, Iterable

from .store import GraphStore
from .validation import edge_fields


def build_graph(cities: Iterable[str], edges: Iterable[Any]) -> GraphStore:
    graph = GraphStore()
    for city in cities:
        graph.add_city(city)
    for edge in edges:
        from_city, to_city, distance = edge_fields(edge)
        graph.add_edge(from_city, to_city, distance)
    return graph
