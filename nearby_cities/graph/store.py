"""In-memory undirected weighted graph over city names.

The adjacency structure maps each city to the list of its neighbors in
insertion order. Every edge is stored from both endpoints with the same
distance, so for any ``(to, d)`` listed under ``from`` the pair
``(from, d)`` is listed under ``to``.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterator, List

from ..domain.errors import InvalidArgumentError, UnknownCityError
from ..domain.models import Neighbor


def is_city_name(value: Any) -> bool:
    """Return True for a string that is not empty once stripped."""
    return isinstance(value, str) and bool(value.strip())


def is_valid_distance(value: Any) -> bool:
    """Return True for a finite, non-negative real number of kilometers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value) and value >= 0
    except OverflowError:
        # ints too large for a float
        return False


class GraphStore:
    """Undirected graph of cities connected by distances in kilometers.

    Nodes and edges can only be added. Callers get copies of adjacency
    lists, never the internal lists themselves.

    Usage:
        graph = GraphStore()
        graph.add_city("Guadalajara")
        graph.add_city("Zapopan")
        graph.add_edge("Guadalajara", "Zapopan", 12)
        graph.neighbors("Zapopan")  # [Neighbor(to="Guadalajara", distance=12)]
    """

    def __init__(self) -> None:
        self._adjacency: Dict[str, List[Neighbor]] = {}

    def __contains__(self, city: object) -> bool:
        return isinstance(city, str) and city in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[str]:
        return iter(self.cities())

    def __repr__(self) -> str:
        return f"GraphStore(cities={len(self)}, edges={self.edge_count})"

    @property
    def edge_count(self) -> int:
        """Number of undirected edges, counting a self-loop once."""
        entries = sum(len(neighbors) for neighbors in self._adjacency.values())
        loops = sum(
            1
            for city, neighbors in self._adjacency.items()
            for neighbor in neighbors
            if neighbor.to == city
        )
        return (entries - loops) // 2 + loops

    def has_city(self, name: object) -> bool:
        return name in self

    def cities(self) -> List[str]:
        """Return registered cities in registration order."""
        return list(self._adjacency)

    def add_city(self, name: str) -> None:
        """Register a city. Re-adding a known city is a no-op.

        Raises:
            InvalidArgumentError: If name is not a non-blank string.
        """
        if not is_city_name(name):
            raise InvalidArgumentError(
                f"Invalid city name: {name!r}", argument="name", value=name
            )
        self._adjacency.setdefault(name, [])

    def add_edge(self, from_city: str, to_city: str, distance: float) -> None:
        """Connect two registered cities in both directions.

        A self-loop is stored as a single entry on its city.

        Raises:
            UnknownCityError: If either endpoint is not registered.
            InvalidArgumentError: If distance is negative or not finite.
        """
        for city in (from_city, to_city):
            if city not in self:
                raise UnknownCityError(f"Unknown city: {city!r}", city=str(city))
        if not is_valid_distance(distance):
            raise InvalidArgumentError(
                f"Invalid distance: {distance!r}",
                argument="distance",
                value=distance,
            )

        self._adjacency[from_city].append(Neighbor(to=to_city, distance=distance))
        if from_city != to_city:
            self._adjacency[to_city].append(Neighbor(to=from_city, distance=distance))

    def neighbors(self, city: str) -> List[Neighbor]:
        """Return a copy of the city's neighbors in insertion order.

        Raises:
            UnknownCityError: If the city is not registered.
        """
        if city not in self:
            raise UnknownCityError(f"Unknown city: {city!r}", city=str(city))
        return list(self._adjacency[city])
