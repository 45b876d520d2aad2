"""Nearby-cities lookup on a built graph.

Only direct neighbors of the destination are considered; the graph is
never traversed further.
"""

from __future__ import annotations

from typing import Any, List

from ..domain.errors import InvalidArgumentError
from ..domain.models import NearbyResult
from .store import GraphStore

DEFAULT_MAX_DISTANCE_KM = 250


def get_nearby_cities(
    graph: GraphStore,
    destination: Any,
    max_distance: float = DEFAULT_MAX_DISTANCE_KM,
) -> List[NearbyResult]:
    """Find direct neighbors of a destination within a distance ceiling.

    Parameters
    ----------
    graph:
        Graph as produced by ``build_graph``.
    destination:
        City to search around. A non-string or unknown destination is
        not an error: the result is simply empty.
    max_distance:
        Inclusive upper bound on the distance, in kilometers.

    Returns
    -------
    list[NearbyResult]
        Neighbors with ``distance <= max_distance``, sorted ascending by
        distance. Neighbors at equal distance keep their insertion order.

    Raises
    ------
    InvalidArgumentError
        If ``graph`` is not a GraphStore or ``max_distance`` is not a
        number.
    """
    if not isinstance(graph, GraphStore):
        raise InvalidArgumentError(
            "graph must be a GraphStore", argument="graph", value=graph
        )
    if isinstance(max_distance, bool) or not isinstance(max_distance, (int, float)):
        raise InvalidArgumentError(
            f"max_distance must be a number, got {max_distance!r}",
            argument="max_distance",
            value=max_distance,
        )

    if destination not in graph:
        return []

    within = [n for n in graph.neighbors(destination) if n.distance <= max_distance]
    within.sort(key=lambda n: n.distance)
    return [NearbyResult(city=n.to, distance=n.distance) for n in within]
