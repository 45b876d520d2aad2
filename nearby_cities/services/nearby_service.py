"""Nearby-cities service - validate, build once, then answer queries.

This is the entry point a presentation layer talks to. It owns the
build-then-read-only lifecycle of the graph.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..domain.errors import DatasetValidationError
from ..domain.models import NearbyResult
from ..graph import GraphStore, build_graph, get_nearby_cities, validate_dataset
from ..graph.nearby import DEFAULT_MAX_DISTANCE_KM
from ..ports.dataset import DatasetRepositoryPort


@dataclass
class NearbyCitiesService:
    """Serves nearby-city lookups over a graph built from a repository.

    The graph is built lazily on first use and then shared read-only by
    every query.

    Attributes:
        repository: Source of the cities and edges
        default_max_distance_km: Ceiling used when a query gives none
    """

    repository: DatasetRepositoryPort
    default_max_distance_km: float = DEFAULT_MAX_DISTANCE_KM

    _logger: logging.Logger = field(init=False, repr=False)
    _graph: Optional[GraphStore] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph(self) -> GraphStore:
        """The built graph, loading and validating the dataset on first access.

        Raises:
            DatasetLoadError: If the repository cannot read its source.
            DatasetValidationError: If the dataset is rejected.
        """
        if self._graph is None:
            self._graph = self._build()
        return self._graph

    def _build(self) -> GraphStore:
        dataset = self.repository.load()
        verdict = validate_dataset(dataset.to_dict())
        if not verdict.ok:
            self._logger.warning(
                "Dataset rejected",
                extra={"reason": verdict.reason},
            )
            raise DatasetValidationError(
                f"Invalid dataset: {verdict.reason}",
                reason=verdict.reason or "",
            )

        graph = build_graph(dataset.cities, dataset.edges)
        self._logger.info(
            "Graph built",
            extra={"cities": len(graph), "edges": graph.edge_count},
        )
        return graph

    def find_nearby(
        self,
        destination: Any,
        max_distance: Optional[float] = None,
    ) -> List[NearbyResult]:
        """Find cities directly connected to destination within a ceiling.

        Args:
            destination: City to search around.
            max_distance: Inclusive ceiling in kilometers, or None for the
                service default.

        Returns:
            Nearby cities sorted ascending by distance; empty for an
            unknown destination.
        """
        if max_distance is None:
            max_distance = self.default_max_distance_km

        results = get_nearby_cities(self.graph, destination, max_distance)
        self._logger.debug(
            "Nearby query",
            extra={
                "destination": destination,
                "max_distance_km": max_distance,
                "results": len(results),
            },
        )
        return results

    def reload(self) -> None:
        """Drop the built graph; the next access rebuilds it."""
        self._graph = None
        self._logger.debug("Graph discarded")
