"""Immutable domain models for the city-connectivity graph.

All models are frozen dataclasses with slots. They have no external
dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True, slots=True)
class Neighbor:
    """One entry of a city's adjacency list.

    Attributes:
        to: Name of the connected city
        distance: Distance to the connected city in kilometers
    """

    to: str
    distance: float


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected connection between two cities.

    Attributes:
        from_city: One endpoint
        to_city: The other endpoint
        distance_km: Distance between the endpoints in kilometers
    """

    from_city: str
    to_city: str
    distance_km: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.from_city,
            "to": self.to_city,
            "distance": self.distance_km,
        }


@dataclass(frozen=True, slots=True)
class NearbyResult:
    """A city found near a destination.

    Attributes:
        city: Name of the nearby city
        distance: Distance from the destination in kilometers
    """

    city: str
    distance: float

    def to_dict(self) -> Dict[str, Any]:
        return {"city": self.city, "distance": self.distance}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Verdict of validate_dataset.

    Attributes:
        ok: True if the dataset can be built into a graph
        reason: Why the dataset was rejected, None when ok
    """

    ok: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str) -> ValidationResult:
        return cls(ok=False, reason=reason)


@dataclass(frozen=True, slots=True)
class Dataset:
    """Cities and edges as read from a dataset source.

    Values are kept exactly as the source supplied them so that
    validate_dataset sees malformed input unchanged.

    Attributes:
        cities: City names in source order
        edges: Edges in source order, raw mappings or Edge instances
    """

    cities: Any = field(default_factory=list)
    edges: Any = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Dataset:
        return cls(cities=data.get("cities"), edges=data.get("edges"))

    def to_dict(self) -> Dict[str, Any]:
        """Return the raw ``{cities, edges}`` form expected by the validator."""
        edges = self.edges
        if isinstance(edges, (list, tuple)):
            edges = [
                edge.to_dict() if isinstance(edge, Edge) else edge for edge in edges
            ]
        return {"cities": self.cities, "edges": edges}
