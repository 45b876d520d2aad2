"""Top-level package for the nearby-cities project.

An in-memory undirected graph of cities connected by road distances,
with dataset validation, graph construction and a one-hop nearby-cities
lookup sorted by distance.

    from nearby_cities import SAMPLE_DATA, build_graph, get_nearby_cities

    graph = build_graph(SAMPLE_DATA["cities"], SAMPLE_DATA["edges"])
    get_nearby_cities(graph, "Guadalajara", 50)
"""

from .domain import (
    CityGraphError,
    DatasetLoadError,
    DatasetValidationError,
    InvalidArgumentError,
    NearbyResult,
    UnknownCityError,
    ValidationResult,
)
from .graph import (
    DEFAULT_MAX_DISTANCE_KM,
    SAMPLE_DATA,
    GraphStore,
    build_graph,
    get_nearby_cities,
    validate_dataset,
)

__all__ = [
    "DEFAULT_MAX_DISTANCE_KM",
    "SAMPLE_DATA",
    "GraphStore",
    "build_graph",
    "get_nearby_cities",
    "validate_dataset",
    "NearbyResult",
    "ValidationResult",
    "CityGraphError",
    "DatasetLoadError",
    "DatasetValidationError",
    "InvalidArgumentError",
    "UnknownCityError",
]
