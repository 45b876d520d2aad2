"""Structural and referential checks for a raw ``{cities, edges}`` dataset.

validate_dataset never raises. The first failing check, in this order,
decides the reason:

1. "cities/edges must be arrays"
2. "duplicate cities"
3. "invalid city entry"
4. "edge references unknown city"   (per edge, in order)
5. "invalid distance"               (per edge, in order)
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from ..domain.models import Edge, ValidationResult
from .store import is_city_name, is_valid_distance

NOT_ARRAYS = "cities/edges must be arrays"
DUPLICATE_CITIES = "duplicate cities"
INVALID_CITY = "invalid city entry"
UNKNOWN_CITY = "edge references unknown city"
INVALID_DISTANCE = "invalid distance"


def edge_fields(edge: Any) -> Tuple[Any, Any, Any]:
    """Read ``(from, to, distance)`` from a raw mapping or an Edge.

    Missing fields, and anything that is neither, read as None.
    """
    if isinstance(edge, Edge):
        return edge.from_city, edge.to_city, edge.distance_km
    if isinstance(edge, Mapping):
        return edge.get("from"), edge.get("to"), edge.get("distance")
    return None, None, None


def _read(data: Any, key: str) -> Any:
    if isinstance(data, Mapping):
        return data.get(key)
    return getattr(data, key, None)


def _has_duplicates(cities: Any) -> bool:
    # Unhashable entries cannot be duplicates; check 3 rejects them.
    seen = set()
    for city in cities:
        try:
            if city in seen:
                return True
            seen.add(city)
        except TypeError:
            continue
    return False


def _references(city: Any, known: set) -> bool:
    try:
        return city in known
    except TypeError:
        return False


def validate_dataset(data: Any) -> ValidationResult:
    """Check a dataset before building a graph from it.

    Args:
        data: Mapping with ``cities`` and ``edges`` keys, or any object
            exposing them as attributes.

    Returns:
        ValidationResult with ok=True, or ok=False and the reason of the
        first failing check.
    """
    cities = _read(data, "cities")
    edges = _read(data, "edges")

    if not isinstance(cities, (list, tuple)) or not isinstance(edges, (list, tuple)):
        return ValidationResult.failure(NOT_ARRAYS)

    if _has_duplicates(cities):
        return ValidationResult.failure(DUPLICATE_CITIES)

    if not all(is_city_name(city) for city in cities):
        return ValidationResult.failure(INVALID_CITY)

    known = set(cities)
    for edge in edges:
        reason = _check_edge(edge, known)
        if reason is not None:
            return ValidationResult.failure(reason)

    return ValidationResult.success()


def _check_edge(edge: Any, known: set) -> Optional[str]:
    from_city, to_city, distance = edge_fields(edge)
    if not _references(from_city, known) or not _references(to_city, known):
        return UNKNOWN_CITY
    if not is_valid_distance(distance):
        return INVALID_DISTANCE
    return None
