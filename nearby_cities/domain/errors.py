"""Typed domain errors for the city-connectivity graph.

All errors inherit from CityGraphError and can optionally wrap a root
cause exception for debugging.

Two lookup failures must not be confused:
- UnknownCityError is raised by construction and lookup operations
  (GraphStore.add_edge, GraphStore.neighbors).
- An unknown destination in a nearby query is not an error at all; the
  query returns an empty list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class CityGraphError(Exception):
    """Base error for the city graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidArgumentError(CityGraphError):
    """Malformed input to a constructive operation.

    Raised for bad city names, bad distances and non-graph arguments
    passed to a nearby query.

    Attributes:
        argument: Name of the offending argument
        value: The rejected value
    """

    argument: str = ""
    value: Any = None


@dataclass
class UnknownCityError(CityGraphError):
    """City is not registered in the graph.

    Attributes:
        city: The city that was not found
    """

    city: str = ""


@dataclass
class DatasetValidationError(CityGraphError):
    """A dataset was rejected by validate_dataset.

    Attributes:
        reason: The validator's reason string
    """

    reason: str = ""


@dataclass
class DatasetLoadError(CityGraphError):
    """A dataset source could not be read.

    Attributes:
        file_path: Path to the data file if relevant
    """

    file_path: Optional[str] = None
