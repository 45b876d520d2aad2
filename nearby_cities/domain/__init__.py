"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CityGraphError,
    DatasetLoadError,
    DatasetValidationError,
    InvalidArgumentError,
    UnknownCityError,
)
from .models import Dataset, Edge, NearbyResult, Neighbor, ValidationResult

__all__ = [
    # Models
    "Dataset",
    "Edge",
    "NearbyResult",
    "Neighbor",
    "ValidationResult",
    # Errors
    "CityGraphError",
    "DatasetLoadError",
    "DatasetValidationError",
    "InvalidArgumentError",
    "UnknownCityError",
]
