"""Graph core: city graph, dataset validation, construction and nearby lookup.

The flow is validate_dataset -> build_graph -> get_nearby_cities. Nothing
in this subpackage performs I/O or logging.
"""

from .builder import build_graph
from .nearby import DEFAULT_MAX_DISTANCE_KM, get_nearby_cities
from .sample_data import SAMPLE_DATA
from .store import GraphStore
from .validation import validate_dataset

__all__ = [
    "DEFAULT_MAX_DISTANCE_KM",
    "GraphStore",
    "SAMPLE_DATA",
    "build_graph",
    "get_nearby_cities",
    "validate_dataset",
]
