"""Dataset adapters - Implementations of DatasetRepositoryPort.

Available implementations:
- CSVDatasetRepository: Loads cities and edges from CSV files
- SampleDatasetRepository: Serves a static in-memory dataset
"""

from .csv_repository import CSVDatasetRepository
from .sample_repository import SampleDatasetRepository

__all__ = ["CSVDatasetRepository", "SampleDatasetRepository"]
