"""Dataset port - Abstraction over where the city dataset comes from.

Implementations:
- adapters/dataset/sample_repository.py (SampleDatasetRepository)
- adapters/dataset/csv_repository.py (CSVDatasetRepository)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import Dataset


class DatasetRepositoryPort(Protocol):
    """Port for loading the cities and edges a graph is built from.

    Repositories only read data. Deciding whether the data is usable is
    the job of validate_dataset.
    """

    def load(self) -> Dataset:
        """Load the dataset.

        Returns:
            The cities and edges in source order.

        Raises:
            DatasetLoadError: If the source cannot be read.
        """
        ...
