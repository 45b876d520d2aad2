"""In-memory dataset repository serving a static dataset."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ...domain.models import Dataset
from ...graph.sample_data import SAMPLE_DATA


@dataclass
class SampleDatasetRepository:
    """Dataset repository backed by an in-memory ``{cities, edges}`` mapping.

    Defaults to the bundled sample data. Implements DatasetRepositoryPort.
    """

    data: Mapping[str, Any] = field(default_factory=lambda: SAMPLE_DATA)

    def load(self) -> Dataset:
        return Dataset.from_mapping(self.data)
