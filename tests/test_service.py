"""Tests for NearbyCitiesService."""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import pytest

from nearby_cities.adapters.dataset import SampleDatasetRepository
from nearby_cities.domain.errors import (
    DatasetLoadError,
    DatasetValidationError,
    InvalidArgumentError,
)
from nearby_cities.domain.models import Dataset, Edge
from nearby_cities.services import NearbyCitiesService


@dataclass
class CountingRepository:
    """Repository double that records how often it was loaded."""

    data: Mapping[str, Any]
    calls: int = field(default=0)

    def load(self) -> Dataset:
        self.calls += 1
        return Dataset.from_mapping(self.data)


class FailingRepository:
    def load(self) -> Dataset:
        raise DatasetLoadError("boom", file_path="cities.csv")


class TestNearbyCitiesService:
    """Test suite for NearbyCitiesService."""

    @pytest.fixture
    def service(self):
        return NearbyCitiesService(repository=SampleDatasetRepository())

    def test_find_nearby_default_ceiling(self, service):
        results = service.find_nearby("Guadalajara")
        assert [r.city for r in results] == [
            "Tlaquepaque",
            "Zapopan",
            "Tequila",
            "Tepatitlán",
        ]

    def test_find_nearby_custom_ceiling(self, service):
        results = service.find_nearby("Guadalajara", 50)
        assert [(r.city, r.distance) for r in results] == [
            ("Tlaquepaque", 10),
            ("Zapopan", 12),
        ]

    def test_configured_default_ceiling(self):
        service = NearbyCitiesService(
            repository=SampleDatasetRepository(), default_max_distance_km=12
        )
        assert [r.city for r in service.find_nearby("Guadalajara")] == [
            "Tlaquepaque",
            "Zapopan",
        ]

    def test_unknown_destination(self, service):
        assert service.find_nearby("Cancun") == []
        assert service.find_nearby(None) == []

    def test_non_numeric_ceiling(self, service):
        with pytest.raises(InvalidArgumentError):
            service.find_nearby("Guadalajara", "60")

    def test_graph_is_built_once(self):
        repository = CountingRepository(
            {"cities": ["A", "B"], "edges": [{"from": "A", "to": "B", "distance": 1}]}
        )
        service = NearbyCitiesService(repository=repository)

        service.find_nearby("A")
        service.find_nearby("B")
        assert service.graph is service.graph
        assert repository.calls == 1

        service.reload()
        service.find_nearby("A")
        assert repository.calls == 2

    def test_accepts_edge_models(self):
        repository = CountingRepository({"cities": ["A", "B"], "edges": [Edge("A", "B", 4)]})
        service = NearbyCitiesService(repository=repository)
        assert [r.city for r in service.find_nearby("B")] == ["A"]

    def test_invalid_dataset_raises(self, caplog):
        repository = CountingRepository(
            {"cities": ["A"], "edges": [{"from": "A", "to": "Z", "distance": 1}]}
        )
        service = NearbyCitiesService(repository=repository)

        with caplog.at_level(logging.WARNING):
            with pytest.raises(DatasetValidationError) as excinfo:
                service.find_nearby("A")

        assert excinfo.value.reason == "edge references unknown city"
        assert "Dataset rejected" in caplog.text

    def test_load_errors_propagate(self):
        service = NearbyCitiesService(repository=FailingRepository())
        with pytest.raises(DatasetLoadError):
            service.graph

    def test_logs_graph_build(self, service, caplog):
        with caplog.at_level(logging.INFO, logger="nearby_cities"):
            service.find_nearby("Tala")

        record = next(r for r in caplog.records if r.getMessage() == "Graph built")
        assert record.cities == 7
        assert record.edges == 6
