"""CSV dataset repository adapter.

Reads the city dataset from two CSV files:
- cities.csv with a ``city`` column
- edges.csv with ``from_city``, ``to_city`` and ``distance_km`` columns

Distances are parsed to float here; everything else is handed to
validate_dataset unchanged.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import DatasetLoadError
from ...domain.models import Dataset

CITY_COLUMN = "city"
EDGE_COLUMNS = ("from_city", "to_city", "distance_km")


@dataclass
class CSVDatasetRepository:
    """Dataset repository that loads from CSV files.

    This adapter implements DatasetRepositoryPort. The dataset is read
    once and cached until clear_cache() is called.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    _dataset: Optional[Dataset] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Dataset:
        """Load cities and edges from the configured CSV files.

        Raises:
            DatasetLoadError: If a file is missing or not valid UTF-8, lacks
                a required column, or holds an unparsable distance.
        """
        if self._dataset is not None:
            return self._dataset

        self._logger.debug(
            "Loading dataset",
            extra={
                "cities_path": str(self.config.cities_path),
                "edges_path": str(self.config.edges_path),
            },
        )

        cities = self._load_cities(self.config.cities_path)
        edges = self._load_edges(self.config.edges_path)

        self._dataset = Dataset(cities=cities, edges=edges)
        self._logger.info(
            "Dataset loaded",
            extra={"cities": len(cities), "edges": len(edges)},
        )
        return self._dataset

    def _load_cities(self, path: Path) -> List[str]:
        cities: List[str] = []
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                self._require_columns(reader, (CITY_COLUMN,), path)
                for row in reader:
                    name = (row.get(CITY_COLUMN) or "").strip()
                    # Blank lines are skipped rather than reported.
                    if name:
                        cities.append(name)
        except (OSError, UnicodeDecodeError) as e:
            raise DatasetLoadError(
                f"Failed to read cities file {path}",
                file_path=str(path),
                cause=e,
            )
        return cities

    def _load_edges(self, path: Path) -> List[Dict[str, Any]]:
        edges: List[Dict[str, Any]] = []
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                self._require_columns(reader, EDGE_COLUMNS, path)
                for line_no, row in enumerate(reader, start=2):
                    from_city = (row.get("from_city") or "").strip()
                    to_city = (row.get("to_city") or "").strip()
                    distance_str = (row.get("distance_km") or "").strip()

                    if not from_city and not to_city and not distance_str:
                        continue

                    try:
                        distance = float(distance_str)
                    except ValueError as e:
                        raise DatasetLoadError(
                            f"Invalid distance {distance_str!r} on line {line_no}",
                            file_path=str(path),
                            cause=e,
                        )
                    edges.append(
                        {"from": from_city, "to": to_city, "distance": distance}
                    )
        except (OSError, UnicodeDecodeError) as e:
            raise DatasetLoadError(
                f"Failed to read edges file {path}",
                file_path=str(path),
                cause=e,
            )
        return edges

    @staticmethod
    def _require_columns(
        reader: csv.DictReader, columns: tuple[str, ...], path: Path
    ) -> None:
        missing = [c for c in columns if c not in (reader.fieldnames or [])]
        if missing:
            raise DatasetLoadError(
                f"Missing column(s) {', '.join(missing)}",
                file_path=str(path),
            )

    def clear_cache(self) -> None:
        """Clear the cached dataset."""
        self._dataset = None
        self._logger.debug("Dataset cache cleared")
