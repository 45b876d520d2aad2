"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters, so data sources can be swapped in tests.
"""

from .dataset import DatasetRepositoryPort

__all__ = ["DatasetRepositoryPort"]
