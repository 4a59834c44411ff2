"""
Repository pattern: data access abstraction, decouples service layer from the storage backend.
"""

from .base import SQLRepository, row_builder, select_columns
from .fixture import FIXTURE_INSERT_ID, FixtureTable

__all__ = ["SQLRepository", "row_builder", "select_columns", "FixtureTable", "FIXTURE_INSERT_ID"]
