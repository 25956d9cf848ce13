"""Data layer utilities for loading JSON definitions."""

from .errors import DataLoadError, DataReferenceError, DataValidationError
from .paths import get_definitions_path, get_packaged_definitions_path

__all__ = [
    "DataLoadError",
    "DataReferenceError",
    "DataValidationError",
    "get_definitions_path",
    "get_packaged_definitions_path",
]
