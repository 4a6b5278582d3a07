"""I/O utilities for CSV import."""

from .import_csv import import_members_csv, import_unavailability_csv

__all__ = [
    "import_members_csv",
    "import_unavailability_csv",
]
