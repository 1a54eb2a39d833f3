"""
Dataset ingestion.

Loads tabular data from CSV (via pandas) into ``learnkit.core.Dataset``.
"""

from .csv_io import (
    read_csv,
    require_columns,
    dataframe_to_dataset,
    load_csv_dataset,
    preview,
)

__all__ = [
    "read_csv",
    "require_columns",
    "dataframe_to_dataset",
    "load_csv_dataset",
    "preview",
]
