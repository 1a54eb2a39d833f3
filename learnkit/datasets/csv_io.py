"""CSV ingestion helpers.

Turns a CSV with a header row into a pandas DataFrame, and a DataFrame into
a ``Dataset`` by naming the label column and the feature columns.
"""

from __future__ import annotations

import logging
import os
from typing import IO, Optional, Sequence, Union

import numpy as np
import pandas as pd

from ..core.data import DataPoint, Dataset
from ..core.errors import MissingColumnError, PreconditionError

logger = logging.getLogger(__name__)

CsvSource = Union[str, os.PathLike, IO]


def read_csv(source: CsvSource) -> pd.DataFrame:
    """Read a CSV with a header row into a DataFrame.

    Column names are stripped of surrounding whitespace. Numeric cells load
    as numbers, anything else stays a string. Blank lines are skipped. An
    empty source gives an empty DataFrame.

    Raises:
        PreconditionError: If a row has more fields than the header.
    """
    try:
        df = pd.read_csv(source, skipinitialspace=True, skip_blank_lines=True, on_bad_lines="error")
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    except pd.errors.ParserError as exc:
        raise PreconditionError(f"Malformed CSV row: {exc}") from exc
    df.columns = [str(c).strip() for c in df.columns]
    return df


def require_columns(df: pd.DataFrame, columns: Sequence[str]) -> None:
    """Raise ``MissingColumnError`` for the first column not present in ``df``."""
    for col in columns:
        if col not in df.columns:
            raise MissingColumnError(col, df.columns)


def _require_complete(df: pd.DataFrame) -> None:
    rows, cols = np.nonzero(df.isna().to_numpy())
    if len(rows):
        raise PreconditionError(
            f"Missing value in row {df.index[rows[0]]}, column '{df.columns[cols[0]]}'"
        )


def dataframe_to_dataset(df: pd.DataFrame, label_column: str, feature_columns: Optional[Sequence[str]] = None) -> Dataset:
    """Build a ``Dataset`` from selected DataFrame columns.

    Args:
        df: Source table.
        label_column: Column holding the label.
        feature_columns: Columns used as features, in order. Defaults to every
            column except the label.

    Returns:
        Dataset whose feature names are ``feature_columns``.

    Raises:
        MissingColumnError: If a named column is absent.
        PreconditionError: If a selected cell is empty, e.g. a row with too
            few fields.
        ValueError: If a selected cell cannot be converted to a number.
    """
    if feature_columns is None or len(feature_columns) == 0:
        feature_columns = [c for c in df.columns if c != label_column]
    feature_columns = list(feature_columns)
    require_columns(df, [label_column] + feature_columns)

    X = df[feature_columns].astype(float)
    y = df[label_column].astype(float)
    _require_complete(pd.concat([X, y], axis=1))
    X, y = X.to_numpy(), y.to_numpy()
    points = [DataPoint(features=row, label=label) for row, label in zip(X, y)]
    logger.debug("Built dataset: %d rows, %d features, label=%s", len(points), len(feature_columns), label_column)
    return Dataset(points=points, feature_names=feature_columns)


def load_csv_dataset(source: CsvSource) -> Dataset:
    """Load a CSV whose last column is the label and the rest are features."""
    df = read_csv(source)
    if df.shape[1] == 0:
        return Dataset()
    columns = list(df.columns)
    return dataframe_to_dataset(df, label_column=columns[-1], feature_columns=columns[:-1])


def preview(df: pd.DataFrame, count: int = 5) -> str:
    """Return the first ``count`` rows as a ``" | "``-separated text table."""
    lines = [" | ".join(str(c) for c in df.columns), "-" * 50]
    for _, row in df.head(count).iterrows():
        lines.append(" | ".join(str(v) for v in row.tolist()))
    return "\n".join(lines)
