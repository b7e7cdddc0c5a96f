"""Polars backend implementation."""

from typing import TYPE_CHECKING

import polars as pl

from calgrid.backends.base import COLUMN_FIELDS

if TYPE_CHECKING:
    from calgrid.types import Column

_SCHEMA = {
    "key": pl.Utf8,
    "label": pl.Utf8,
    "sublabel": pl.Utf8,
    "start": pl.Date,
    "end": pl.Date,
    "natural_end": pl.Date,
    "days": pl.List(pl.Utf8),
}


class PolarsBackend:
    """Backend implementation for polars DataFrames.

    Polars has no index, so ``key`` stays a regular column.
    """

    def from_columns(self, columns: list["Column"]) -> pl.DataFrame:
        """Build a DataFrame with one row per column, preserving order."""
        if not columns:
            return self.empty()
        rows = [c.as_dict() for c in columns]
        return pl.DataFrame(rows, schema=_SCHEMA).select(COLUMN_FIELDS)

    def empty(self) -> pl.DataFrame:
        """Return an empty DataFrame."""
        return pl.DataFrame(schema=_SCHEMA)

    def is_empty(self, df: pl.DataFrame) -> bool:
        """Check if DataFrame is empty."""
        return df.is_empty()
