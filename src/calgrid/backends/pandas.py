"""Pandas backend implementation."""

from typing import TYPE_CHECKING

import pandas as pd

from calgrid.backends.base import COLUMN_FIELDS, DATE_FIELDS

if TYPE_CHECKING:
    from calgrid.types import Column


class PandasBackend:
    """Backend implementation for pandas DataFrames."""

    def from_columns(self, columns: list["Column"]) -> pd.DataFrame:
        """Build a DataFrame indexed by column key.

        Date fields are stored as datetime64 so they support ``.dt`` access.
        """
        if not columns:
            return self.empty()
        df = pd.DataFrame([c.as_dict() for c in columns], columns=COLUMN_FIELDS)
        for name in DATE_FIELDS:
            df[name] = pd.to_datetime(df[name])
        return df.set_index("key")

    def empty(self) -> pd.DataFrame:
        """Return an empty DataFrame."""
        df = pd.DataFrame(columns=COLUMN_FIELDS)
        for name in DATE_FIELDS:
            df[name] = pd.to_datetime(df[name])
        return df.set_index("key")

    def is_empty(self, df: pd.DataFrame) -> bool:
        """Check if DataFrame is empty."""
        return df.empty
