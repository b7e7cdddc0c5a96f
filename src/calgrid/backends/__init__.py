"""Tabular export backends for segmented columns."""

from calgrid.backends.base import Backend
from calgrid.backends.pandas import PandasBackend
from calgrid.backends.polars import PolarsBackend

__all__ = ["Backend", "PandasBackend", "PolarsBackend", "columns_to_frame", "get_backend"]


def get_backend(name: str = "pandas") -> Backend:
    """Return the backend registered under ``name`` ("pandas" or "polars")."""
    if name == "pandas":
        return PandasBackend()
    elif name == "polars":
        return PolarsBackend()
    else:
        raise ValueError(f"Unknown backend: {name}")


def columns_to_frame(columns: list, backend: str = "pandas"):
    """Build a DataFrame with one row per column, in column order."""
    return get_backend(backend).from_columns(columns)
