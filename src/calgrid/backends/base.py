"""Abstract backend protocol for column export."""

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from calgrid.types import Column

DF = TypeVar("DF", covariant=True)

# Field order of an exported column table.
COLUMN_FIELDS = ["key", "label", "sublabel", "start", "end", "natural_end", "days"]
DATE_FIELDS = ["start", "end", "natural_end"]


class Backend(Protocol[DF]):
    """Protocol defining required DataFrame operations for a backend."""

    def from_columns(self, columns: list["Column"]) -> DF:
        """Build a DataFrame with one row per column, preserving order."""
        ...

    def empty(self) -> DF:
        """Return an empty DataFrame with the column table schema."""
        ...

    def is_empty(self, df: DF) -> bool:
        """Check if DataFrame is empty."""
        ...
