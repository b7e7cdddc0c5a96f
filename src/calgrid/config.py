"""Module-level configuration for calgrid defaults."""

import threading
from dataclasses import dataclass, field

from calgrid.types import DayFilterMode, Scale, WeekNumberingScheme


def _default_column_counts() -> dict[Scale, int]:
    return {Scale.DAY: 7, Scale.WEEK: 4, Scale.MONTH: 3, Scale.YEAR: 2}


@dataclass
class CalgridConfig:
    """Configuration for calgrid defaults.

    These defaults seed new timeline states. The segmentation engine itself
    never reads them; every engine call takes its inputs explicitly.
    """

    default_scale: Scale = Scale.DAY
    default_scheme: WeekNumberingScheme = WeekNumberingScheme.ISO
    default_day_filter: DayFilterMode = DayFilterMode.ALL
    default_column_counts: dict[Scale, int] = field(
        default_factory=_default_column_counts
    )


# Module-level singleton
_calgrid_config: CalgridConfig | None = None
_config_lock = threading.Lock()


def get_calgrid_config() -> CalgridConfig:
    """Get the global calgrid configuration singleton."""
    global _calgrid_config
    if _calgrid_config is None:
        with _config_lock:
            if _calgrid_config is None:
                _calgrid_config = CalgridConfig()
    return _calgrid_config


def configure_calgrid(
    default_scale: Scale | str | None = None,
    default_scheme: WeekNumberingScheme | str | None = None,
    default_day_filter: DayFilterMode | str | None = None,
    default_column_counts: dict[Scale | str, int] | None = None,
) -> None:
    """Configure default calgrid settings.

    Args:
        default_scale: Scale a new timeline starts on.
        default_scheme: Week numbering scheme for new timelines.
        default_day_filter: Day filter for new timelines.
        default_column_counts: Column count per scale for new timelines.
            Scales left out keep their current count.

    Raises:
        ValueError: If a value is not a known scale/scheme/filter, or a
            column count is below 1.

    Example:
        from calgrid import configure_calgrid

        configure_calgrid(default_scheme="us", default_column_counts={"week": 6})
    """
    counts = None
    if default_column_counts is not None:
        counts = {}
        for scale, count in default_column_counts.items():
            if count < 1:
                raise ValueError(f"Column count must be at least 1, got {count}")
            counts[Scale(scale)] = count

    config = get_calgrid_config()
    with _config_lock:
        if default_scale is not None:
            config.default_scale = Scale(default_scale)
        if default_scheme is not None:
            config.default_scheme = WeekNumberingScheme(default_scheme)
        if default_day_filter is not None:
            config.default_day_filter = DayFilterMode(default_day_filter)
        if counts is not None:
            config.default_column_counts = {**config.default_column_counts, **counts}


def get_default_column_count(scale: Scale | str) -> int:
    """Get the configured default column count for a scale."""
    return get_calgrid_config().default_column_counts[Scale(scale)]


def reset_calgrid_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _calgrid_config
    with _config_lock:
        _calgrid_config = CalgridConfig()
