"""calgrid - Date-range segmentation into calendar display columns."""

from calgrid.backends import (
    PandasBackend,
    PolarsBackend,
    columns_to_frame,
    get_backend,
)
from calgrid.calendar import (
    BDateCalendar,
    Calendar,
    DateCalendar,
    WeekendCalendar,
    calendar_for,
)
from calgrid.config import (
    CalgridConfig,
    configure_calgrid,
    get_calgrid_config,
    reset_calgrid_config,
)
from calgrid.convert import convert_scale, shift_range
from calgrid.filters import keep
from calgrid.labels import WeekInfo, row_labels, week_choices, week_info
from calgrid.logging import configure_logging, get_logger
from calgrid.periods import (
    DayPeriod,
    MonthPeriod,
    Period,
    WeekPeriod,
    YearPeriod,
    period_for,
)
from calgrid.segment import (
    DaySegmenter,
    MonthSegmenter,
    Segmenter,
    WeekSegmenter,
    YearSegmenter,
    get_segmenter,
    segment,
)
from calgrid.timeline import ScaleState, TimelineState, default_range
from calgrid.types import (
    Column,
    DateRange,
    DayFilterMode,
    RangeType,
    Scale,
    WeekNumberingScheme,
)
from calgrid.validation import InvalidRange, ValidationError, validate_range
from calgrid.week_numbers import week_number, week_start_weekday

__all__ = [
    # Primary API
    "segment",
    "convert_scale",
    "week_number",
    # Types
    "Column",
    "DateRange",
    "DayFilterMode",
    "RangeType",
    "Scale",
    "WeekNumberingScheme",
    # Validation
    "InvalidRange",
    "ValidationError",
    "validate_range",
    # Segmenters
    "Segmenter",
    "DaySegmenter",
    "WeekSegmenter",
    "MonthSegmenter",
    "YearSegmenter",
    "get_segmenter",
    # Calendars and periods
    "Calendar",
    "BDateCalendar",
    "DateCalendar",
    "WeekendCalendar",
    "calendar_for",
    "keep",
    "Period",
    "DayPeriod",
    "WeekPeriod",
    "MonthPeriod",
    "YearPeriod",
    "period_for",
    "shift_range",
    "week_start_weekday",
    # Timeline state
    "ScaleState",
    "TimelineState",
    "default_range",
    # Labels
    "WeekInfo",
    "row_labels",
    "week_choices",
    "week_info",
    # Export backends
    "PandasBackend",
    "PolarsBackend",
    "columns_to_frame",
    "get_backend",
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "CalgridConfig",
    "configure_calgrid",
    "get_calgrid_config",
    "reset_calgrid_config",
]
__version__ = "0.1.0"
