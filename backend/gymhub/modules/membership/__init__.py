from gymhub.modules.membership.calculator import (
    Duration,
    DurationUnit,
    compute_end_date,
    parse_duration,
    parse_start_date,
)

__all__ = [
    "Duration",
    "DurationUnit",
    "compute_end_date",
    "parse_duration",
    "parse_start_date",
]
