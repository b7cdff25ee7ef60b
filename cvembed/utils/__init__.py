"""
Shared utilities for CVEmbed.

Common functionality used across contexts:
- Date token formatting
- Text helpers
- Timestamps
- Logger setup
"""

from cvembed.utils.dates import (
    format_date_range,
    format_date_range_by_style,
    format_date_token,
    format_single_date,
)
from cvembed.utils.timestamp import now, now_iso

__all__ = [
    "format_date_range",
    "format_date_range_by_style",
    "format_date_token",
    "format_single_date",
    "now",
    "now_iso",
]
