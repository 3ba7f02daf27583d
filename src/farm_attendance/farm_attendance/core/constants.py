"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MAX_SHIFT_HOURS = 24
MAX_PAY_MULTIPLIER = 10
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

DEFAULT_PAY_MULTIPLIER = 1.0
DEFAULT_CATEGORY_COLOR = "#007bff"

HEX_COLOR_PATTERN = r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})"

OVERLAP_REASON = "Overlapping hour ranges"
