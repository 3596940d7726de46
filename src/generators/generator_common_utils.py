"""generator_common_utils.py

Shared utility functions for the date generator modules.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class InvalidRange(ValueError):
    """Raised when a lower bound exceeds its paired upper bound."""
    pass


def check_range(lower: Any, upper: Any, what: str = "range") -> None:
    """Raises InvalidRange (after logging it) unless lower <= upper."""
    if lower > upper:
        message = f"Invalid {what}: lower bound {lower} exceeds upper bound {upper}."
        logger.error(message)
        raise InvalidRange(message)


def check_non_negative(value: int, what: str) -> None:
    if value < 0:
        message = f"Invalid {what}: {value} must not be negative."
        logger.error(message)
        raise InvalidRange(message)


def check_within(value: Any, lower: Any, upper: Any, what: str) -> None:
    """Raises InvalidRange (after logging it) unless lower <= value <= upper."""
    if not lower <= value <= upper:
        message = f"Invalid {what}: {value} is outside the supported range {lower}..{upper}."
        logger.error(message)
        raise InvalidRange(message)
