"""
Roof form tags and direction parameters.
"""

from enum import Enum
from typing import Any, Optional


class RoofType(Enum):
    """Roof forms the editor offers."""
    FLAT = "flat"
    SHED = "shed"
    GABLED = "gabled"
    HIPPED = "hipped"


# Shed slope direction -> (axis, reversed). Slope runs low to high.
SHED_DIRECTIONS = {
    '+x': (0, False),
    '-x': (0, True),
    '+y': (1, False),
    '-y': (1, True),
}

# Ridge line axis for gabled/hipped roofs
RIDGE_DIRECTIONS = {
    'x': 0,
    'y': 1,
}

DEFAULT_SHED_DIRECTION = '+y'
DEFAULT_RIDGE_DIRECTION = 'x'


def parse_roof_type(value: Any) -> Optional[RoofType]:
    """Return the RoofType for a tag or enum member, None if unrecognized."""
    if isinstance(value, RoofType):
        return value
    try:
        return RoofType(value)
    except ValueError:
        return None
