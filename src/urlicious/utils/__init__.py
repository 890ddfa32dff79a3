"""src/urlicious/utils/__init__.py

Helper primitives used by the Url core.
"""

from urlicious.utils.strings import (
    StringBuffer,
    ends_with,
    starts_with,
    trim_end,
    trim_start,
)
from urlicious.utils.validators import is_well_formed_uri

__all__ = [
    "StringBuffer",
    "trim_start",
    "trim_end",
    "starts_with",
    "ends_with",
    "is_well_formed_uri",
]
