"""utils/validators.py

Validation utilities for Urlicious.
"""

import re
import string
import urllib.parse

__all__ = ["is_well_formed_uri"]

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# RFC 3986 unreserved + reserved characters, plus "%" for escapes.
_ALLOWED_CHARS = frozenset(
    string.ascii_letters + string.digits + "-._~" + ":/?#[]@" + "!$&'()*+,;=" + "%"
)


def is_well_formed_uri(text: str) -> bool:
    """
    Check that ``text`` is a syntactically valid absolute URI.

    The host does not need to exist; only the grammar is checked.

    Args:
        text: Candidate URI string.

    Returns:
        True when ``text`` has a valid scheme, only legal characters and
        escapes, and a non-empty host with a valid port whenever an
        authority is present.
    """
    if not text or not isinstance(text, str):
        return False

    if any(char not in _ALLOWED_CHARS for char in text):
        return False

    if _PERCENT_RE.search(text):
        return False

    scheme, sep, rest = text.partition(":")
    if not sep or not _SCHEME_RE.match(scheme):
        return False

    if not rest:
        return False

    try:
        parts = urllib.parse.urlsplit(text)
        if rest.startswith("//"):
            if not parts.hostname:
                return False
            # Raises ValueError for non-numeric or out of range ports.
            _ = parts.port
    except ValueError:
        return False

    return True
