"""src/urlicious/utils/strings.py

Mutable string buffer and the trimming/matching primitives used for path
normalization.
"""

from typing import Iterator, List, Optional

__all__ = [
    "StringBuffer",
    "trim_start",
    "trim_end",
    "starts_with",
    "ends_with",
]


class StringBuffer:
    """
    Growable character buffer with in-place truncation.

    Appends are amortized; ``str()`` materializes the current contents.
    """

    __slots__ = ("_chars",)

    def __init__(self, value: str = ""):
        self._chars: List[str] = list(value)

    def __len__(self) -> int:
        return len(self._chars)

    def __getitem__(self, index: int) -> str:
        return self._chars[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"StringBuffer({str(self)!r})"

    def append(self, value: str) -> "StringBuffer":
        """Append ``value`` to the end of the buffer."""
        self._chars.extend(value)
        return self

    def remove(self, start: int, length: int) -> "StringBuffer":
        """Remove ``length`` characters beginning at ``start``."""
        if start < 0 or length < 0 or start + length > len(self._chars):
            raise IndexError(
                f"Range [{start}, {start + length}) outside buffer of "
                f"length {len(self._chars)}"
            )
        del self._chars[start : start + length]
        return self

    def clear(self) -> "StringBuffer":
        """Empty the buffer."""
        self._chars.clear()
        return self

    def trim_start(self, *chars: str) -> "StringBuffer":
        """Remove the leading run of characters found in ``chars``."""
        trim_start(self, *chars)
        return self

    def trim_end(self, *chars: str) -> "StringBuffer":
        """Remove the trailing run of characters found in ``chars``."""
        trim_end(self, *chars)
        return self

    def starts_with(self, value: str) -> bool:
        """Return True when the buffer begins with ``value``."""
        return starts_with(self, value)

    def ends_with(self, value: str) -> bool:
        """Return True when the buffer ends with ``value``."""
        return ends_with(self, value)


def trim_start(sb: Optional[StringBuffer], *chars: str) -> Optional[StringBuffer]:
    """
    Remove all leading occurrences of ``chars`` from the buffer.

    Args:
        sb: Buffer to trim in place. ``None`` and empty buffers are returned
            untouched.
        *chars: Characters eligible for removal.

    Returns:
        The same buffer.
    """
    if sb is None or len(sb) == 0:
        return sb

    truncate = 0
    for char in sb:
        if char not in chars:
            break
        truncate += 1

    # Single removal; it is the only costly step.
    if truncate > 0:
        sb.remove(0, truncate)

    return sb


def trim_end(sb: Optional[StringBuffer], *chars: str) -> Optional[StringBuffer]:
    """
    Remove trailing occurrences of ``chars`` from the buffer.

    The scan stops before index 0, so the first character of the buffer is
    never removed, even when the whole buffer consists of ``chars``.

    Args:
        sb: Buffer to trim in place. ``None`` and empty buffers are returned
            untouched.
        *chars: Characters eligible for removal.

    Returns:
        The same buffer.
    """
    if sb is None or len(sb) == 0:
        return sb

    truncate = 0
    for i in range(len(sb) - 1, 0, -1):
        if sb[i] not in chars:
            break
        truncate += 1

    if truncate > 0:
        sb.remove(len(sb) - truncate, truncate)

    return sb


def ends_with(sb: Optional[StringBuffer], value: str) -> bool:
    """Determine whether the end of the buffer matches ``value``."""
    if sb is None or len(sb) == 0:
        return False

    if len(value) > len(sb):
        return False

    offset = len(sb) - len(value)
    for j, char in enumerate(value):
        if sb[offset + j] != char:
            return False
    return True


def starts_with(sb: Optional[StringBuffer], value: str) -> bool:
    """Determine whether the beginning of the buffer matches ``value``."""
    if sb is None or len(sb) == 0:
        return False

    if len(value) > len(sb):
        return False

    return all(sb[i] == char for i, char in enumerate(value))
