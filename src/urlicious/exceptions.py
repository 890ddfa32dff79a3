"""src/urlicious/exceptions.py

Urlicious Exceptions hierarchy.
"""


class UrliciousError(Exception):
    """Base exception for all Urlicious errors."""


class InvalidArgumentError(UrliciousError, ValueError):
    """A required string or collection argument was missing or blank."""


class InvalidStateError(UrliciousError):
    """
    Base exception for operations whose precondition the URL does not meet.
    """


class MalformedUrlError(InvalidStateError, ValueError):
    """The text is not a well-formed absolute URI."""


class QueryKeyError(InvalidStateError, KeyError):
    """
    A query value was requested for a key that was never added.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Query key not present: {key!r}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])


class QueryTypeError(UrliciousError, TypeError):
    """A stored query value is not of the requested type."""
