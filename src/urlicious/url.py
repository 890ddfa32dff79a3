"""src/urlicious/url.py

URL builder and parser for Urlicious.
"""

# pylint: disable=protected-access

import logging
import types
import urllib.parse
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Type, Union

from urlicious.exceptions import (
    InvalidArgumentError,
    MalformedUrlError,
    QueryKeyError,
    QueryTypeError,
)
from urlicious.utils.strings import StringBuffer, ends_with, trim_end, trim_start
from urlicious.utils.validators import is_well_formed_uri

__all__ = ["Url", "get_root_url", "to_url", "to_str", "is_well_formed"]

logger = logging.getLogger(__name__)

DEFAULT_PORTS: Dict[str, int] = {
    "ftp": 21,
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
}

UriValue = Union[str, urllib.parse.SplitResult, urllib.parse.ParseResult, "Url"]


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _authority_end(url: str) -> int:
    """Index where the path begins, i.e. just past scheme and authority."""
    start = url.find("://")
    start = 0 if start < 0 else start + 3
    for i in range(start, len(url)):
        if url[i] in "/?#":
            return i
    return len(url)


def get_root_url(url: str, include_trailing_slash: bool = False) -> str:
    """
    Obtain the root URL (scheme, user-info, host and port) of ``url``.

    Scheme and host are lower-cased, default ports are dropped and the result
    is unescaped.

    Args:
        url: Absolute URL.
        include_trailing_slash: Append a ``/`` to the root.

    Returns:
        The root URL, e.g. ``https://example.com``.

    Raises:
        InvalidArgumentError: ``url`` is None, empty or whitespace, or not a string.
        MalformedUrlError: ``url`` has no scheme or authority.
    """
    if _is_blank(url):
        raise InvalidArgumentError("url must be a non-empty string")

    try:
        parts = urllib.parse.urlsplit(url.strip())
        port = parts.port
    except ValueError as exc:
        logger.debug("Could not split %r into components: %s", url, exc)
        raise MalformedUrlError(f"Invalid URL: {url!r}") from exc

    if not parts.scheme or not parts.hostname:
        raise MalformedUrlError(f"URL has no scheme or host: {url!r}")

    scheme = parts.scheme.lower()
    authority = parts.hostname
    if port is not None and port != DEFAULT_PORTS.get(scheme):
        authority = f"{authority}:{port}"

    userinfo, sep, _ = parts.netloc.rpartition("@")
    if sep:
        authority = f"{userinfo}@{authority}"

    root = urllib.parse.unquote(f"{scheme}://{authority}")
    return f"{root}/" if include_trailing_slash else root


class Url:
    """
    Mutable absolute URL made of a root, path segments and query parameters.

    Mutating methods return the instance itself so calls can be chained::

        url = Url("http://google.com").append_path("maps").add_query("hl", "en")
        str(url)  # 'http://google.com/maps?hl=en'

    Query parameters are kept apart from the path and only joined to it when
    the URL is serialized.
    """

    __slots__ = ("_absolute_path", "_encode_parameters", "_queries")

    def __init__(self, url: str, encode_parameters: bool = True):
        if _is_blank(url):
            raise InvalidArgumentError("url must be a non-empty string")

        self._absolute_path = StringBuffer(url)
        self._encode_parameters = encode_parameters
        self._queries: Dict[str, Any] = {}

    # Properties

    @property
    def absolute_path(self) -> str:
        """Full URL without the query string."""
        return str(self._absolute_path)

    @absolute_path.setter
    def absolute_path(self, value: str) -> None:
        if _is_blank(value):
            raise InvalidArgumentError("absolute_path must be a non-empty string")
        self._absolute_path = StringBuffer(value)

    @property
    def encode_parameters(self) -> bool:
        """Whether query values are percent-encoded on serialization."""
        return self._encode_parameters

    @property
    def queries(self) -> Mapping[str, Any]:
        """Read-only view of the query parameters, in insertion order."""
        return types.MappingProxyType(self._queries)

    @property
    def root_url(self) -> str:
        """Root URL derived from the current absolute path."""
        return get_root_url(self.absolute_path)

    # Paths

    def append_path(self, path: Optional[str]) -> "Url":
        """
        Append a path segment, keeping exactly one slash between segments.

        Leading and trailing slashes of ``path`` are dropped. Blank values are
        ignored.
        """
        if path is None or not path.strip():
            return self

        if not ends_with(self._absolute_path, "/"):
            self._absolute_path.append("/")

        segment = StringBuffer(path)
        trim_start(segment, "/")
        trim_end(segment, "/")
        self._absolute_path.append(str(segment))

        return self

    def append_paths(self, *paths: Union[str, Iterable[str]]) -> "Url":
        """
        Append several path segments in order.

        Accepts either the segments as positional arguments or a single
        iterable of segments.

        Raises:
            InvalidArgumentError: No segments were given.
        """
        segments: Iterable[Any] = paths
        if len(paths) == 1 and not isinstance(paths[0], str):
            if paths[0] is None:
                raise InvalidArgumentError("paths must not be None")
            segments = list(paths[0])

        segments = list(segments)
        if not segments:
            raise InvalidArgumentError("paths must contain at least one segment")

        for segment in segments:
            self.append_path(segment)

        return self

    def get_paths(self) -> List[str]:
        """
        Return the path segments between the root and the query string.

        An URL without a path yields ``[""]``.

        Raises:
            MalformedUrlError: The absolute path has no scheme and authority.
        """
        path = self.absolute_path
        if "://" not in path:
            raise MalformedUrlError(f"URL has no scheme or authority: {path!r}")
        remainder = StringBuffer(path[_authority_end(path) :])

        if self._queries:
            suffix = f"?{self._query_string()}"
            if ends_with(remainder, suffix):
                remainder.remove(len(remainder) - len(suffix), len(suffix))

        trim_start(remainder, "/")
        trim_end(remainder, "/")

        return str(remainder).split("/")

    # Queries

    def add_query(self, key: str, value: Any) -> "Url":
        """Add or overwrite a query parameter; overwrites keep their position."""
        self._queries[key] = value
        return self

    def remove_query(self, key: str) -> None:
        """Remove a query parameter if present."""
        self._queries.pop(key, None)

    def get_query_value(
        self,
        key: str,
        retriever: Optional[Callable[[Any], Any]] = None,
        *,
        expected_type: Optional[Type[Any]] = None,
    ) -> Any:
        """
        Get the value stored for a query parameter.

        Args:
            key: Query parameter name.
            retriever: Optional conversion applied to the stored value. Use it
                for parsed URLs, whose values are always strings.
            expected_type: Optional type the stored value must be an
                instance of. Ignored when ``retriever`` is given.

        Returns:
            The stored value, or the result of ``retriever``.

        Raises:
            QueryKeyError: ``key`` was never added.
            QueryTypeError: The value is not an instance of ``expected_type``.
        """
        if key not in self._queries:
            raise QueryKeyError(key)

        value = self._queries[key]

        if retriever is not None:
            return retriever(value)

        if expected_type is not None and not isinstance(value, expected_type):
            raise QueryTypeError(
                f"Query {key!r} holds {type(value).__name__}, "
                f"not {expected_type.__name__}"
            )

        return value

    def _process_query(self, value: str) -> str:
        if self._encode_parameters:
            return urllib.parse.quote_plus(value, safe="", errors="surrogateescape")
        return value

    def _query_string(self) -> str:
        return "&".join(
            f"{key}={self._process_query(str(value))}"
            for key, value in self._queries.items()
        )

    # Whole URL

    def reset(self, truncate_queries: bool = True) -> None:
        """Collapse the URL to its root, optionally dropping all queries."""
        root = get_root_url(self.absolute_path)
        logger.debug("Resetting %r to %r", self.absolute_path, root)
        self._absolute_path = StringBuffer(root)

        if truncate_queries:
            self._queries.clear()

    def is_well_formed(self) -> bool:
        """Check whether the serialized URL is a well-formed absolute URI."""
        return is_well_formed(self)

    def copy(self) -> "Url":
        """Return an independent Url with the same path and queries."""
        other = Url(self.absolute_path, self._encode_parameters)
        other._queries = dict(self._queries)
        return other

    def to_string(self) -> str:
        """Serialize to ``scheme://authority/path?key=value&...``."""
        url = self.absolute_path

        if not self._queries:
            return url

        if url.endswith("/"):
            url = url[:-1]

        return f"{url}?{self._query_string()}"

    @classmethod
    def parse(cls, url: UriValue, encode_parameters: bool = True) -> "Url":
        """
        Build a Url from an existing absolute URL.

        Query values are decoded and stored as strings; the query string and
        any fragment are removed from the stored path.

        Args:
            url: URL string, ``urllib.parse`` split/parse result or Url.
            encode_parameters: Encoding flag for the new instance.

        Raises:
            MalformedUrlError: ``url`` is not a well-formed absolute URI.
        """
        if isinstance(url, (urllib.parse.SplitResult, urllib.parse.ParseResult)):
            text = url.geturl()
        elif isinstance(url, Url):
            text = url.to_string()
        else:
            text = url

        if not isinstance(text, str) or not is_well_formed_uri(text):
            raise MalformedUrlError(f"Not a well-formed absolute URL: {text!r}")

        query = urllib.parse.urlsplit(text).query
        end = _authority_end(text)
        while end < len(text) and text[end] not in "?#":
            end += 1

        instance = cls(text[:end], encode_parameters)
        for pair in query.split("&"):
            if not pair:
                continue
            key, _, value = pair.partition("=")
            instance._queries[key] = urllib.parse.unquote_plus(
                value, errors="surrogateescape"
            )

        logger.debug(
            "Parsed %r into path %r with %d queries",
            text,
            instance.absolute_path,
            len(instance._queries),
        )
        return instance

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Url({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Url, str)):
            return self.to_string() == str(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    get_root_url = staticmethod(get_root_url)


def to_url(value: Union[str, Url], encode_parameters: bool = True) -> Url:
    """Return ``value`` if it is a Url, otherwise wrap the string in one."""
    if isinstance(value, Url):
        return value
    return Url(value, encode_parameters)


def to_str(url: Optional[Url]) -> str:
    """Serialize a Url to its canonical string."""
    if url is None:
        raise InvalidArgumentError("url must not be None")
    return url.to_string()


def is_well_formed(url: Optional[Url]) -> bool:
    """
    Check whether ``url`` serializes to a well-formed absolute URI.

    Raises:
        InvalidArgumentError: ``url`` is None.
    """
    if url is None:
        raise InvalidArgumentError("url must not be None")
    return is_well_formed_uri(url.to_string())
