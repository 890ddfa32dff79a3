"""src/urlicious/__init__.py

Urlicious - Fluent, mutable URL builder for Python.

Urlicious represents an absolute URL as a root (scheme and authority), a list
of path segments and an ordered set of query parameters. Paths and queries are
added through chainable methods, and the result is serialized to a canonical
string. Existing URLs can be parsed back into the same shape.

Key Features:
    - Zero external dependencies
    - Slash-normalized path appending
    - Insertion-ordered query parameters with optional percent-encoding
    - Round-trip parse and serialize
    - Full type hints (PEP 561)

Example:
    Building a URL::

        from urlicious import Url

        url = Url("http://google.com").append_paths("maps", "place")
        url.add_query("hl", "en").add_query("z", 12)
        str(url)  # 'http://google.com/maps/place?hl=en&z=12'

    Parsing a URL::

        from urlicious import Url

        url = Url.parse("https://example.com/a/b?page=2")
        url.get_paths()  # ['a', 'b']
        url.get_query_value("page", int)  # 2
"""

from urlicious.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    MalformedUrlError,
    QueryKeyError,
    QueryTypeError,
    UrliciousError,
)
from urlicious.url import Url, get_root_url, is_well_formed, to_str, to_url
from urlicious.version import __version__

__all__ = [
    "Url",
    "get_root_url",
    "is_well_formed",
    "to_url",
    "to_str",
    "UrliciousError",
    "InvalidArgumentError",
    "InvalidStateError",
    "MalformedUrlError",
    "QueryKeyError",
    "QueryTypeError",
    "__version__",
]
