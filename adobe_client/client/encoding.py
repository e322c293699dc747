"""Path and query-string encoding for resource URLs.

Two path encodings coexist and must not be unified, since each one is what
its endpoint family already sends on the wire:

- flat identifiers (audience ids, job ids) are encoded as a single segment,
  so ``/`` inside an id becomes ``%2F``;
- hierarchical repository paths (content fragments) are encoded per segment,
  keeping ``/`` as the separator.
"""

from typing import Any, Mapping
from urllib.parse import quote, urlencode


def encode_segment(identifier: str) -> str:
    """Percent-encodes everything outside the RFC 3986 unreserved set."""

    return quote(str(identifier), safe="")


def encode_hierarchical_path(path: str) -> str:
    """
    Encodes a repository path segment by segment.

    The whole path is encoded, then ``%2F`` is turned back into ``/``, and the
    result is given exactly one leading slash.

    Example:
        "/content/dam/my site/a&b" -> "/content/dam/my%20site/a%26b"
    """
    encoded = quote(path, safe="").replace("%2F", "/")
    return "/" + encoded.lstrip("/")


def _query_value(value: Any) -> Any:
    # Booleans go out as 1/0, matching form encoders on the server side.
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (list, tuple)):
        return [_query_value(v) for v in value if v is not None]
    return value


def build_query_string(options: Mapping[str, Any] | None) -> str:
    """
    Form-urlencodes ``options`` (space as ``+``).

    None values are dropped. A list or tuple value repeats its key once per
    item (``property=a&property=b``). Returns "" when nothing is left, so callers can
    skip the ``?`` entirely.
    """
    if not options:
        return ""

    filtered = {k: _query_value(v) for k, v in options.items() if v is not None}
    return urlencode(filtered, doseq=True)


def with_query(path: str, options: Mapping[str, Any] | None) -> str:
    query = build_query_string(options)
    if not query:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{query}"
