"""Naive structural splitting of URL-like byte strings.

Only the first `://`, the first `/` after it and the first `?` after that are
looked at. Nothing is validated, so any input splits into four (possibly empty)
parts.
"""

from dataclasses import dataclass

SCHEME_SEPARATOR = b"://"


@dataclass(frozen=True)
class UrlParts:
    """Byte slices of a URL in their original order."""

    scheme: bytes  # includes the trailing "://" when present
    host: bytes
    path: bytes  # starts with "/" unless empty
    query: bytes  # starts with "?" unless empty

    @property
    def head_len(self) -> int:
        """Length of the part that is never shortened structurally."""
        return len(self.scheme) + len(self.host)


def split_url(raw: bytes) -> UrlParts:
    """Split raw URL bytes into scheme, host, path and query."""
    index = raw.find(SCHEME_SEPARATOR)
    if index >= 0:
        cut = index + len(SCHEME_SEPARATOR)
        scheme, rest = raw[:cut], raw[cut:]
    else:
        scheme, rest = b"", raw

    index = rest.find(b"/")
    if index >= 0:
        host, rest = rest[:index], rest[index:]
    else:
        host, rest = rest, b""

    index = rest.find(b"?")
    if index >= 0:
        path, query = rest[:index], rest[index:]
    else:
        path, query = rest, b""

    return UrlParts(scheme=scheme, host=host, path=path, query=query)


def split_path(path: bytes) -> list[bytes]:
    """Split a path into its segments, dropping the leading slash.

    An empty path has no segments; "/" has a single empty one.
    """
    if not path:
        return []
    return path[1:].split(b"/")
