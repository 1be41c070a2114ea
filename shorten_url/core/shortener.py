"""Shorten URLs for display by eliding path segments and query parameters.

To get a URL within a byte budget, the shortener takes out

- path segments, starting roughly in the middle: `/a/b/c/d/e/f` becomes
  `/a/…/e/f`;
- query parameters, starting at the end: `?a=b&c=d&e=f` becomes `?a=b&…`.

Path segments are removed before the query is touched, so `/a/…/e/f?…` is
preferred over `/a/…?a=b&…`. If neither helps, the URL is cut at a character
boundary and the marker appended.

Parsing is deliberately naive. Text that is not a URL produces odd output but
never an exception.
"""

import logging

from shorten_url.config import get_settings
from shorten_url.core.assembler import assemble
from shorten_url.core.fallback import fallback_truncate
from shorten_url.core.path_reducer import reduce_path
from shorten_url.core.query_truncator import truncate_query
from shorten_url.core.splitter import split_path, split_url
from shorten_url.models.result import ShortenOutcome, ShortenResult

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
# Lone surrogates survive a round trip instead of raising
ENCODING_ERRORS = "surrogatepass"


def _shorten(url: str, max_len: int) -> tuple[str, ShortenOutcome, int, int]:
    raw = url.encode(ENCODING, ENCODING_ERRORS)
    if len(raw) < max_len:
        return url, ShortenOutcome.UNCHANGED, len(raw), len(raw)

    marker = get_settings().ellipsis_bytes
    parts = split_url(raw)
    path_parts = split_path(parts.path)

    reduction = reduce_path(path_parts, parts.head_len, max_len, len(marker))
    if reduction is not None:
        new_len = reduction.new_len
    else:
        new_len = parts.head_len + len(parts.path)

    available_len = max(max_len - new_len, 0)
    truncated_query = truncate_query(parts.query, available_len)

    if reduction is None and truncated_query is None:
        if len(raw) > max_len:
            out = fallback_truncate(raw, max_len, marker)
            return (
                out.decode(ENCODING, ENCODING_ERRORS),
                ShortenOutcome.TRUNCATED,
                len(raw),
                len(out),
            )
        return url, ShortenOutcome.UNCHANGED, len(raw), len(raw)

    out = assemble(
        parts.scheme,
        parts.host,
        reduction.parts if reduction is not None else path_parts,
        reduction.marker_index if reduction is not None else None,
        truncated_query if truncated_query is not None else parts.query,
        truncated_query is not None,
        marker,
    )
    return out.decode(ENCODING, ENCODING_ERRORS), ShortenOutcome.SHORTENED, len(raw), len(out)


def _run(url: str, max_len: int | None) -> tuple[str, ShortenOutcome, int, int]:
    if max_len is None:
        max_len = get_settings().DEFAULT_MAX_LEN
    budget = max(max_len, 0)
    text, outcome, original_length, length = _shorten(url, budget)
    if outcome != ShortenOutcome.UNCHANGED:
        logger.debug(f"URL {outcome} from {original_length} to {length} bytes (max {budget})")
    return text, outcome, original_length, length


def shorten(url: str, max_len: int | None = None) -> str:
    """Shorten a URL to at most max_len bytes of UTF-8 for display.

    If the URL is already short enough the same object is returned, so callers
    can test `result is url` to see whether anything changed.

    Args:
        url: URL (or arbitrary text) to shorten.
        max_len: Byte budget; defaults to the configured DEFAULT_MAX_LEN.
            Negative values are treated as 0.

    Returns:
        The input itself, or a new string with elided parts replaced by the
        ellipsis marker.
    """
    text, _, _, _ = _run(url, max_len)
    return text


def shorten_detailed(url: str, max_len: int | None = None) -> ShortenResult:
    """Shorten a URL and report which strategy was used.

    Args:
        url: URL (or arbitrary text) to shorten.
        max_len: Byte budget; defaults to the configured DEFAULT_MAX_LEN.

    Returns:
        ShortenResult with the text, outcome and byte lengths.
    """
    text, outcome, original_length, length = _run(url, max_len)
    # text may carry lone surrogates, which str validation rejects
    return ShortenResult.model_construct(
        text=text, outcome=outcome, original_length=original_length, length=length
    )
