"""Rebuild a URL from its (possibly reduced) parts."""


def assemble(
    scheme: bytes,
    host: bytes,
    parts: list[bytes],
    marker_index: int | None,
    query: bytes,
    query_truncated: bool,
    marker: bytes,
) -> bytes:
    """Join the parts back together, splicing in the marker where text was elided.

    Args:
        scheme: Scheme including "://", or empty.
        host: Host part, emitted verbatim.
        parts: Remaining path segments, each emitted with a leading "/".
        marker_index: Position among parts where removed segments were, if any.
        query: Full or truncated query string.
        query_truncated: Whether to append the marker after the query.
        marker: Encoded ellipsis marker.

    Returns:
        The assembled URL bytes. The total length is not re-checked here.
    """
    path_parts = list(parts)
    if marker_index is not None:
        path_parts.insert(marker_index, marker)

    chunks = [scheme, host]
    for part in path_parts:
        chunks.append(b"/")
        chunks.append(part)
    chunks.append(query)
    if query_truncated:
        chunks.append(marker)
    return b"".join(chunks)
