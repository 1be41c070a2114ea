"""Drop trailing query parameters that do not fit."""


def truncate_query(query: bytes, available_len: int) -> bytes | None:
    """Cut a query string back to its last whole parameter within available_len.

    The returned slice keeps the trailing "&" so the caller can append the
    ellipsis marker directly after it. Without any "&" before the cutoff only
    the leading "?" survives. Returns None when the query already fits.
    """
    if len(query) <= available_len:
        return None
    # "&" is ASCII, so a byte search never lands inside a multi-byte character
    amp = query.rfind(b"&", 0, max(available_len, 0))
    trunc_len = amp + 1 if amp >= 0 else 1
    return query[:trunc_len]
