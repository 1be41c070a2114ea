"""Blunt truncation for URLs with nothing structural left to remove."""


def is_char_boundary(raw: bytes, index: int) -> bool:
    """Check whether index does not fall inside a multi-byte UTF-8 sequence."""
    if index <= 0 or index >= len(raw):
        return True
    return (raw[index] & 0xC0) != 0x80


def find_char_start(raw: bytes, index: int) -> int:
    """Walk back from index to the nearest character boundary."""
    index = min(max(index, 0), len(raw))
    while index > 0 and not is_char_boundary(raw, index):
        index -= 1
    return index


def fallback_truncate(raw: bytes, max_len: int, marker: bytes) -> bytes:
    """Cut raw at a character boundary before max_len and append the marker.

    One byte of the budget is reserved for the marker, which counts as a single
    character; wider markers may push the result a little over max_len.
    """
    trunc_index = find_char_start(raw, max_len - 1)
    return raw[:trunc_index] + marker
