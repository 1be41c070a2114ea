"""Elide path segments from the middle outward."""

from dataclasses import dataclass


@dataclass
class PathReduction:
    """Path segments left after reduction and where the marker goes."""

    parts: list[bytes]
    marker_index: int
    new_len: int  # includes the "/" and marker


def _splice_index(count: int) -> int:
    # Just before the midpoint, so the first and last segments go last
    return max(count // 2 - 1, 0)


def reduce_path(
    parts: list[bytes], fixed_len: int, max_len: int, marker_width: int
) -> PathReduction | None:
    """Remove middle path segments until the URL fits within max_len bytes.

    Args:
        parts: Path segments as returned by split_path.
        fixed_len: Byte length of scheme and host, which are never removed.
        max_len: Byte budget for the whole URL.
        marker_width: Encoded byte width of the ellipsis marker.

    Returns:
        The reduced segments with a single marker position and the URL length
        including the "/" and marker, or None when no segment had to be
        removed. A reduction that removes every segment is still a reduction,
        with marker_index 0 and no parts left.
    """
    kept = list(parts)
    new_len = fixed_len + sum(len(part) + 1 for part in kept)
    # "/" plus the marker, paid once a segment has been replaced
    marker_cost = 1 + marker_width

    marker_index: int | None = None
    while kept and new_len > max_len:
        if marker_index is None:
            new_len += marker_cost
        marker_index = _splice_index(len(kept))
        removed = kept.pop(marker_index)
        new_len -= len(removed) + 1

    if marker_index is None:
        return None
    return PathReduction(parts=kept, marker_index=marker_index, new_len=new_len)
