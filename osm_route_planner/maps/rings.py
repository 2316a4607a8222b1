"""Stitches the member ways of an area into rings.

Member ways of a multipolygon are unordered and may be stored in either direction.
Consecutive ways share their end point, so rings are found by chaining ways whose
first or last node matches the open end of the ring built so far.
"""

from logging import debug
from typing import Iterable, List, Optional, Sequence

from .primitives import Ring


def is_closed(ring: Sequence[int]) -> bool:
    "Returns whether the ring ends where it starts"
    return len(ring) > 1 and ring[0] == ring[-1]


def take_extension(candidates: List[Ring], end: int) -> Optional[Ring]:
    """Removes and returns the first candidate that continues a ring ending at `end`.

    The returned path starts with `end`; a candidate matching with its last node is reversed."""
    for (position, path) in enumerate(candidates):
        if path[0] == end:
            return candidates.pop(position)
        if path[-1] == end:
            return tuple(reversed(candidates.pop(position)))
    return None


def assemble_rings(paths: Iterable[Sequence[int]]) -> List[Ring]:
    """Chains paths into rings.

    Args:
        paths:
            Node index sequences, in any order and direction
    Returns:
        The rings, in the order their first path was given. Closed rings repeat their
        first node at the end. A chain that cannot be closed is returned open.
    """
    candidates = []
    for path in paths:
        if len(path) < 2:
            debug(f"Dropping ring member {tuple(path)} with less than two nodes")
            continue
        candidates.append(tuple(path))

    rings = []
    while candidates:
        ring = list(candidates.pop(0))
        while not is_closed(ring):
            extension = take_extension(candidates, ring[-1])
            if extension is None:
                debug(f"Ring starting at node {ring[0]} cannot be closed, keeping it open")
                break
            ring.extend(extension[1:])
        rings.append(tuple(ring))
    return rings
