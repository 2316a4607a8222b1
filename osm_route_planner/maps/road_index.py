"Contains the index from nodes to the roads passing through them"

from collections.abc import Mapping
from logging import debug
from typing import AbstractSet, Dict, Iterator, List, Sequence, Tuple

from .primitives import Road, Way


class RoadNetworkIndex(Mapping):
    """Maps a node index to every road whose way visits the node.

    The index is computed once on construction and cannot be changed afterwards.
    Nodes that no road touches are not contained; use :py:meth:`roads_through`
    to look them up without a `KeyError`."""

    def __init__(
            self,
            roads: Sequence[Road],
            ways: Sequence[Way],
            excluded_road_types: AbstractSet[str] = frozenset()
    ):
        index: Dict[int, List[Road]] = {}
        for road in roads:
            if road.type.value in excluded_road_types:
                continue
            for node_index in ways[road.way].nodes:
                entry = index.setdefault(node_index, [])
                # A closed way visits its first node twice
                if road not in entry:
                    entry.append(road)
        self._index: Dict[int, Tuple[Road, ...]] = {
            node_index: tuple(entry) for (node_index, entry) in index.items()
        }
        debug(f"Indexed {len(self._index)} nodes on the road network")

    def __getitem__(self, node_index: int) -> Tuple[Road, ...]:
        return self._index[node_index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self):
        return f"RoadNetworkIndex with {len(self)} nodes"

    def roads_through(self, node_index: int) -> Tuple[Road, ...]:
        "Returns the roads passing through the node, which is empty for an off-road node"
        return self._index.get(node_index, ())

    def node_indices(self) -> List[int]:
        "Returns the indices of all nodes on the road network, in ascending order"
        return sorted(self._index)
