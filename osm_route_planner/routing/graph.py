"""The search graph: mutable per-node state for a single route search.

Search nodes live in an arena, addressed by the index of the map node they wrap.
Predecessor and neighbor relations are indices into that arena.
"""

from logging import debug
from math import hypot, inf, isfinite
from typing import List, Optional, Tuple
import numpy as np

from ..error import NoRoadNodeError
from ..maps import MapStore, Node


class SearchNode:
    "A map node together with its A* search state"

    __slots__ = ("index", "point", "weights", "g", "h", "visited", "parent", "neighbors")

    def __init__(self, index: int, point: Node, weights: Tuple[float, float] = (1.0, 1.0)):
        self.index = index
        self.point = point
        #: Per axis factors that make distances proportional to meters
        self.weights = weights
        self.reset()

    def __repr__(self):
        return f"SearchNode {self.index} at ({self.x}, {self.y}) with g={self.g}, h={self.h}"

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y

    def reset(self):
        "Forgets all search state"
        #: Cost of the best known path from the start
        self.g: float = 0.0
        #: Estimated cost to the goal; infinite until the node was seen by the search
        self.h: float = inf
        #: Closed nodes have their optimal `g` and are never expanded again
        self.visited: bool = False
        #: Index of the predecessor on the best known path
        self.parent: Optional[int] = None
        #: Indices of adjacent unvisited nodes, computed on first expansion
        self.neighbors: Optional[List[int]] = None

    def distance(self, other: "SearchNode") -> float:
        "Straight line distance to another node, in units of the map's metric scale"
        (x_weight, y_weight) = self.weights
        return hypot((self.x - other.x) * x_weight, (self.y - other.y) * y_weight)


class SearchGraph:
    """One search node per map node, plus neighbor discovery along roads.

    The store and its road index are only read. Run independent searches on separate
    graphs, or call :py:meth:`reset` in between."""

    def __init__(self, store: MapStore):
        self.store = store
        self.nodes = [
            SearchNode(index, point, store.axis_weights)
            for (index, point) in enumerate(store.nodes)
        ]

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> SearchNode:
        return self.nodes[index]

    def reset(self):
        "Resets the search state of every node"
        for node in self.nodes:
            node.reset()

    def find_neighbors(self, node: SearchNode) -> List[int]:
        """Returns the indices of the unvisited nodes adjacent to `node` on any road.

        The neighbors are computed on the first call and kept on the node."""
        if node.neighbors is not None:
            return node.neighbors
        neighbors: List[int] = []
        for road in self.store.road_index.roads_through(node.index):
            way_nodes = self.store.ways[road.way].nodes
            for (position, node_index) in enumerate(way_nodes):
                if node_index != node.index:
                    continue
                candidates = []
                if position > 0:
                    candidates.append(way_nodes[position - 1])
                if position + 1 < len(way_nodes):
                    candidates.append(way_nodes[position + 1])
                for candidate in candidates:
                    if candidate == node.index or candidate in neighbors:
                        continue
                    if not self.nodes[candidate].visited:
                        neighbors.append(candidate)
        node.neighbors = neighbors
        return neighbors

    def find_closest_node(self, x: float, y: float) -> SearchNode:
        "Returns the search node on the road network that is closest to (x, y)"
        return self.nodes[find_closest_node(self.store, x, y)]


def find_closest_node(store: MapStore, x: float, y: float) -> int:
    """Snaps a normalized position onto the road network.

    Args:
        store:
            The map
        x, y:
            The normalized position, usually within [0, 1]
    Returns:
        The index of the closest node that any road passes through. Of equally close
        nodes, the one with the lowest index is returned.
    Raises:
        ValueError:
            Raised if x or y is not a finite number.
        NoRoadNodeError:
            Raised if no node of the map lies on a road.
    """
    if not (isfinite(x) and isfinite(y)):
        raise ValueError(f"Cannot snap the position ({x}, {y}) onto the map")
    candidates = store.road_index.node_indices()
    if not candidates:
        raise NoRoadNodeError("The map has no road to snap to")
    positions = np.array([(store.nodes[index].x, store.nodes[index].y) for index in candidates])
    distances = np.hypot(positions[:, 0] - x, positions[:, 1] - y)
    # argmin returns the first of several minima
    closest = candidates[int(np.argmin(distances))]
    debug(f"Closest road node to ({x}, {y}) is {closest}")
    return closest
