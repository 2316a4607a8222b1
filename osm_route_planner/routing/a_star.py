"""
Provides the shortest_path(graph, start, goal) -> Route function, which
finds a shortest path between two nodes of the road network.
"""
from heapq import heappush, heappop
from itertools import count
from logging import debug
from math import isinf
from time import monotonic
from typing import List, NamedTuple, Optional, TYPE_CHECKING

from ..configuration import Config, DEFAULT_CONFIG
from .graph import SearchGraph, SearchNode
from .route import Route
from .tools import heuristic, PathNotFoundError, SearchBudgetExceededError

if TYPE_CHECKING:
    from ..observer import SearchObserver


class Score(NamedTuple):
    """The score of a single item in the search priority queue.

    Items with equal `f` leave the queue in the order they entered it."""
    f: float
    order: int


class PQItem(NamedTuple):
    """A single item in the search priority queue"""
    score: Score
    node: int


def construct_final_path(graph: SearchGraph, goal: SearchNode) -> Route:
    "Follows the predecessors from `goal` back to the start and returns the route"
    nodes: List[SearchNode] = [goal]
    distance = 0.0
    current = goal
    while current.parent is not None:
        previous = graph[current.parent]
        distance += current.distance(previous)
        nodes.append(previous)
        current = previous
    nodes.reverse()
    return Route(
        tuple(node.index for node in nodes),
        tuple(node.point for node in nodes),
        distance,
        graph.store.metric_scale
    )


def shortest_path(
        graph: SearchGraph,
        start: int,
        goal: int,
        config: Config = DEFAULT_CONFIG,
        observer: Optional["SearchObserver"] = None
) -> Route:
    """
    Returns a shortest path through the road network between two nodes.

    Uses the `A*`_ algorithm for this. The search state of `graph` is reset first.

    .. _A*: https://en.wikipedia.org/wiki/A*_search_algorithm

    Args:
        graph:
            The search graph over the map
        start:
            Index of the node from which the path shall start
        goal:
            Index of the destination node of the path
        config:
            Provides the iteration and time budget of the search
        observer:
            Gets notified of every expanded node
    Returns:
        A shortest route from start to goal. If both are the same node, the route
        consists of this node only.
    Raises:
        PathNotFoundError:
            Raised if the goal is not reachable from the start.
        SearchBudgetExceededError:
            Raised if the search expanded more nodes than allowed, or took too long.
        IndexError:
            Raised if start or goal is no node of the graph.
    """
    for index in (start, goal):
        if not 0 <= index < len(graph):
            raise IndexError(f"Node {index} is not part of the map")

    graph.reset()
    goal_node = graph[goal]
    start_node = graph[start]
    start_node.g = 0.0
    start_node.h = heuristic(start_node, goal_node)

    max_iterations = config.max_iterations if config.max_iterations is not None else len(graph)
    deadline = None if config.timeout is None else monotonic() + config.timeout
    order = count()
    expanded = 0

    # The queue
    open_set = [PQItem(Score(start_node.g + start_node.h, next(order)), start)]

    # Keep trying while the queue is not empty
    while open_set:
        current = graph[heappop(open_set).node]

        # A node may be queued several times; only its best entry counts
        if current.visited:
            continue

        expanded += 1
        if expanded > max_iterations:
            raise SearchBudgetExceededError(f"Gave up after expanding {max_iterations} nodes")
        if deadline is not None and monotonic() > deadline:
            raise SearchBudgetExceededError(f"Gave up after {config.timeout} seconds")

        current.visited = True
        if observer is not None:
            observer.on_node_expanded(current)

        # Check if the goal node has been reached
        if current.index == goal:
            debug(f"Found path from {start} to {goal} after expanding {expanded} nodes")
            return construct_final_path(graph, current)

        # Add neighbors to the queue
        for neighbor_index in graph.find_neighbors(current):
            neighbor = graph[neighbor_index]
            if neighbor.visited:
                continue

            tentative_g = current.g + current.distance(neighbor)
            unseen = isinf(neighbor.h)
            if not unseen and tentative_g >= neighbor.g:
                continue

            neighbor.g = tentative_g
            if unseen:
                neighbor.h = heuristic(neighbor, goal_node)
            neighbor.parent = current.index
            heappush(open_set, PQItem(Score(neighbor.g + neighbor.h, next(order)), neighbor_index))

    raise PathNotFoundError(f"No path found from {start} to {goal}")
