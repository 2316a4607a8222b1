"""Route search on the road network of a map store.

Provides find_path(store, start, goal), which returns the shortest route between two
nodes or None, and plan_route(store, start_xy, goal_xy), which first snaps arbitrary
positions onto the road network.
"""

from logging import debug
from typing import Optional, Tuple, TYPE_CHECKING

from ..configuration import Config, DEFAULT_CONFIG
from ..maps import MapStore
from .a_star import shortest_path
from .graph import SearchGraph, find_closest_node
from .route import Route
from .tools import PathNotFoundError, SearchBudgetExceededError

if TYPE_CHECKING:
    from ..observer import SearchObserver


def find_path(
        store: MapStore,
        start: int,
        goal: int,
        config: Config = DEFAULT_CONFIG,
        observer: Optional["SearchObserver"] = None
) -> Optional[Route]:
    """Returns a shortest route between two nodes, or None if there is none.

    Every call searches on a fresh search graph, so calls are independent of each other.

    Args:
        store:
            The map
        start:
            Index of the node the route starts at
        goal:
            Index of the node the route ends at
        config:
            Provides the budget of the search
        observer:
            An observer that collects information when events of interest happen in the search
    Returns:
        The route, or None if the goal cannot be reached from the start within the budget.
    """
    graph = SearchGraph(store)
    try:
        route = shortest_path(graph, start, goal, config, observer)
    except PathNotFoundError as err:
        debug(f"No path between {start} and {goal}: {err}")
        if observer is not None:
            observer.on_route_fail(start, goal)
        return None
    if observer is not None:
        observer.on_route_success(start, goal, route)
    return route


def plan_route(
        store: MapStore,
        start_xy: Tuple[float, float],
        goal_xy: Tuple[float, float],
        config: Config = DEFAULT_CONFIG,
        observer: Optional["SearchObserver"] = None
) -> Optional[Route]:
    """Returns a shortest route between the road nodes closest to two normalized positions.

    Raises:
        ValueError:
            Raised if a position is not finite.
        NoRoadNodeError:
            Raised if the map has no road.
    """
    start = find_closest_node(store, *start_xy)
    goal = find_closest_node(store, *goal_xy)
    return find_path(store, start, goal, config, observer)
