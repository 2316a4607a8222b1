"Contains a simple SearchObserver implementation"
from typing import NamedTuple, Optional
from .abstract import SearchObserver
from ..routing.graph import SearchNode
from ..routing.route import Route


class AttemptedRoute(NamedTuple):
    """An attempted route between two nodes"""
    start: int
    goal: int
    success: bool
    route: Optional[Route]


class SimpleObserver(SearchObserver):
    """A simple observer that collects the information and can be
    queried after the search is finished"""

    def __init__(self):
        self.expanded = []
        self.attempted_routes = []

    def on_node_expanded(self, node: SearchNode):
        self.expanded.append(node.index)

    def on_route_success(self, start: int, goal: int, route: Route):
        self.attempted_routes.append(AttemptedRoute(start, goal, True, route))

    def on_route_fail(self, start: int, goal: int):
        self.attempted_routes.append(AttemptedRoute(start, goal, False, None))
