"Contains the abstract observer class for the route search"
from abc import abstractmethod

from ..routing.graph import SearchNode
from ..routing.route import Route


class SearchObserver:
    "Abstract class representing an observer to the route search"

    @abstractmethod
    def on_node_expanded(self, node: SearchNode):
        """Called by the search when it closes a node.

        At that point, the node's `g` value is the length of a shortest path to it."""

    @abstractmethod
    def on_route_success(self, start: int, goal: int, route: Route):
        "Called after a route between the start and the goal node was found"

    @abstractmethod
    def on_route_fail(self, start: int, goal: int):
        """Called after the search could not find a route between the start and the goal node,
        either because there is none or because the search exceeded its budget"""
