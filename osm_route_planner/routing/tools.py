"Helper functions for A*"

from .graph import SearchNode


class PathNotFoundError(Exception):
    "No path was found through the road network"


class SearchBudgetExceededError(PathNotFoundError):
    "The search gave up after exceeding its iteration or time budget"


def heuristic(current: SearchNode, target: SearchNode) -> float:
    """Estimated cost from current to target.

    We use the straight line distance in units of the metric scale here. It never
    overestimates, since every road segment costs its straight line length in the same units."""
    return current.distance(target)
