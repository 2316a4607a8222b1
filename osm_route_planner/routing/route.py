"Defines the result of a route search"

from typing import List, NamedTuple, Tuple, Union
from shapely.geometry import LineString, Point

from ..maps import Node


class Route(NamedTuple):
    "A path through the road network, from the start node to the goal node"
    #: Indices of the visited map nodes, start first
    nodes: Tuple[int, ...]
    #: The visited map nodes, start first
    path: Tuple[Node, ...]
    #: Length of the path in units of `metric_scale`
    distance: float
    #: Meters per unit of normalized distance, taken from the map store
    metric_scale: float

    @property
    def distance_meters(self) -> float:
        "Length of the path in meters"
        return self.distance * self.metric_scale

    def coordinates(self) -> List[Tuple[float, float]]:
        "Returns the normalized (x, y) position of every node on the path"
        return [(node.x, node.y) for node in self.path]

    @property
    def geometry(self) -> Union[LineString, Point]:
        "Returns the shape of the route. A route from a node to itself is a point."
        coords = self.coordinates()
        if len(coords) == 1:
            return Point(coords[0])
        return LineString(coords)
