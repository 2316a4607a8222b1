"""Contains the value types the map store is made of.

Nodes
=====
A node is a position in the unit square. Longitude becomes `x`, latitude becomes `y`.
Nodes carry no id: a node is identified by its index in the store's node sequence.

Ways
====
A way is an ordered sequence of node indices. Roads, railways and areas refer to ways
(or, for areas, to rings assembled from ways) and add a classification.
"""

from enum import Enum
from typing import NamedTuple, Tuple
from openlr import Coordinates

#: A ring is a sequence of node indices. It is closed if its first and last entry match.
Ring = Tuple[int, ...]


class Node(NamedTuple):
    "A point of the map, in normalized coordinates"
    x: float
    y: float


class Way(NamedTuple):
    "An ordered list of node indices"
    nodes: Tuple[int, ...]


class RoadType(Enum):
    "Classification of a road, derived from its `highway` tag"
    INVALID = "invalid"
    UNCLASSIFIED = "unclassified"
    SERVICE = "service"
    RESIDENTIAL = "residential"
    TERTIARY = "tertiary"
    SECONDARY = "secondary"
    PRIMARY = "primary"
    TRUNK = "trunk"
    MOTORWAY = "motorway"
    FOOTWAY = "footway"


class Road(NamedTuple):
    "A way that vehicles or pedestrians can travel along"
    way: int
    type: RoadType


class Railway(NamedTuple):
    "A way carrying rail tracks. Railways are never routed on."
    way: int


class Multipolygon(NamedTuple):
    """An area bounded by outer rings, with holes cut out by inner rings

    Areas of different kinds never compare equal, even with the same rings."""
    outer: Tuple[Ring, ...]
    inner: Tuple[Ring, ...]

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__, tuple(self)))


class Building(Multipolygon):
    "A building footprint"
    __slots__ = ()


class Leisure(Multipolygon):
    "A park, wood, pitch or similar leisure area"
    __slots__ = ()


class Water(Multipolygon):
    "A lake, pond or other water body"
    __slots__ = ()


class LanduseType(Enum):
    "Classification of a land use zone, derived from its `landuse` tag"
    INVALID = "invalid"
    COMMERCIAL = "commercial"
    CONSTRUCTION = "construction"
    GRASS = "grass"
    FOREST = "forest"
    INDUSTRIAL = "industrial"
    RAILWAY = "railway"
    RESIDENTIAL = "residential"


class Landuse(NamedTuple):
    "A land use zone"
    outer: Tuple[Ring, ...]
    inner: Tuple[Ring, ...]
    type: LanduseType


class Bounds(NamedTuple):
    "The WGS84 extent of all loaded nodes"
    min: Coordinates
    max: Coordinates
