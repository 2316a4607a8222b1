"""
This module describes the map: reading OSM data into a read-only store of nodes,
ways and classified features, and the index of roads the route search runs on.
"""

from .primitives import (
    Node, Way, Ring, Road, RoadType, Railway, Multipolygon, Building, Leisure, Water,
    Landuse, LanduseType, Bounds
)
from .rings import assemble_rings, is_closed
from .road_index import RoadNetworkIndex
from .store import MapStore, build_store
