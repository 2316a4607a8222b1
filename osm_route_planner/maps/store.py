"""The map store: nodes, ways and the classified features of a map.

A store is built once from OSM XML with :py:func:`build_store` and never changes afterwards.
Every feature refers to nodes and ways by their index in the store.
"""

from logging import debug
from math import hypot
from typing import Dict, Iterator, List, NamedTuple, Sequence, Tuple, Union
from openlr import Coordinates
from shapely.geometry import LineString, MultiPolygon, Point, Polygon

from ..configuration import Config, DEFAULT_CONFIG
from ..error import MapParseError
from . import wgs84
from .osm import OsmDocument, OsmNode, OsmWay, read_osm
from .primitives import (
    Bounds, Building, Landuse, LanduseType, Leisure, Multipolygon, Node, Railway, Ring,
    Road, RoadType, Water, Way
)
from .rings import assemble_rings, is_closed
from .road_index import RoadNetworkIndex

#: Values of the `highway` tag and the road type they stand for
ROAD_TYPES = {
    "motorway": RoadType.MOTORWAY,
    "trunk": RoadType.TRUNK,
    "primary": RoadType.PRIMARY,
    "secondary": RoadType.SECONDARY,
    "tertiary": RoadType.TERTIARY,
    "residential": RoadType.RESIDENTIAL,
    "living_street": RoadType.RESIDENTIAL,
    "service": RoadType.SERVICE,
    "unclassified": RoadType.UNCLASSIFIED,
    "footway": RoadType.FOOTWAY,
    "bridleway": RoadType.FOOTWAY,
    "steps": RoadType.FOOTWAY,
    "path": RoadType.FOOTWAY,
    "pedestrian": RoadType.FOOTWAY,
}

#: Values of the `natural` tag that make an area a leisure area
LEISURE_NATURALS = {"wood", "tree_row", "scrub", "grassland"}

Area = Union[Multipolygon, Landuse]


def road_type(value: str) -> RoadType:
    "Returns the road type for a `highway` tag value"
    return ROAD_TYPES.get(value, RoadType.INVALID)


def landuse_type(value: str) -> LanduseType:
    "Returns the land use type for a `landuse` tag value"
    try:
        return LanduseType(value)
    except ValueError:
        return LanduseType.INVALID


def is_leisure(tags: Dict[str, str]) -> bool:
    return (
        "leisure" in tags
        or tags.get("natural") in LEISURE_NATURALS
        or tags.get("landcover") == "grass"
    )


def has_area_tags(tags: Dict[str, str]) -> bool:
    "Returns whether a way or relation with these tags describes at least one area"
    return (
        "building" in tags
        or is_leisure(tags)
        or tags.get("natural") == "water"
        or "landuse" in tags
    )


def make_areas(
        tags: Dict[str, str], outer: Tuple[Ring, ...], inner: Tuple[Ring, ...]
) -> Iterator[Tuple[str, Area]]:
    "Yields the name of the store collection and the area for every area kind the tags describe"
    if "building" in tags:
        yield ("buildings", Building(outer, inner))
    if is_leisure(tags):
        yield ("leisures", Leisure(outer, inner))
    if tags.get("natural") == "water":
        yield ("waters", Water(outer, inner))
    if "landuse" in tags:
        yield ("landuses", Landuse(outer, inner, landuse_type(tags["landuse"])))


def normalize_value(value: float, low: float, high: float) -> float:
    "Maps `value` from [low, high] into [0, 1]. A range without extent maps to 0."
    if high == low:
        return 0.0
    return (value - low) / (high - low)


class MapStore(NamedTuple):
    "The loaded map with all its features"
    nodes: Tuple[Node, ...]
    ways: Tuple[Way, ...]
    roads: Tuple[Road, ...]
    railways: Tuple[Railway, ...]
    buildings: Tuple[Building, ...]
    leisures: Tuple[Leisure, ...]
    waters: Tuple[Water, ...]
    landuses: Tuple[Landuse, ...]
    #: The WGS84 extent of the nodes, before normalization
    bounds: Bounds
    #: Meters per unit of normalized distance, the height of the map
    metric_scale: float
    #: Length of one normalized unit along x and along y, in units of `metric_scale`
    axis_weights: Tuple[float, float]
    road_index: RoadNetworkIndex

    def normalize(self, coordinates: Coordinates) -> Tuple[float, float]:
        "Returns the normalized (x, y) position of WGS84 coordinates"
        return (
            normalize_value(coordinates.lon, self.bounds.min.lon, self.bounds.max.lon),
            normalize_value(coordinates.lat, self.bounds.min.lat, self.bounds.max.lat),
        )

    def denormalize(self, node: Node) -> Coordinates:
        "Returns the WGS84 coordinates of a normalized node"
        (low, high) = self.bounds
        return Coordinates(
            low.lon + node.x * (high.lon - low.lon),
            low.lat + node.y * (high.lat - low.lat)
        )

    def segment_length(self, first: Node, second: Node) -> float:
        """Returns the distance between two nodes, in units of the metric scale.

        The normalized differences are weighted per axis, so multiplying the result by
        `metric_scale` gives meters on a map of any aspect ratio."""
        (x_weight, y_weight) = self.axis_weights
        return hypot((first.x - second.x) * x_weight, (first.y - second.y) * y_weight)

    def ring_coordinates(self, ring: Sequence[int]) -> List[Tuple[float, float]]:
        "Returns the normalized (x, y) positions of a node index sequence"
        return [(self.nodes[index].x, self.nodes[index].y) for index in ring]

    def way_geometry(self, way_index: int) -> Union[LineString, Point]:
        "Returns the shape of a way. A way consisting of one node is a point."
        coords = self.ring_coordinates(self.ways[way_index].nodes)
        if len(coords) == 1:
            return Point(coords[0])
        return LineString(coords)

    def area_geometry(self, area: Area) -> MultiPolygon:
        """Returns the shape of an area.

        Open rings and rings with less than three distinct nodes are left out. An inner ring
        becomes a hole of the first outer ring that contains it."""
        def usable(ring: Ring) -> bool:
            return is_closed(ring) and len(ring) >= 4

        shells = [Polygon(self.ring_coordinates(ring)) for ring in area.outer if usable(ring)]
        holes: List[List[List[Tuple[float, float]]]] = [[] for _ in shells]
        for ring in area.inner:
            if not usable(ring):
                continue
            hole = self.ring_coordinates(ring)
            for (position, shell) in enumerate(shells):
                if shell.contains(Polygon(hole)):
                    holes[position].append(hole)
                    break
            else:
                debug(f"Inner ring {ring} lies in no outer ring")
        return MultiPolygon([
            Polygon(shell.exterior.coords, shell_holes)
            for (shell, shell_holes) in zip(shells, holes)
        ])


def index_nodes(osm_nodes: Sequence[OsmNode]) -> Tuple[Dict[str, int], List[Coordinates]]:
    "Numbers the nodes densely in document order. A repeated id keeps its first position."
    node_ids: Dict[str, int] = {}
    coordinates: List[Coordinates] = []
    for osm_node in osm_nodes:
        if osm_node.osm_id in node_ids:
            debug(f"Skipping duplicate node {osm_node.osm_id}")
            continue
        node_ids[osm_node.osm_id] = len(coordinates)
        coordinates.append(osm_node.coordinates)
    return (node_ids, coordinates)


def resolve_way(osm_way: OsmWay, node_ids: Dict[str, int]) -> Way:
    "Translates the node references of a way into node indices, dropping unknown ones"
    indices = []
    for ref in osm_way.refs:
        if ref in node_ids:
            indices.append(node_ids[ref])
        else:
            debug(f"Way {osm_way.osm_id} references unknown node {ref}")
    return Way(tuple(indices))


def compute_bounds(coordinates: Sequence[Coordinates]) -> Bounds:
    "Returns the extent of a non-empty coordinate list"
    lons = [coord.lon for coord in coordinates]
    lats = [coord.lat for coord in coordinates]
    return Bounds(Coordinates(min(lons), min(lats)), Coordinates(max(lons), max(lats)))


def build_store(data: bytes, config: Config = DEFAULT_CONFIG) -> MapStore:
    """Builds the map store from OSM XML data.

    Malformed records are skipped, references to unknown nodes or ways are dropped and
    unknown road or land use values are classified as invalid. Coordinates are normalized
    into the unit square, and the road network index is built.

    Args:
        data:
            The content of an `.osm` file
        config:
            Decides which road types are part of the road network index
    Returns:
        The complete, read-only map store
    Raises:
        MapParseError:
            Raised if `data` is empty, no XML, or contains no usable node.
    """
    document: OsmDocument = read_osm(data)
    if not document.nodes:
        raise MapParseError("The map data contains no usable node")

    (node_ids, coordinates) = index_nodes(document.nodes)

    ways: List[Way] = []
    way_ids: Dict[str, int] = {}
    collections: Dict[str, list] = {
        "roads": [], "railways": [], "buildings": [], "leisures": [], "waters": [], "landuses": []
    }

    for osm_way in document.ways:
        way = resolve_way(osm_way, node_ids)
        if not way.nodes:
            debug(f"Skipping way {osm_way.osm_id} without known nodes")
            continue
        if osm_way.osm_id in way_ids:
            debug(f"Skipping duplicate way {osm_way.osm_id}")
            continue
        way_index = len(ways)
        way_ids[osm_way.osm_id] = way_index
        ways.append(way)

        tags = osm_way.tags
        if "highway" in tags:
            collections["roads"].append(Road(way_index, road_type(tags["highway"])))
        if "railway" in tags:
            collections["railways"].append(Railway(way_index))
        if has_area_tags(tags):
            outer = tuple(assemble_rings([way.nodes]))
            for (name, area) in make_areas(tags, outer, ()):
                collections[name].append(area)

    for relation in document.relations:
        if not has_area_tags(relation.tags):
            continue
        members = {"outer": [], "inner": []}
        for member in relation.members:
            if member.type != "way" or member.role not in members:
                continue
            if member.ref not in way_ids:
                debug(f"Relation {relation.osm_id} references unknown way {member.ref}")
                continue
            members[member.role].append(ways[way_ids[member.ref]].nodes)
        outer = tuple(assemble_rings(members["outer"]))
        inner = tuple(assemble_rings(members["inner"]))
        if not outer and not inner:
            debug(f"Relation {relation.osm_id} has no resolvable rings")
        for (name, area) in make_areas(relation.tags, outer, inner):
            collections[name].append(area)

    bounds = compute_bounds(coordinates)
    nodes = tuple(
        Node(
            normalize_value(coord.lon, bounds.min.lon, bounds.max.lon),
            normalize_value(coord.lat, bounds.min.lat, bounds.max.lat)
        )
        for coord in coordinates
    )
    road_index = RoadNetworkIndex(collections["roads"], ways, config.excluded_road_types)

    debug(
        f"Built map with {len(nodes)} nodes, {len(ways)} ways, {len(collections['roads'])} roads"
        f" and {len(collections['railways'])} railways"
    )
    return MapStore(
        nodes=nodes,
        ways=tuple(ways),
        roads=tuple(collections["roads"]),
        railways=tuple(collections["railways"]),
        buildings=tuple(collections["buildings"]),
        leisures=tuple(collections["leisures"]),
        waters=tuple(collections["waters"]),
        landuses=tuple(collections["landuses"]),
        bounds=bounds,
        metric_scale=wgs84.metric_scale(bounds),
        axis_weights=wgs84.axis_weights(bounds),
        road_index=road_index,
    )
