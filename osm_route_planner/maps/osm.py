"""Reads OpenStreetMap XML into raw records.

Only the record model is handled here: nodes with coordinates, ways with node references
and tags, relations with way members and tags. Turning these records into a map store
happens in :py:mod:`osm_route_planner.maps.store`.

Records that cannot be read are skipped; only an unreadable document is an error.
"""

import xml.etree.ElementTree as ET
from logging import debug
from typing import Dict, List, NamedTuple, Optional, Tuple
from openlr import Coordinates

from ..error import MapParseError


class OsmNode(NamedTuple):
    "A <node> record"
    osm_id: str
    coordinates: Coordinates


class OsmWay(NamedTuple):
    "A <way> record"
    osm_id: str
    refs: Tuple[str, ...]
    tags: Dict[str, str]


class OsmMember(NamedTuple):
    "A <member> of a relation"
    type: str
    ref: str
    role: str


class OsmRelation(NamedTuple):
    "A <relation> record"
    osm_id: str
    members: Tuple[OsmMember, ...]
    tags: Dict[str, str]


class OsmDocument(NamedTuple):
    "All usable records of an OSM document"
    nodes: List[OsmNode]
    ways: List[OsmWay]
    relations: List[OsmRelation]


def read_tags(element: ET.Element) -> Dict[str, str]:
    "Returns the <tag> children of an element as dictionary. Tags without key are ignored."
    return {
        tag.get("k"): tag.get("v", "")
        for tag in element.findall("tag")
        if tag.get("k") is not None
    }


def read_node(element: ET.Element) -> Optional[OsmNode]:
    "Reads a <node> element, or returns None if it is malformed"
    osm_id = element.get("id")
    if osm_id is None:
        debug("Skipping node without id")
        return None
    try:
        lat = float(element.get("lat"))
        lon = float(element.get("lon"))
    except (TypeError, ValueError):
        debug(f"Skipping node {osm_id} with unreadable coordinates")
        return None
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        debug(f"Skipping node {osm_id} at impossible position lon={lon}, lat={lat}")
        return None
    return OsmNode(osm_id, Coordinates(lon, lat))


def read_way(element: ET.Element) -> Optional[OsmWay]:
    "Reads a <way> element, or returns None if it is malformed"
    osm_id = element.get("id")
    if osm_id is None:
        debug("Skipping way without id")
        return None
    refs = tuple(nd.get("ref") for nd in element.findall("nd") if nd.get("ref") is not None)
    return OsmWay(osm_id, refs, read_tags(element))


def read_relation(element: ET.Element) -> Optional[OsmRelation]:
    "Reads a <relation> element, or returns None if it is malformed"
    osm_id = element.get("id")
    if osm_id is None:
        debug("Skipping relation without id")
        return None
    members = tuple(
        OsmMember(member.get("type", ""), member.get("ref"), member.get("role", ""))
        for member in element.findall("member")
        if member.get("ref") is not None
    )
    return OsmRelation(osm_id, members, read_tags(element))


def read_osm(data: bytes) -> OsmDocument:
    """Parses OSM XML data.

    Args:
        data:
            The content of an `.osm` file
    Returns:
        The readable node, way and relation records, each in document order
    Raises:
        MapParseError:
            Raised if `data` is empty or is no XML document.
    """
    if not data or not data.strip():
        raise MapParseError("The map data is empty")
    try:
        root = ET.fromstring(data)
    except ET.ParseError as err:
        raise MapParseError(f"The map data is not valid XML: {err}") from err

    nodes = [node for node in map(read_node, root.findall("node")) if node is not None]
    ways = [way for way in map(read_way, root.findall("way")) if way is not None]
    relations = [
        relation
        for relation in map(read_relation, root.findall("relation"))
        if relation is not None
    ]
    debug(f"Read {len(nodes)} nodes, {len(ways)} ways and {len(relations)} relations")
    return OsmDocument(nodes, ways, relations)
