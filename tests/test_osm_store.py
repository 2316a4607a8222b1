"""
Contains the unittests for reading OSM data into a map store"""

import unittest

from openlr import Coordinates

from osm_route_planner import build_store, Config, MapParseError
from osm_route_planner.maps import (
    Building, Landuse, LanduseType, Leisure, Node, Railway, RoadType, Water
)
from osm_route_planner.maps.osm import read_osm
from osm_route_planner.maps.store import landuse_type, road_type
from osm_route_planner.maps import wgs84

from .example_mapformat import (
    EXAMPLE_OSM, NODES, ROADS, DISCONNECTED_WAY, FOOTWAY_WAY, BUILDING_WAY, RAILWAY_WAY,
    LINE_OSM, LINE_NODES
)


class ReadOsmTest(unittest.TestCase):
    "Unit tests for the raw record reader"

    def test_empty_data(self):
        "Empty data is an input error"
        with self.assertRaises(MapParseError):
            read_osm(b"")
        with self.assertRaises(MapParseError):
            read_osm(b"  \n")

    def test_no_xml(self):
        "Data that is no XML is an input error"
        with self.assertRaises(MapParseError):
            read_osm(b"<osm><node id='1'")

    def test_broken_records_skipped(self):
        "Nodes with missing or impossible coordinates and ways without id are skipped"
        document = read_osm(EXAMPLE_OSM)
        node_ids = [node.osm_id for node in document.nodes]
        self.assertNotIn("1099", node_ids)
        self.assertNotIn("1098", node_ids)
        self.assertNotIn("1097", node_ids)
        # The duplicate is only removed by the store
        self.assertEqual(node_ids.count("1000"), 2)
        self.assertTrue(all(way.osm_id is not None for way in document.ways))
        self.assertEqual(len(document.relations), 3)

    def test_tags_and_members(self):
        "Tags and relation members are read"
        document = read_osm(EXAMPLE_OSM)
        self.assertEqual(document.ways[0].tags, {"highway": "primary"})
        self.assertEqual(document.ways[0].refs, ("1000", "1002"))
        water = document.relations[0]
        self.assertEqual(water.tags["natural"], "water")
        self.assertEqual([m.role for m in water.members], ["outer", "outer", "inner", ""])


class MapStoreTest(unittest.TestCase):
    "A few unit tests for building the map store from the example map"

    def setUp(self):
        self.store = build_store(EXAMPLE_OSM)

    def test_no_usable_nodes(self):
        "A document without a usable node is an input error"
        with self.assertRaises(MapParseError):
            build_store(b'<osm><way id="1"><nd ref="1"/></way></osm>')
        with self.assertRaises(MapParseError):
            build_store(b"")

    def test_node_count(self):
        "Broken and duplicate nodes are not part of the store"
        self.assertEqual(len(self.store.nodes), len(NODES))

    def test_normalized_range(self):
        "All nodes lie within the unit square"
        for node in self.store.nodes:
            self.assertTrue(0.0 <= node.x <= 1.0)
            self.assertTrue(0.0 <= node.y <= 1.0)

    def test_normalized_extremes(self):
        "The nodes at the border of the map are on the border of the unit square"
        nodes = self.store.nodes
        self.assertEqual(nodes[0].x, 0.0)
        self.assertEqual(nodes[13].x, 1.0)
        self.assertEqual(nodes[5].y, 0.0)
        self.assertEqual(nodes[6].y, 1.0)
        self.assertEqual(nodes[9].y, 1.0)

    def test_bounds(self):
        "The duplicate node far outside does not widen the map"
        self.assertEqual(self.store.bounds.min, Coordinates(13.41, 52.52))
        self.assertEqual(self.store.bounds.max, Coordinates(13.429, 52.53))

    def test_metric_scale(self):
        "The metric scale is the height of the map in meters"
        south = Coordinates(13.42, 52.52)
        north = Coordinates(13.42, 52.53)
        self.assertAlmostEqual(self.store.metric_scale, wgs84.distance(south, north), delta=0.5)
        self.assertAlmostEqual(self.store.metric_scale, 1113, delta=5)

    def test_axis_weights(self):
        "The map is wider than high, so a unit along x is longer"
        (width, height) = wgs84.extent(self.store.bounds)
        (x_weight, y_weight) = self.store.axis_weights
        self.assertAlmostEqual(width, 1290, delta=20)
        self.assertAlmostEqual(x_weight, width / height)
        self.assertEqual(y_weight, 1.0)

    def test_segment_length(self):
        "Segments along either axis are measured in the same unit"
        (width, _) = wgs84.extent(self.store.bounds)
        self.assertAlmostEqual(self.store.segment_length(Node(0.0, 0.0), Node(0.0, 1.0)), 1.0)
        across = self.store.segment_length(Node(0.0, 0.0), Node(1.0, 0.0))
        self.assertAlmostEqual(across * self.store.metric_scale, width)

    def test_normalize_denormalize(self):
        "Converting a node back and forth gives its original position"
        node = self.store.nodes[7]
        position = self.store.denormalize(node)
        self.assertAlmostEqual(position.lon, NODES[7][0])
        self.assertAlmostEqual(position.lat, NODES[7][1])
        (x, y) = self.store.normalize(position)
        self.assertAlmostEqual(x, node.x)
        self.assertAlmostEqual(y, node.y)

    def test_roads(self):
        "Every highway becomes a road; unknown values are invalid"
        roads = self.store.roads
        self.assertEqual(len(roads), len(ROADS) + 2)
        for (road, (_, _, highway)) in zip(roads, ROADS):
            self.assertEqual(road.type, RoadType(highway))
        self.assertEqual(roads[-2].way, DISCONNECTED_WAY)
        self.assertEqual(roads[-2].type, RoadType.INVALID)
        self.assertEqual(roads[-1].way, FOOTWAY_WAY)
        self.assertEqual(roads[-1].type, RoadType.FOOTWAY)

    def test_unknown_reference_dropped(self):
        "A way keeps its known nodes only"
        self.assertEqual(self.store.ways[FOOTWAY_WAY].nodes, (12, 13))

    def test_way_count(self):
        "Ways without id or without known nodes are dropped"
        self.assertEqual(len(self.store.ways), 26)

    def test_railways(self):
        "Railways are collected"
        self.assertSequenceEqual(self.store.railways, [Railway(RAILWAY_WAY)])

    def test_building_way(self):
        "A closed building way is a building with one outer ring"
        building = self.store.buildings[0]
        self.assertIsInstance(building, Building)
        self.assertEqual(building.outer, ((16, 17, 18, 19, 16),))
        self.assertEqual(building.inner, ())
        self.assertEqual(self.store.ways[BUILDING_WAY].nodes, (16, 17, 18, 19, 16))

    def test_area_kinds_differ(self):
        "Areas of different kinds with the same rings are not equal"
        rings = (((16, 17, 18, 16),), ())
        self.assertNotEqual(Building(*rings), Water(*rings))
        self.assertFalse(Building(*rings) == Leisure(*rings))
        self.assertEqual(Building(*rings), Building(*rings))
        self.assertEqual(len({Building(*rings), Water(*rings), Building(*rings)}), 2)

    def test_unresolvable_relation(self):
        "A relation without known members is an area without rings"
        self.assertEqual(len(self.store.buildings), 2)
        self.assertEqual(self.store.buildings[1], Building((), ()))

    def test_water_relation(self):
        "Outer ways are stitched into one ring, the inner way is a hole"
        self.assertEqual(len(self.store.waters), 1)
        water = self.store.waters[0]
        self.assertIsInstance(water, Water)
        self.assertEqual(water.outer, ((20, 21, 22, 23, 20),))
        self.assertEqual(water.inner, ((24, 25, 26, 24),))

    def test_landuse(self):
        "Unknown land use values are kept as invalid"
        self.assertSequenceEqual(
            self.store.landuses, [Landuse(((16, 17, 18, 16),), (), LanduseType.INVALID)]
        )

    def test_leisure(self):
        "Parks are leisure areas"
        self.assertEqual(len(self.store.leisures), 1)
        self.assertIsInstance(self.store.leisures[0], Leisure)
        self.assertEqual(self.store.leisures[0].outer, ((16, 18, 19, 16),))

    def test_classification_values(self):
        "Tag values map onto their classification"
        self.assertEqual(road_type("living_street"), RoadType.RESIDENTIAL)
        self.assertEqual(road_type("steps"), RoadType.FOOTWAY)
        self.assertEqual(road_type("cycleway"), RoadType.INVALID)
        self.assertEqual(landuse_type("forest"), LanduseType.FOREST)
        self.assertEqual(landuse_type("farmland"), LanduseType.INVALID)

    def test_way_geometry(self):
        "The shape of a two node way is a line between them"
        geometry = self.store.way_geometry(0)
        start, end = self.store.nodes[0], self.store.nodes[2]
        self.assertSequenceEqual(list(geometry.coords), [(start.x, start.y), (end.x, end.y)])

    def test_area_geometry(self):
        "The lake has a hole, an area without rings has no shape"
        lake = self.store.area_geometry(self.store.waters[0])
        self.assertEqual(len(lake.geoms), 1)
        self.assertEqual(len(lake.geoms[0].interiors), 1)
        self.assertGreater(lake.area, 0.0)
        self.assertTrue(self.store.area_geometry(self.store.buildings[1]).is_empty)

    def test_road_index_attached(self):
        "The store carries the index of its roads"
        self.assertIn(2, self.store.road_index)
        self.assertNotIn(16, self.store.road_index)

    def test_excluded_road_types(self):
        "Excluded road types stay in the store but leave the road index"
        store = build_store(EXAMPLE_OSM, Config(excluded_road_types=frozenset({"footway"})))
        self.assertEqual(len(store.roads), len(self.store.roads))
        self.assertEqual(len(store.road_index.roads_through(12)), 1)
        self.assertEqual(len(self.store.road_index.roads_through(12)), 2)


class LineMapTest(unittest.TestCase):
    "Tests the normalization of a map without latitude extent"

    def setUp(self):
        self.store = build_store(LINE_OSM)

    def test_flat_axis(self):
        "An axis without extent maps to zero"
        self.assertTrue(all(node.y == 0.0 for node in self.store.nodes))
        self.assertEqual([node.x for node in self.store.nodes][0], 0.0)
        self.assertEqual([node.x for node in self.store.nodes][2], 1.0)
        self.assertAlmostEqual(self.store.nodes[1].x, 0.5)

    def test_metric_scale(self):
        "Without latitude extent, the scale is the length of the line"
        first = Coordinates(*LINE_NODES[0])
        last = Coordinates(*LINE_NODES[2])
        self.assertAlmostEqual(self.store.metric_scale, wgs84.distance(first, last))
        self.assertEqual(self.store.axis_weights, (1.0, 0.0))
