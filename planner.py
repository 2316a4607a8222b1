"""
* This is a script to find a route on an OpenStreetMap extract
and report its length

    - Inputs:
        - an .osm file
        - start and end position, either normalized
          (x and y within [0, 1]) or as longitude / latitude
    - Outputs:
        - the route length in meters
        - the route's node positions with --points
"""

import argparse
import logging
import sys

from openlr import Coordinates

from osm_route_planner import (
    build_store, plan_route, load_config, DEFAULT_CONFIG, MapParseError, NoRoadNodeError
)

parser = argparse.ArgumentParser(
    description="Find the shortest route between two positions on a map"
)

parser.add_argument("map", type=str, help="path to an .osm file")
parser.add_argument("--start", type=float, nargs=2, required=True, metavar=("X", "Y"),
                    help="start position")
parser.add_argument("--end", type=float, nargs=2, required=True, metavar=("X", "Y"),
                    help="end position")
parser.add_argument("--lonlat", action="store_true",
                    help="positions are WGS84 longitude and latitude instead of normalized")
parser.add_argument("--config", type=str, help="path to a JSON config file")
parser.add_argument("--points", action="store_true", help="print the route's positions")
parser.add_argument("-v", "--verbose", action="store_true", help="print debug output")


def read_map(path):
    "Reads the raw map file"
    with open(path, "rb") as map_file:
        return map_file.read()


def main(args):
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = load_config(args.config) if args.config else DEFAULT_CONFIG
    print(f"Reading OpenStreetMap data from the following file: {args.map}")
    try:
        store = build_store(read_map(args.map), config)
    except (OSError, MapParseError) as err:
        print(f"Failed to read: {err}")
        return 1

    start, end = tuple(args.start), tuple(args.end)
    if args.lonlat:
        start = store.normalize(Coordinates(*start))
        end = store.normalize(Coordinates(*end))

    try:
        route = plan_route(store, start, end, config)
    except (ValueError, NoRoadNodeError) as err:
        print(err)
        return 1

    if route is None:
        print("No path found.")
        return 1

    print(f"Distance: {route.distance_meters} meters.")
    if args.points:
        for node in route.path:
            position = store.denormalize(node)
            print(f"{position.lon} {position.lat}")
    return 0


if __name__ == "__main__":
    sys.exit(main(parser.parse_args()))
