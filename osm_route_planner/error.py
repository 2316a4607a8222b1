class MapParseError(Exception):
    "The map data could not be read into a store"


class NoRoadNodeError(LookupError):
    "The map contains no node that is touched by a road"
