__title__ = "osm-route-planner"
__description__ = "Shortest routes on OpenStreetMap road networks"
__version__ = "0.1.0"
__author__ = "osm-route-planner contributors"
__license__ = "Apache License 2.0"
