#!/usr/bin/env python3
"""
OpenStreetMap route planner package.
"""

from .configuration import Config, DEFAULT_CONFIG, load_config, save_config
from .error import MapParseError, NoRoadNodeError
from .maps import MapStore, build_store
from .routing import (
    find_path, find_closest_node, plan_route, shortest_path, Route, SearchGraph,
    PathNotFoundError, SearchBudgetExceededError
)
from .observer import SearchObserver, SimpleObserver

from ._version import (
    __title__,
    __description__,
    __version__,
    __author__,
    __license__,
)
