"Contains the configuration object that can be passed to the route planner, as well as default values"
from io import TextIOBase
from json import loads, dumps
from typing import NamedTuple, FrozenSet, Optional, Union


class Config(NamedTuple):
    """A config object that provides all settings that influence map loading and routing

    Customize the values where the default won't fit you:

        >>> myconfig = Config(timeout=5.0, excluded_road_types=frozenset({"footway"}))
    """

    #: Upper bound for the number of nodes the A* search may expand.
    #:
    #: `None` means the number of nodes in the map. A search that hits the bound
    #: reports that no path was found.
    max_iterations: Optional[int] = None
    #: Timeout in seconds for a single route search. `None` disables the timeout.
    timeout: Optional[float] = 60.0
    #: Road types (by value, e.g. "footway") that are left out of the road network index.
    #:
    #: Excluded roads are still part of the map store, but no route runs along them.
    excluded_road_types: FrozenSet[str] = frozenset()


DEFAULT_CONFIG = Config()


def load_config(source: Union[str, TextIOBase, dict]) -> Config:
    """Load config from a source

    Args:
        source:
            Either an open text file containing a JSON dict, or the path to it, or a dictionary
    Returns:
        The read Config object. Keys missing from the source keep their default value.
    """
    opened_source = source
    if isinstance(opened_source, str):
        with open(source, "r") as filepointer:
            opened_source = loads(filepointer.read())
    elif isinstance(opened_source, TextIOBase):
        opened_source = loads(opened_source.read())
    if not isinstance(opened_source, dict):
        raise TypeError("Surprising type")
    unknown = set(opened_source) - set(Config._fields)
    if unknown:
        raise ValueError(f"Unknown config options: {sorted(unknown)}")
    values = dict(opened_source)
    if "excluded_road_types" in values:
        values["excluded_road_types"] = frozenset(values["excluded_road_types"])
    return DEFAULT_CONFIG._replace(**values)


NoneType: object = type(None)


def save_config(config: Config, dest: Union[str, TextIOBase, NoneType] = None) -> Optional[dict]:
    """Saves a config to a file or a dictionary

    Args:
        config:
            The config.
        dest:
            Either a path, or an already write-opened text file, or nothing.
    Returns:
        If no destination was given, returns the config as dictionary"""
    if dest is None:
        result = dict(config._asdict())
        result["excluded_road_types"] = sorted(config.excluded_road_types)
        return result
    if isinstance(dest, str):
        with open(dest, "w") as filepointer:
            # Call the TextIOBase code path
            save_config(config, filepointer)
    elif isinstance(dest, TextIOBase):
        dest.write(dumps(save_config(config)))
    else:
        raise TypeError("`dest` has to be a valid destination")
