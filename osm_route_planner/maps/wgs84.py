"Some geo coordinates related tools"
from typing import Tuple
from geographiclib.geodesic import Geodesic
from openlr import Coordinates

from .primitives import Bounds


def distance(point_a: Coordinates, point_b: Coordinates) -> float:
    "Returns the distance of two WGS84 coordinates on our planet, in meters"
    geod = Geodesic.WGS84
    (lon1, lat1) = point_a.lon, point_a.lat
    (lon2, lat2) = point_b.lon, point_b.lat
    line = geod.Inverse(lat1, lon1, lat2, lon2, Geodesic.DISTANCE)
    # According to https://geographiclib.sourceforge.io/1.50/python/, the distance between
    # point 1 and 2 is stored in the attribute `s12`.
    return line["s12"]


def midpoint(bounds: Bounds) -> Coordinates:
    "Returns the center of the bounding box in degrees"
    return Coordinates(
        (bounds.min.lon + bounds.max.lon) / 2,
        (bounds.min.lat + bounds.max.lat) / 2
    )


def extent(bounds: Bounds) -> Tuple[float, float]:
    """Returns the (width, height) of the bounding box in meters.

    The width is measured along the mean latitude, which shrinks a degree of
    longitude by the cosine of that latitude."""
    center = midpoint(bounds)
    width = distance(
        Coordinates(bounds.min.lon, center.lat), Coordinates(bounds.max.lon, center.lat)
    )
    height = distance(
        Coordinates(center.lon, bounds.min.lat), Coordinates(center.lon, bounds.max.lat)
    )
    return (width, height)


def metric_scale(bounds: Bounds) -> float:
    """Returns the length in meters that one unit of the normalized map stands for.

    This is the height of the bounding box, since the normalized latitude axis spans it.
    A map without latitude extent falls back to its width, a map without any extent
    has a scale of 1."""
    (width, height) = extent(bounds)
    if height > 0.0:
        return height
    if width > 0.0:
        return width
    return 1.0


def axis_weights(bounds: Bounds) -> Tuple[float, float]:
    """Returns how long one normalized unit along x and along y is, in units of the metric scale.

    Longitude and latitude are normalized independently, so the axes of a map that is
    not square have different lengths. Weighting the normalized differences by these
    factors before measuring makes distances proportional to meters."""
    (width, height) = extent(bounds)
    scale = metric_scale(bounds)
    return (width / scale, height / scale)
