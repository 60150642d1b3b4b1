import logging

from coordinate_config import (
    INVERTED_LATITUDE_MAGNITUDE,
    INVERTED_LONGITUDE_MAGNITUDE,
    LATLNG_BOUNDS,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    POTENTIAL_LATLNG_CEILING,
    POTENTIAL_UTM_CEILING,
    UTM13_EASTING_WINDOW,
    UTM13_NORTHING_WINDOW,
    UTM14_EASTING_WINDOW,
    UTM14_NORTHING_WINDOW,
)
from coordinate_types import CoordinateKind

logger = logging.getLogger(__name__)


def classify(x: float, y: float) -> CoordinateKind:
    """
    Guess what kind of coordinate a normalized (x, y) pair is.

    Rules are evaluated in order and the first match wins; the magnitude
    ranges overlap, so the order is part of the contract:

    1. zone 13 easting/northing shape        -> UTM13
    2. zone 14 easting/northing shape        -> UTM14
    3. |x| <= 180 and |y| <= 90              -> LATLNG (x is the longitude)
    4. northing first, easting second        -> UTM13_INVERTED
    5. latitude first, longitude second      -> LATLNG_INVERTED
    6. one UTM-shaped axis, one degree axis  -> MIXED
    7. rescalable magnitudes                 -> UTM_POTENTIAL / LATLNG_POTENTIAL
    8. anything else                         -> UNKNOWN
    """
    kind = _classify(x, y)
    logger.debug(f"classified ({x}, {y}) as {kind.value}")
    return kind


def _classify(x: float, y: float) -> CoordinateKind:
    utm_x = UTM13_EASTING_WINDOW.contains(x)
    utm_y = UTM13_NORTHING_WINDOW.contains(y)
    if utm_x and utm_y:
        return CoordinateKind.UTM13

    if UTM14_EASTING_WINDOW.contains(x) and UTM14_NORTHING_WINDOW.contains(y):
        return CoordinateKind.UTM14

    degrees_x = abs(x) <= MAX_LONGITUDE
    degrees_y = abs(y) <= MAX_LATITUDE
    if degrees_x and degrees_y:
        return CoordinateKind.LATLNG

    if UTM13_EASTING_WINDOW.contains(y) and UTM13_NORTHING_WINDOW.contains(x):
        return CoordinateKind.UTM13_INVERTED

    latitude_first = INVERTED_LATITUDE_MAGNITUDE.contains(abs(x))
    longitude_second = INVERTED_LONGITUDE_MAGNITUDE.contains(abs(y))
    in_region_swapped = LATLNG_BOUNDS.second.contains(x) and LATLNG_BOUNDS.first.contains(y)
    if (latitude_first and longitude_second) or in_region_swapped:
        return CoordinateKind.LATLNG_INVERTED

    if (utm_x and degrees_y) or (degrees_x and utm_y):
        return CoordinateKind.MIXED

    looks_like_utm = (x > 100000 or y > 1000000) and (
        x < POTENTIAL_UTM_CEILING and y < POTENTIAL_UTM_CEILING
    )
    # digits dropped from both axes, e.g. 774.51 / 2.43399
    looks_like_truncated_utm = 100 < x < 10000 and 1 < y < 100
    if looks_like_utm or looks_like_truncated_utm:
        return CoordinateKind.UTM_POTENTIAL

    if abs(x) < POTENTIAL_LATLNG_CEILING and abs(y) < POTENTIAL_LATLNG_CEILING:
        return CoordinateKind.LATLNG_POTENTIAL

    return CoordinateKind.UNKNOWN
