import logging
import math

import pyproj
from pyproj.exceptions import CRSError, ProjError

logger = logging.getLogger(__name__)

# --- WGS84 ellipsoid and UTM constants ---
SM_A = 6378137.0
SM_B = 6356752.314
UTM_SCALE_FACTOR = 0.9996
FALSE_EASTING = 500000.0

GEOGRAPHIC_CRS = "EPSG:4326"


# --- UTM zone from longitude ---
def get_utm_zone(longitude):
    return math.floor((longitude + 180) / 6) + 1


def _check_zone(zone):
    if not isinstance(zone, int) or isinstance(zone, bool) or not (1 <= zone <= 60):
        raise ValueError(f"UTM zone must be an integer between 1 and 60, got {zone!r}")


def central_meridian(zone):
    """Central meridian of a UTM zone, in radians."""
    return math.radians(-183.0 + zone * 6.0)


def footpoint_latitude(y):
    """
    Latitude (radians) whose meridian arc length equals `y` metres.

    Series expansion on the rectifying sphere, after Snyder, "Map Projections:
    A Working Manual", USGS 1987.
    """
    n = (SM_A - SM_B) / (SM_A + SM_B)
    alpha = ((SM_A + SM_B) / 2.0) * (1 + (n ** 2) / 4.0) + (n ** 4) / 64.0
    y_ = y / alpha

    beta = (3.0 * n / 2.0) + (-27.0 * (n ** 3) / 32.0) + (269.0 * (n ** 5) / 512.0)
    gamma = (21.0 * (n ** 2) / 16.0) + (-55.0 * (n ** 4) / 32.0)
    delta = (151.0 * (n ** 3) / 96.0) + (-417.0 * (n ** 5) / 128.0)
    epsilon = 1097.0 * (n ** 4) / 512.0

    return (
        y_
        + beta * math.sin(2.0 * y_)
        + gamma * math.sin(4.0 * y_)
        + delta * math.sin(6.0 * y_)
        + epsilon * math.sin(8.0 * y_)
    )


# --- Inverse Transverse Mercator: UTM (north) -> latitude/longitude ---
def utm_to_latlon(easting, northing, zone):
    """
    Project a northern-hemisphere WGS84 UTM coordinate to geographic degrees.

    Args:
        easting (float): easting in metres, false easting included.
        northing (float): northing in metres.
        zone (int): UTM zone, 1-60.

    Returns:
        tuple: (latitude, longitude) in degrees.
    """
    _check_zone(zone)

    x = (easting - FALSE_EASTING) / UTM_SCALE_FACTOR
    y = northing / UTM_SCALE_FACTOR
    lambda0 = central_meridian(zone)

    phif = footpoint_latitude(y)

    ep2 = (SM_A ** 2 - SM_B ** 2) / (SM_B ** 2)
    cf = math.cos(phif)
    nuf2 = ep2 * (cf ** 2)
    nf = (SM_A ** 2) / (SM_B * math.sqrt(1 + nuf2))

    tf = math.tan(phif)
    tf2 = tf * tf
    tf4 = tf2 * tf2

    # fractional coefficients: successive powers of 1/Nf over factorials
    nfpow = nf
    x1frac = 1.0 / (nfpow * cf)
    nfpow *= nf
    x2frac = tf / (2.0 * nfpow)
    nfpow *= nf
    x3frac = 1.0 / (6.0 * nfpow * cf)
    nfpow *= nf
    x4frac = tf / (24.0 * nfpow)
    nfpow *= nf
    x5frac = 1.0 / (120.0 * nfpow * cf)
    nfpow *= nf
    x6frac = tf / (720.0 * nfpow)
    nfpow *= nf
    x7frac = 1.0 / (5040.0 * nfpow * cf)
    nfpow *= nf
    x8frac = tf / (40320.0 * nfpow)

    x2poly = -1.0 - nuf2
    x3poly = -1.0 - 2 * tf2 - nuf2
    x4poly = 5.0 + 3.0 * tf2 + 6.0 * nuf2 - 6.0 * tf2 * nuf2 - 3.0 * (nuf2 * nuf2) - 9.0 * tf2 * (nuf2 * nuf2)
    x5poly = 5.0 + 28.0 * tf2 + 24.0 * tf4 + 6.0 * nuf2 + 8.0 * tf2 * nuf2
    x6poly = -61.0 - 90.0 * tf2 - 45.0 * tf4 - 107.0 * nuf2 + 162.0 * tf2 * nuf2
    x7poly = -61.0 - 662.0 * tf2 - 1320.0 * tf4 - 720.0 * (tf4 * tf2)
    x8poly = 1385.0 + 3633.0 * tf2 + 4095.0 * tf4 + 1575.0 * (tf4 * tf2)

    lat = (
        phif
        + x2frac * x2poly * (x ** 2)
        + x4frac * x4poly * (x ** 4)
        + x6frac * x6poly * (x ** 6)
        + x8frac * x8poly * (x ** 8)
    )
    lon = (
        lambda0
        + x1frac * x
        + x3frac * x3poly * (x ** 3)
        + x5frac * x5poly * (x ** 5)
        + x7frac * x7poly * (x ** 7)
    )

    return math.degrees(lat), math.degrees(lon)


# --- pyproj reference transforms (WGS84 UTM north zones) ---
def _utm_crs(zone):
    return pyproj.CRS.from_epsg(32600 + zone)


def latlon_to_projected(lat, lon, zone=None):
    """
    Project geographic degrees to WGS84 UTM with pyproj.

    The zone is derived from the longitude when not given.

    Returns:
        tuple: (easting, northing, zone), or (None, None, None) on failure.
    """
    try:
        if not (-90 <= lat <= 90):
            raise ValueError("latitude must be between -90 and 90 degrees")
        if not (-180 <= lon <= 180):
            raise ValueError("longitude must be between -180 and 180 degrees")
        if zone is None:
            zone = get_utm_zone(lon)
        _check_zone(zone)

        transformer = pyproj.Transformer.from_crs(GEOGRAPHIC_CRS, _utm_crs(zone), always_xy=True)
        x, y = transformer.transform(lon, lat)

        return x, y, zone

    except (ValueError, CRSError, ProjError) as e:
        logger.error(f"forward projection failed: {e}")
        return None, None, None


def projected_to_latlon(x, y, zone):
    """
    Inverse-project a WGS84 UTM coordinate with pyproj.

    Returns:
        tuple: (longitude, latitude), or (None, None) on failure.
    """
    try:
        _check_zone(zone)

        transformer = pyproj.Transformer.from_crs(_utm_crs(zone), GEOGRAPHIC_CRS, always_xy=True)
        lon, lat = transformer.transform(x, y)

        return lon, lat

    except (ValueError, CRSError, ProjError) as e:
        logger.error(f"inverse projection failed: {e}")
        return None, None
