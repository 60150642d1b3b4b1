"""
Region constants and runtime settings for the coordinate engine.

The bounding boxes are the contract that defines a "valid" coordinate for
Aguascalientes, Mexico. Runtime settings come from the environment, with an
optional `.env` next to this module.
"""
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from coordinate_types import BoundingBox, CoordinateKind, Interval

# --- Validation boxes (closed intervals) ---
UTM13_BOUNDS = BoundingBox(
    first=Interval(719000.00, 810000.00),      # easting
    second=Interval(2392000.00, 2485000.00),   # northing
)
UTM14_BOUNDS = BoundingBox(
    first=Interval(200000.00, 300000.00),
    second=Interval(1000000.00, 2500000.00),
)
LATLNG_BOUNDS = BoundingBox(
    first=Interval(-103.0, -101.5),            # longitude
    second=Interval(21.50, 22.50),             # latitude
)

REGION_BOUNDS = {
    CoordinateKind.UTM13: UTM13_BOUNDS,
    CoordinateKind.UTM14: UTM14_BOUNDS,
    CoordinateKind.LATLNG: LATLNG_BOUNDS,
}

# --- Classifier magnitude windows ---
# Wider than the validation boxes: a pair can look like zone 13 and still
# need correction before it validates.
UTM13_EASTING_WINDOW = Interval(700000, 900000)
UTM13_NORTHING_WINDOW = Interval(2300000, 2500000)
UTM14_EASTING_WINDOW = Interval(200000, 300000)
UTM14_NORTHING_WINDOW = Interval(1000000, 2500000)
MAX_LONGITUDE = 180
MAX_LATITUDE = 90
INVERTED_LATITUDE_MAGNITUDE = Interval(20, 25)
INVERTED_LONGITUDE_MAGNITUDE = Interval(100, 105)
POTENTIAL_UTM_CEILING = 10_000_000_000_000
POTENTIAL_LATLNG_CEILING = 1000

# --- Digit correction offsets ---
# Tuned to bad records seen in the bulletin data; not a general rule.
NORTHING_OFFSETS = (2000000, 2100000, 2200000, 2300000, 2400000)
EASTING_OFFSET = 700000
TRUNCATED_NORTHING_OFFSET = 2430000
EXTRA_DIGIT_NORTHING_PREFIX = "24"

# --- Decimal-scale correction exponents ---
UTM_SCALE_EXPONENTS = tuple(range(1, 10))
LATLNG_SCALE_EXPONENTS = (1, 2)

# --- Runtime settings ---
script_dir = os.path.dirname(os.path.abspath(__file__))
dotenv_path = os.path.join(script_dir, ".env")
load_dotenv(dotenv_path)


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    batch_workers: int = 4
    mcp_transport: str = "stdio"


def load_settings() -> Settings:
    """Read settings from the environment, falling back to defaults on bad values."""
    log_level = os.getenv("COORDINATE_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = "INFO"
    try:
        batch_workers = max(1, int(os.getenv("COORDINATE_BATCH_WORKERS", "4")))
    except ValueError:
        batch_workers = 4
    transport = os.getenv("COORDINATE_MCP_TRANSPORT", "stdio").lower()
    if transport not in ("stdio", "sse"):
        transport = "stdio"
    return Settings(log_level=log_level, batch_workers=batch_workers, mcp_transport=transport)
