"""
MCP coordinate repair server

Exposes the coordinate engine and the UTM projections as MCP tools for LLMs
or MCP clients. All math lives in the library modules; the tools only shape
inputs and outputs.
"""
import logging
from typing import Optional, Union

from mcp.server.fastmcp import FastMCP

from coordinate_config import load_settings
from coordinate_engine import process_coordinates as run_engine
from utm_converter import latlon_to_projected, utm_to_latlon as project_utm

settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("mcp-coordinate-server")

# Create the MCP server
mcp = FastMCP("Coordinate Repair")

RawCoordinate = Optional[Union[float, str]]


@mcp.tool()
def process_coordinates(x: RawCoordinate, y: RawCoordinate) -> dict:
    """
    Classify, repair and project a raw coordinate pair from a bulletin record.

    Parameters:
        x: first axis as written in the source (easting or longitude)
        y: second axis as written in the source (northing or latitude)
    Returns:
        dict with success, corrected, kind, was_corrected, geographic and error
    """
    result = run_engine(x, y)
    logger.info(f"processed ({x!r}, {y!r}) -> {result.kind.value}, success={result.success}")
    return result.to_dict()


@mcp.tool()
def utm_to_latlon(easting: float, northing: float, zone: int = 13) -> dict:
    """
    Convert a WGS84 UTM coordinate (northern hemisphere) to latitude/longitude.

    Parameters:
        easting: UTM X coordinate in metres
        northing: UTM Y coordinate in metres
        zone: UTM zone (13 or 14 for Aguascalientes, default 13)
    Returns:
        dict with latitude, longitude
    """
    latitude, longitude = project_utm(easting, northing, zone)
    return {
        "latitude": latitude,
        "longitude": longitude,
    }


@mcp.tool()
def latlon_to_utm(latitude: float, longitude: float, zone: Optional[int] = None) -> dict:
    """
    Convert latitude/longitude to a WGS84 UTM coordinate.

    Parameters:
        latitude: latitude in decimal degrees
        longitude: longitude in decimal degrees
        zone: UTM zone; derived from the longitude when omitted
    Returns:
        dict with easting, northing, zone
    """
    x, y, used_zone = latlon_to_projected(latitude, longitude, zone)
    if x is None or y is None:
        raise ValueError("coordinate conversion failed, check the input values")
    return {
        "easting": x,
        "northing": y,
        "zone": used_zone,
    }


# ASGI app so uvicorn can serve the tools over HTTP (SSE)
app = mcp.sse_app()

if __name__ == "__main__":
    mcp.run(transport=settings.mcp_transport)
