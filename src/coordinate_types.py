"""
Data model shared by the coordinate engine.

Every value here is created fresh per call and frozen after construction.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class CoordinateKind(str, Enum):
    UTM13 = "utm13"
    UTM14 = "utm14"
    LATLNG = "latlng"
    UTM13_INVERTED = "utm13_inverted"
    LATLNG_INVERTED = "latlng_inverted"
    MIXED = "mixed"
    UTM_POTENTIAL = "utm_potential"
    LATLNG_POTENTIAL = "latlng_potential"
    INVALID = "invalid"
    UNKNOWN = "unknown"

    @property
    def zone(self) -> Optional[int]:
        """UTM zone number for projected kinds, None otherwise."""
        return _ZONES.get(self)

    @property
    def is_inverted(self) -> bool:
        return self in (CoordinateKind.UTM13_INVERTED, CoordinateKind.LATLNG_INVERTED)

    @property
    def is_terminal_failure(self) -> bool:
        return self in (CoordinateKind.INVALID, CoordinateKind.UNKNOWN)


_ZONES = {
    CoordinateKind.UTM13: 13,
    CoordinateKind.UTM14: 14,
}

_BASE_KINDS = {
    CoordinateKind.UTM13: CoordinateKind.UTM13,
    CoordinateKind.UTM13_INVERTED: CoordinateKind.UTM13,
    CoordinateKind.UTM_POTENTIAL: CoordinateKind.UTM13,
    CoordinateKind.UTM14: CoordinateKind.UTM14,
    CoordinateKind.LATLNG: CoordinateKind.LATLNG,
    CoordinateKind.LATLNG_INVERTED: CoordinateKind.LATLNG,
    CoordinateKind.LATLNG_POTENTIAL: CoordinateKind.LATLNG,
}


def base_kind(kind: CoordinateKind) -> Optional[CoordinateKind]:
    """
    Kind whose bounding box validates `kind`.

    Inverted and potential variants map onto UTM13 or LATLNG; MIXED, INVALID
    and UNKNOWN have no box of their own and map to None.
    """
    return _BASE_KINDS.get(kind)


@dataclass(frozen=True)
class Interval:
    min: float
    max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def to_dict(self) -> Dict[str, float]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class BoundingBox:
    """Closed interval per axis: first is x / easting / longitude, second is y / northing / latitude."""

    first: Interval
    second: Interval

    def contains(self, x: float, y: float) -> bool:
        return self.first.contains(x) and self.second.contains(y)

    def to_dict(self) -> Dict[str, Any]:
        return {"first": self.first.to_dict(), "second": self.second.to_dict()}


@dataclass(frozen=True)
class NormalizedPair:
    x: Optional[float]
    y: Optional[float]

    @property
    def complete(self) -> bool:
        return self.x is not None and self.y is not None

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class CoordinatePair:
    x: float
    y: float

    def swapped(self) -> "CoordinatePair":
        return CoordinatePair(self.y, self.x)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class AxisChecks:
    first_in_range: bool
    second_in_range: bool

    def to_dict(self) -> Dict[str, bool]:
        return {"first_in_range": self.first_in_range, "second_in_range": self.second_in_range}


@dataclass(frozen=True)
class ValidationOutcome:
    valid: bool
    axis_checks: AxisChecks
    bounds_used: Optional[BoundingBox]
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "axis_checks": self.axis_checks.to_dict(),
            "bounds_used": None if self.bounds_used is None else self.bounds_used.to_dict(),
            "reason": self.reason,
        }


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def to_dict(self) -> Dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class ProcessResult:
    """
    Single output of `coordinate_engine.process_coordinates`.

    `identified` is what the classifier proposed, `kind` is what the pair
    resolved to. For UTM kinds `corrected` stays in (easting, northing) metres
    and `geographic` carries the projected degrees; for LATLNG `geographic`
    is `corrected` read as (longitude, latitude).
    """

    success: bool
    original: Tuple[Any, Any]
    normalized: NormalizedPair
    corrected: CoordinatePair
    kind: CoordinateKind
    identified: CoordinateKind
    was_corrected: bool
    validation: ValidationOutcome
    corrections: Tuple[str, ...] = ()
    geographic: Optional[GeoPoint] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "original": {"x": _jsonable(self.original[0]), "y": _jsonable(self.original[1])},
            "normalized": self.normalized.to_dict(),
            "corrected": self.corrected.to_dict(),
            "kind": self.kind.value,
            "identified": self.identified.value,
            "was_corrected": self.was_corrected,
            "corrections": list(self.corrections),
            "validation": self.validation.to_dict(),
            "geographic": None if self.geographic is None else self.geographic.to_dict(),
            "error": self.error,
        }


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return str(value)
