"""
Single entry point for turning two raw coordinate values into a usable location.

    normalize -> classify -> resolve inversion -> validate -> correct -> project

Every call is a pure function of its inputs and the region constants in
`coordinate_config`; failures come back as data on the result, never as
exceptions.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Optional, Tuple

from coordinate_classifier import classify
from coordinate_config import load_settings
from coordinate_corrector import CORRECTION_LADDER, run_corrections
from coordinate_normalizer import normalize_pair
from coordinate_ranges import is_valid
from coordinate_types import (
    AxisChecks,
    CoordinateKind,
    CoordinatePair,
    GeoPoint,
    ProcessResult,
    ValidationOutcome,
    base_kind,
)
from utm_converter import utm_to_latlon

logger = logging.getLogger(__name__)

NORMALIZATION_ERROR = "could not normalize coordinates"
CLASSIFICATION_ERROR = "could not identify coordinate type"
MIXED_ERROR = "coordinates mix projected and geographic magnitudes"
OUT_OF_RANGE_ERROR = "coordinates out of range after corrections"


def _no_bounds(reason: str) -> ValidationOutcome:
    return ValidationOutcome(False, AxisChecks(False, False), None, reason)


def _resolve_target(pair: CoordinatePair, identified: CoordinateKind) -> CoordinateKind:
    """Kind to validate against; MIXED only resolves if the pair already fits a box."""
    if identified is CoordinateKind.MIXED:
        for candidate in (CoordinateKind.UTM13, CoordinateKind.LATLNG):
            if is_valid(pair.x, pair.y, candidate):
                return candidate
        return CoordinateKind.MIXED
    return base_kind(identified)


def _geographic(pair: CoordinatePair, kind: CoordinateKind) -> GeoPoint:
    if kind is CoordinateKind.LATLNG:
        return GeoPoint(latitude=pair.y, longitude=pair.x)
    latitude, longitude = utm_to_latlon(pair.x, pair.y, kind.zone)
    return GeoPoint(latitude=latitude, longitude=longitude)


def process_coordinates(x: Any, y: Any, kind: Optional[CoordinateKind] = None) -> ProcessResult:
    """
    Classify, repair and (for UTM) project one raw coordinate pair.

    Args:
        x: first axis as scraped (easting or longitude by convention).
        y: second axis as scraped (northing or latitude by convention).
        kind: skip classification and treat the pair as this kind; used to
            re-run a previous result.

    Returns:
        ProcessResult; `success` is False with `error` set when no usable
        location could be recovered.
    """
    original = (x, y)
    normalized = normalize_pair(x, y)

    if not normalized.complete:
        return ProcessResult(
            success=False,
            original=original,
            normalized=normalized,
            corrected=CoordinatePair(0.0, 0.0),
            kind=CoordinateKind.INVALID,
            identified=CoordinateKind.INVALID,
            was_corrected=False,
            validation=_no_bounds(NORMALIZATION_ERROR),
            error=NORMALIZATION_ERROR,
        )

    pair = CoordinatePair(normalized.x, normalized.y)
    identified = kind if kind is not None else classify(pair.x, pair.y)

    if identified.is_terminal_failure:
        return ProcessResult(
            success=False,
            original=original,
            normalized=normalized,
            corrected=pair,
            kind=identified,
            identified=identified,
            was_corrected=False,
            validation=_no_bounds(CLASSIFICATION_ERROR),
            error=CLASSIFICATION_ERROR,
        )

    target = _resolve_target(pair, identified)
    if target is CoordinateKind.MIXED:
        # only a plain axis swap is meaningful for half-projected input
        outcome = run_corrections(pair, identified, CoordinateKind.UTM13, ladder=CORRECTION_LADDER[:1])
        if outcome.validation.valid:
            target = CoordinateKind.UTM13
    else:
        outcome = run_corrections(pair, identified, target)

    if not outcome.validation.valid:
        error = MIXED_ERROR if target is CoordinateKind.MIXED else OUT_OF_RANGE_ERROR
        logger.debug(f"no valid location for {original}: {error}")
        return ProcessResult(
            success=False,
            original=original,
            normalized=normalized,
            corrected=outcome.pair,
            kind=target,
            identified=identified,
            was_corrected=outcome.was_corrected,
            validation=outcome.validation,
            corrections=outcome.applied,
            error=error,
        )

    return ProcessResult(
        success=True,
        original=original,
        normalized=normalized,
        corrected=outcome.pair,
        kind=target,
        identified=identified,
        was_corrected=outcome.was_corrected,
        validation=outcome.validation,
        corrections=outcome.applied,
        geographic=_geographic(outcome.pair, target),
    )


def to_lat_lng(x: Any, y: Any) -> Optional[GeoPoint]:
    """Geographic location for a raw pair, or None when it cannot be recovered."""
    result = process_coordinates(x, y)
    if not result.success:
        logger.warning(f"invalid coordinates ({x!r}, {y!r}): {result.error}")
        return None
    return result.geographic


def process_batch(
    pairs: Iterable[Tuple[Any, Any]], max_workers: Optional[int] = None
) -> List[ProcessResult]:
    """Process many raw pairs concurrently; results keep the input order."""
    if max_workers is None:
        max_workers = load_settings().batch_workers
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda pair: process_coordinates(*pair), pairs))


def format_lat_lng(point: Optional[GeoPoint], precision: int = 6, placeholder: str = "") -> str:
    """Display string "lat, lng" for a location, or `placeholder` when there is none."""
    if point is None:
        return placeholder
    return f"{point.latitude:.{precision}f}, {point.longitude:.{precision}f}"
