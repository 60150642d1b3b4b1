"""
Repair ladder for coordinate pairs that fail range validation.

Each strategy gets the current pair, the kind the classifier proposed and the
kind being validated against, and returns a replacement pair or None when it
has nothing to offer. `run_corrections` applies them in `CORRECTION_LADDER`
order and stops at the first pair that validates.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from coordinate_config import (
    EASTING_OFFSET,
    EXTRA_DIGIT_NORTHING_PREFIX,
    LATLNG_SCALE_EXPONENTS,
    NORTHING_OFFSETS,
    TRUNCATED_NORTHING_OFFSET,
    UTM_SCALE_EXPONENTS,
)
from coordinate_ranges import is_valid, validate_range
from coordinate_types import CoordinateKind, CoordinatePair, ValidationOutcome

logger = logging.getLogger(__name__)

Strategy = Callable[[CoordinatePair, CoordinateKind, CoordinateKind], Optional[CoordinatePair]]


def _first_valid(candidates: Iterable[CoordinatePair], target: CoordinateKind) -> Optional[CoordinatePair]:
    for candidate in candidates:
        if is_valid(candidate.x, candidate.y, target):
            return candidate
    return None


# --- 1. Axis inversion ---
def try_inversion_swap(
    pair: CoordinatePair, identified: CoordinateKind, target: CoordinateKind
) -> Optional[CoordinatePair]:
    """
    Swap the axes.

    Inverted kinds are swapped unconditionally and the swapped pair is kept
    even if later strategies still have to fix it. Any other kind is only
    swapped when the swapped pair validates as-is.
    """
    swapped = pair.swapped()
    if identified.is_inverted:
        return swapped
    if is_valid(swapped.x, swapped.y, target):
        return swapped
    return None


# --- 2. Dropped or extra digits (zone 13 only) ---
def _drop_extra_northing_digit(northing: float) -> List[float]:
    digits = str(int(northing))
    if len(digits) != 8 or not digits.startswith(EXTRA_DIGIT_NORTHING_PREFIX):
        return []
    candidates = []
    if digits[-1] == digits[-2]:
        # stray digit scanned ahead of a doubled final digit: 24146188 -> 2414688
        candidates.append(float(digits[:-3] + digits[-2:]))
    candidates.append(float(digits[:-1]))
    return candidates


def try_digit_correction(
    pair: CoordinatePair, identified: CoordinateKind, target: CoordinateKind
) -> Optional[CoordinatePair]:
    """Recover zone 13 values that lost or gained a digit during OCR or typing."""
    if target is not CoordinateKind.UTM13 or identified is CoordinateKind.MIXED:
        return None
    x, y = pair.x, pair.y

    # northing gained a digit; easting usually lost its thousands at the same time
    if y > 10_000_000:
        easting = float(round(x * 1000)) if 100 < x < 10000 else x
        found = _first_valid(
            (CoordinatePair(easting, northing) for northing in _drop_extra_northing_digit(y)),
            target,
        )
        if found:
            return found

    # northing lost a digit
    if y < 1_000_000 and x > 700_000:
        northings = [y * 10] + [y + offset for offset in NORTHING_OFFSETS]
        found = _first_valid((CoordinatePair(x, northing) for northing in northings), target)
        if found:
            return found

    # easting lost digits
    if x < 1_000_000 and y > 2_300_000:
        eastings = (x * 1000, x * 100, x + EASTING_OFFSET)
        found = _first_valid((CoordinatePair(easting, y) for easting in eastings), target)
        if found:
            return found

    # both axes truncated, e.g. 774.51 / 2.43399
    if x < 10_000 and y < 100:
        found = _first_valid(
            (
                CoordinatePair(x * 1000, y * 1_000_000),
                CoordinatePair(x * 1000, y + TRUNCATED_NORTHING_OFFSET),
            ),
            target,
        )
        if found:
            return found

    return None


# --- 3. Wrong longitude sign (lat/lng only) ---
def try_sign_correction(
    pair: CoordinatePair, identified: CoordinateKind, target: CoordinateKind
) -> Optional[CoordinatePair]:
    """Region longitudes are always west; flip a positive one, then try swapping axes."""
    if target is not CoordinateKind.LATLNG or identified is CoordinateKind.MIXED:
        return None
    candidates = []
    if pair.x > 100:
        candidates.append(CoordinatePair(-pair.x, pair.y))
    candidates.append(pair.swapped())
    return _first_valid(candidates, target)


# --- 4. Shifted decimal point ---
def _scale_factors(target: CoordinateKind) -> Tuple[int, ...]:
    if target is CoordinateKind.UTM13:
        return tuple(10 ** exponent for exponent in UTM_SCALE_EXPONENTS)
    if target is CoordinateKind.LATLNG:
        return tuple(10 ** exponent for exponent in LATLNG_SCALE_EXPONENTS)
    return ()


def try_decimal_correction(
    pair: CoordinatePair, identified: CoordinateKind, target: CoordinateKind
) -> Optional[CoordinatePair]:
    """Divide, then multiply, both axes by each power of ten until the pair validates."""
    if identified is CoordinateKind.MIXED:
        return None
    factors = _scale_factors(target)
    divided = (CoordinatePair(pair.x / factor, pair.y / factor) for factor in factors)
    found = _first_valid(divided, target)
    if found:
        return found
    multiplied = (CoordinatePair(pair.x * factor, pair.y * factor) for factor in factors)
    return _first_valid(multiplied, target)


@dataclass(frozen=True)
class CorrectionStrategy:
    name: str
    apply: Strategy


CORRECTION_LADDER: Tuple[CorrectionStrategy, ...] = (
    CorrectionStrategy("inversion_swap", try_inversion_swap),
    CorrectionStrategy("digit", try_digit_correction),
    CorrectionStrategy("sign", try_sign_correction),
    CorrectionStrategy("decimal_scale", try_decimal_correction),
)


@dataclass(frozen=True)
class CorrectionOutcome:
    pair: CoordinatePair
    validation: ValidationOutcome
    applied: Tuple[str, ...]

    @property
    def was_corrected(self) -> bool:
        return bool(self.applied)


def run_corrections(
    pair: CoordinatePair,
    identified: CoordinateKind,
    target: CoordinateKind,
    ladder: Tuple[CorrectionStrategy, ...] = CORRECTION_LADDER,
) -> CorrectionOutcome:
    """Walk the ladder, adopting every candidate, until the pair validates against `target`."""
    applied: List[str] = []
    validation = validate_range(pair.x, pair.y, target)
    for strategy in ladder:
        if validation.valid:
            break
        candidate = strategy.apply(pair, identified, target)
        if candidate is None:
            continue
        logger.info(
            f"{strategy.name} correction: ({pair.x}, {pair.y}) -> ({candidate.x}, {candidate.y})"
        )
        pair = candidate
        applied.append(strategy.name)
        validation = validate_range(pair.x, pair.y, target)
    return CorrectionOutcome(pair=pair, validation=validation, applied=tuple(applied))
