from typing import Optional

from coordinate_config import REGION_BOUNDS
from coordinate_types import AxisChecks, BoundingBox, CoordinateKind, ValidationOutcome, base_kind


def bounds_for(kind: CoordinateKind) -> Optional[BoundingBox]:
    """Validation box for `kind` (variants use their base kind's box)."""
    resolved = base_kind(kind)
    if resolved is None:
        return None
    return REGION_BOUNDS[resolved]


def validate_range(x: float, y: float, kind: CoordinateKind) -> ValidationOutcome:
    """
    Check (x, y) against the region's bounding box for `kind`.

    Pure predicate: the per-axis flags tell the corrector which axis is off,
    nothing is repaired here.
    """
    bounds = bounds_for(kind)
    if bounds is None:
        return ValidationOutcome(
            valid=False,
            axis_checks=AxisChecks(False, False),
            bounds_used=None,
            reason=f"no bounding box for coordinate kind '{kind.value}'",
        )

    first_in_range = bounds.first.contains(x)
    second_in_range = bounds.second.contains(y)
    return ValidationOutcome(
        valid=first_in_range and second_in_range,
        axis_checks=AxisChecks(first_in_range, second_in_range),
        bounds_used=bounds,
    )


def is_valid(x: float, y: float, kind: CoordinateKind) -> bool:
    return validate_range(x, y, kind).valid
