import pytest

from coordinate_config import LATLNG_BOUNDS, UTM13_BOUNDS, UTM14_BOUNDS
from coordinate_ranges import bounds_for, is_valid, validate_range
from coordinate_types import CoordinateKind


@pytest.mark.parametrize(
    "x, y, kind",
    [
        (781265, 2414688, CoordinateKind.UTM13),
        (719000, 2392000, CoordinateKind.UTM13),
        (810000, 2485000, CoordinateKind.UTM13),
        (250000, 2000000, CoordinateKind.UTM14),
        (-102.29, 21.88, CoordinateKind.LATLNG),
        (-103.0, 22.5, CoordinateKind.LATLNG),
    ],
)
def test_pairs_inside_region_are_valid(x, y, kind):
    outcome = validate_range(x, y, kind)

    assert outcome.valid
    assert outcome.axis_checks.first_in_range
    assert outcome.axis_checks.second_in_range
    assert outcome.reason is None


def test_axis_flags_report_which_axis_is_off():
    outcome = validate_range(810000.01, 2400000, CoordinateKind.UTM13)

    assert not outcome.valid
    assert not outcome.axis_checks.first_in_range
    assert outcome.axis_checks.second_in_range

    outcome = validate_range(102.29, 21.88, CoordinateKind.LATLNG)
    assert not outcome.axis_checks.first_in_range
    assert outcome.axis_checks.second_in_range


def test_variants_validate_against_base_kind_box():
    assert bounds_for(CoordinateKind.UTM13_INVERTED) is UTM13_BOUNDS
    assert bounds_for(CoordinateKind.UTM_POTENTIAL) is UTM13_BOUNDS
    assert bounds_for(CoordinateKind.UTM14) is UTM14_BOUNDS
    assert bounds_for(CoordinateKind.LATLNG_INVERTED) is LATLNG_BOUNDS
    assert bounds_for(CoordinateKind.LATLNG_POTENTIAL) is LATLNG_BOUNDS
    assert is_valid(781265, 2414688, CoordinateKind.UTM13_INVERTED)


@pytest.mark.parametrize("kind", [CoordinateKind.MIXED, CoordinateKind.INVALID, CoordinateKind.UNKNOWN])
def test_kinds_without_box_never_validate(kind):
    outcome = validate_range(781265, 2414688, kind)

    assert not outcome.valid
    assert outcome.bounds_used is None
    assert kind.value in outcome.reason
