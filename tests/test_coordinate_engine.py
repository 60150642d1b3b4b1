import json
from fractions import Fraction

import pytest

from coordinate_engine import (
    CLASSIFICATION_ERROR,
    MIXED_ERROR,
    NORMALIZATION_ERROR,
    OUT_OF_RANGE_ERROR,
    format_lat_lng,
    process_batch,
    process_coordinates,
    to_lat_lng,
)
from coordinate_ranges import bounds_for
from coordinate_types import CoordinateKind, CoordinatePair, GeoPoint
from utm_converter import utm_to_latlon

RECOVERABLE = [
    (781265, 2414688),
    (" 781,265.00 E", "N 2,414,688.0"),
    (781.265, 24146188),
    (2414688, 781265),
    (250000, 2000000),
    ("-102.2916", "21.8818"),
    (102.29, 21.88),
    (21.88, -102.29),
    (7812650, 24146880),
    (-10.229, 2.188),
    (774.51, 2.43399),
]


def test_digit_truncation_fix():
    result = process_coordinates(781.265, 24146188)

    assert result.success
    assert result.identified is CoordinateKind.UTM_POTENTIAL
    assert result.kind is CoordinateKind.UTM13
    assert result.corrected == CoordinatePair(781265.0, 2414688.0)
    assert result.was_corrected
    assert result.corrections == ("digit",)
    assert result.error is None


def test_inversion_fix():
    result = process_coordinates(2414688, 781265)

    assert result.success
    assert result.identified is CoordinateKind.UTM13_INVERTED
    assert result.kind is CoordinateKind.UTM13
    assert result.corrected == CoordinatePair(781265, 2414688)
    assert result.was_corrected


def test_sign_repair():
    result = process_coordinates(102.29, 21.88)

    assert result.success
    assert result.kind is CoordinateKind.LATLNG
    assert result.corrected == CoordinatePair(-102.29, 21.88)
    assert result.corrections == ("sign",)


def test_clean_utm_is_projected_without_correction():
    result = process_coordinates("781265", "2414688")

    assert result.success
    assert not result.was_corrected
    latitude, longitude = utm_to_latlon(781265, 2414688, 13)
    assert result.geographic == GeoPoint(latitude, longitude)


def test_zone_14_projects_with_zone_14():
    result = process_coordinates(250000, 2000000)

    assert result.kind is CoordinateKind.UTM14
    latitude, longitude = utm_to_latlon(250000, 2000000, 14)
    assert result.geographic == GeoPoint(latitude, longitude)


def test_latlng_passes_through():
    result = process_coordinates("-102.2916", "21.8818")

    assert result.success
    assert result.kind is CoordinateKind.LATLNG
    assert result.geographic == GeoPoint(latitude=21.8818, longitude=-102.2916)


@pytest.mark.parametrize(
    "x, y",
    [
        ("abc", None),
        (None, None),
        ("", "2414688"),
        (True, 1.0),
        # too large for a float
        (Fraction(10**400), 1),
        (781265, 10**400),
    ],
)
def test_unnormalizable_input_fails_gracefully(x, y):
    result = process_coordinates(x, y)

    assert not result.success
    assert result.kind is CoordinateKind.INVALID
    assert result.error == NORMALIZATION_ERROR
    assert result.corrected == CoordinatePair(0.0, 0.0)
    assert result.geographic is None


def test_unknown_magnitudes_fail():
    result = process_coordinates(1e14, 1e14)

    assert not result.success
    assert result.kind is CoordinateKind.UNKNOWN
    assert result.error == CLASSIFICATION_ERROR
    assert result.corrected == CoordinatePair(1e14, 1e14)


def test_unresolved_mixed_pair_fails():
    result = process_coordinates(781265, 21.88)

    assert not result.success
    assert result.identified is CoordinateKind.MIXED
    assert result.kind is CoordinateKind.MIXED
    assert result.error == MIXED_ERROR


def test_exhausted_corrections_fail_with_best_effort_pair():
    result = process_coordinates("500", "500")

    assert not result.success
    assert result.kind is CoordinateKind.LATLNG
    assert result.error == OUT_OF_RANGE_ERROR
    assert result.corrected == CoordinatePair(500.0, 500.0)
    assert not result.was_corrected

    swapped = process_coordinates(21.0, 104.0)
    assert not swapped.success
    assert swapped.identified is CoordinateKind.LATLNG_INVERTED
    assert swapped.was_corrected
    assert swapped.corrected == CoordinatePair(104.0, 21.0)


@pytest.mark.parametrize("x, y", RECOVERABLE)
def test_success_lies_inside_region(x, y):
    result = process_coordinates(x, y)

    assert result.success, result.error
    assert result.validation.valid
    assert bounds_for(result.kind).contains(result.corrected.x, result.corrected.y)
    assert result.geographic is not None


@pytest.mark.parametrize("x, y", RECOVERABLE)
def test_rerunning_corrected_output_is_idempotent(x, y):
    first = process_coordinates(x, y)
    second = process_coordinates(first.corrected.x, first.corrected.y, kind=first.kind)

    assert second.success
    assert second.corrected == first.corrected
    assert not second.was_corrected
    assert second.geographic == first.geographic


def test_to_lat_lng():
    point = to_lat_lng(781.265, 24146188)

    assert point == process_coordinates(781.265, 24146188).geographic
    assert to_lat_lng("abc", None) is None


def test_process_batch_keeps_input_order():
    results = process_batch(RECOVERABLE + [("abc", None)], max_workers=3)

    assert [r.original for r in results] == RECOVERABLE + [("abc", None)]
    assert all(r.success for r in results[:-1])
    assert not results[-1].success


def test_format_lat_lng():
    assert format_lat_lng(GeoPoint(21.8818, -102.2916)) == "21.881800, -102.291600"
    assert format_lat_lng(GeoPoint(21.8818, -102.2916), precision=2) == "21.88, -102.29"
    assert format_lat_lng(None, placeholder="coordinates unavailable") == "coordinates unavailable"


def test_result_serializes_to_json():
    payload = process_coordinates(781.265, "24146188").to_dict()

    decoded = json.loads(json.dumps(payload))
    assert decoded["kind"] == "utm13"
    assert decoded["identified"] == "utm_potential"
    assert decoded["corrected"] == {"x": 781265.0, "y": 2414688.0}
    assert decoded["original"] == {"x": 781.265, "y": "24146188"}
    assert decoded["validation"]["bounds_used"]["first"] == {"min": 719000.0, "max": 810000.0}
    assert set(decoded["geographic"]) == {"latitude", "longitude"}
