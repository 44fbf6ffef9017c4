import pytest

from osrm.core.errors import ValidationError
from osrm.road import osrm_queries as q

ONE = [(1.0, 2.0)]
TWO = [(1.0, 2.0), (3.0, 4.0)]
THREE = TWO + [(5.0, 6.0)]


def test_nearest_args():
    assert q.nearest_args(42, ONE) == "&number=42"


@pytest.mark.parametrize("number", [1, 0, -3, 256, True, 2.5])
def test_nearest_rejects_number(number):
    with pytest.raises(ValidationError):
        q.nearest_args(number, ONE)


@pytest.mark.parametrize("coords", [[], TWO, THREE])
def test_nearest_requires_exactly_one(coords):
    with pytest.raises(ValidationError, match="Exactly one"):
        q.nearest_args(5, coords)


def test_route_defaults():
    assert q.route_args(TWO) == (
        "&alternatives=false&steps=false&annotations=true"
        "&continue_straight=false&geometries=geojson&overview=full"
    )


def test_route_options():
    args = q.route_args(
        TWO, alternatives=True, steps=True, continue_straight=True, geometries="polyline6", overview=False
    )
    assert args == (
        "&alternatives=true&steps=true&annotations=true"
        "&continue_straight=true&geometries=polyline6&overview=false"
    )


@pytest.mark.parametrize("builder", [q.route_args, q.match_args, q.trip_args])
@pytest.mark.parametrize("coords", [[], ONE])
def test_minimum_two_coordinates(builder, coords):
    with pytest.raises(ValidationError, match="minimum number of coordinates is 2"):
        builder(coords)


@pytest.mark.parametrize("builder", [q.route_args, q.match_args, q.trip_args])
def test_geometries_membership(builder):
    for ok in q.GEOMETRIES:
        assert f"&geometries={ok}" in builder(TWO, geometries=ok)
    with pytest.raises(ValidationError, match="Geometries"):
        builder(TWO, geometries="wkt")


@pytest.mark.parametrize("builder", [q.route_args, q.match_args, q.trip_args])
def test_annotations_always_true(builder):
    assert "&annotations=true" in builder(TWO)


def test_table_all():
    assert q.table_args(TWO) == "&sources=all&destinations=all"


def test_table_indices():
    assert q.table_args(THREE, sources=[0, 1], destinations=[2]) == "&sources=0;1&destinations=2"


def test_table_validation():
    with pytest.raises(ValidationError):
        q.table_args(ONE)
    with pytest.raises(ValidationError, match="out of range"):
        q.table_args(TWO, sources=[2])
    with pytest.raises(ValidationError):
        q.table_args(TWO, destinations=["0"])


def test_match_defaults():
    assert q.match_args(TWO) == (
        "&steps=false&annotations=true&geometries=geojson&overview=full&gaps=split&tidy=false"
    )


def test_match_timestamps_and_flags():
    args = q.match_args(TWO, timestamps=[100, 160], gaps=False, tidy=True, overview=False)
    assert args == (
        "&steps=false&annotations=true&geometries=geojson&overview=false"
        "&timestamps=100;160&gaps=ignore&tidy=true"
    )


@pytest.mark.parametrize("stamps", [[1], [1, 2, 3], [5, 4], [-1, 2]])
def test_match_rejects_bad_timestamps(stamps):
    with pytest.raises(ValidationError):
        q.match_args(TWO, timestamps=stamps)


def test_trip_defaults():
    assert q.trip_args(TWO) == (
        "&steps=false&annotations=true&geometries=geojson&overview=full"
        "&roundtrip=true&source=any&destination=any"
    )


def test_trip_first():
    args = q.trip_args(TWO, roundtrip=False, source=False, destination=False)
    assert args.endswith("&roundtrip=false&source=first&destination=first")


def test_assemblers_are_idempotent():
    assert q.route_args(TWO, steps=True) == q.route_args(TWO, steps=True)
    assert q.table_args(THREE, sources=[1]) == q.table_args(THREE, sources=[1])
