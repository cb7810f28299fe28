"""Tests for the trip domain model."""

import dataclasses
from datetime import UTC, datetime, timedelta

import pytest

from transit_enabler.domain.models import (
    Fare,
    FareType,
    Individual,
    IndividualType,
    Leg,
    Line,
    Location,
    LocationType,
    Point,
    Product,
    Public,
    Stop,
    Trip,
)
from transit_enabler.domain.models.trip import build_substitute_id

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
NOON = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
ANYWHERE = Location(LocationType.ANY)
A = Location(LocationType.STATION, id="A")
B = Location(LocationType.STATION, id="B")
C = Location(LocationType.STATION, id="C")


def public_leg(
    departure: datetime = EPOCH + timedelta(milliseconds=42),
    arrival: datetime = EPOCH + timedelta(milliseconds=43),
    dep_location: Location = ANYWHERE,
    arr_location: Location = ANYWHERE,
    label: str | None = None,
) -> Public:
    return Public(
        Line(product=Product.BUS, label=label),
        None,
        Stop(dep_location, planned_departure_time=departure, predicted_departure_time=departure),
        Stop(arr_location, planned_arrival_time=arrival, predicted_arrival_time=arrival),
    )


def individual_leg(
    departure: datetime = EPOCH,
    arrival: datetime = EPOCH,
    dep_location: Location = ANYWHERE,
    arr_location: Location = ANYWHERE,
) -> Individual:
    return Individual(IndividualType.WALK, dep_location, departure, arr_location, arrival)


def trip(*legs: Leg, **kwargs: object) -> Trip:
    return Trip(ANYWHERE, ANYWHERE, list(legs), **kwargs)  # type: ignore[arg-type]


@pytest.mark.parametrize("count", [1, 2, 3, 5])
def test_num_changes_of_public_trip(count: int) -> None:
    """Given n public legs, when counting changes, then there are n-1."""
    assert trip(*[public_leg() for _ in range(count)]).get_num_changes() == count - 1


def test_num_changes_of_individual_trip() -> None:
    """Given only individual legs, when counting changes, then the result is None."""
    assert trip(individual_leg()).get_num_changes() is None
    assert trip(individual_leg(), individual_leg()).get_num_changes() is None


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [("IP", 0), ("PI", 0), ("IPI", 0), ("IPIP", 1), ("PIPIP", 2)],
)
def test_num_changes_of_mixed_trip(pattern: str, expected: int) -> None:
    """Given mixed legs, when counting changes, then individual legs do not count."""
    legs = [public_leg() if kind == "P" else individual_leg() for kind in pattern]

    assert trip(*legs).get_num_changes() == expected


def test_explicit_num_changes_wins() -> None:
    """Given an explicit number of changes, when counting, then it is returned as is."""
    assert trip(public_leg(), public_leg(), num_changes=5).get_num_changes() == 5
    assert trip(individual_leg(), num_changes=0).get_num_changes() == 0


def test_trip_requires_legs() -> None:
    """Given no legs, when constructing a trip, then ValueError is raised."""
    with pytest.raises(ValueError, match="at least one leg"):
        Trip(A, B, [])


def test_substitute_id_format() -> None:
    """Given legs without provider id, when constructing, then the id is derived from the legs."""
    coord = Location.from_coord(Point(1.0, 2.0))
    legs = [
        individual_leg(NOON, NOON + timedelta(minutes=5), coord, A),
        public_leg(
            EPOCH + timedelta(milliseconds=1000),
            EPOCH + timedelta(milliseconds=2000),
            A,
            B,
            label="100",
        ),
    ]

    built = Trip(coord, B, legs)

    assert built.id == "1.0000000/2.0000000-A-individual|A-B-1000-2000-B100"
    assert built.id == build_substitute_id(legs)


def test_substitute_id_skips_absent_planned_times() -> None:
    """Given a leg with only predicted times, when deriving the id, then the times are skipped."""
    leg = Public(
        Line(),
        None,
        Stop(A, predicted_departure_time=NOON),
        Stop(B, predicted_arrival_time=NOON),
    )

    assert Trip(A, B, [leg]).id == "A-B-?"


def test_substitute_id_is_deterministic() -> None:
    """Given trips with the same legs but different paths, when comparing, then they are equal."""
    ride = public_leg(NOON, NOON + timedelta(minutes=30), A, B, "U3")
    first = Trip(A, B, [ride])
    with_path = Trip(A, B, [dataclasses.replace(ride, path=[Point(1.0, 1.0), Point(2.0, 2.0)])])
    walk = Individual(IndividualType.WALK, A, NOON, B, NOON, path=[Point(1.0, 1.0)])

    assert first == with_path
    assert hash(first) == hash(with_path)
    assert Trip(A, B, [walk]).id == Trip(A, B, [individual_leg(NOON, NOON, A, B)]).id
    assert first != Trip(A, B, [public_leg(NOON, NOON + timedelta(minutes=31), A, B, "U3")])


def test_provider_id_wins() -> None:
    """Given a provider id, when constructing, then it is kept and decides equality."""
    one = trip(public_leg(), id="provider-1")
    other = trip(public_leg(NOON, NOON), id="provider-1")

    assert one.id == "provider-1"
    assert one == other


def test_trip_timing() -> None:
    """Given a walk, a ride and a walk, when reading timings, then they span the right legs."""
    built = Trip(
        A,
        C,
        [
            individual_leg(NOON, NOON + timedelta(minutes=5), A, B),
            public_leg(NOON + timedelta(minutes=10), NOON + timedelta(minutes=40), B, C),
            individual_leg(NOON + timedelta(minutes=40), NOON + timedelta(minutes=50), C, C),
        ],
    )

    assert built.first_departure_time == NOON
    assert built.last_arrival_time == NOON + timedelta(minutes=50)
    assert built.duration == timedelta(minutes=50)
    assert built.public_duration == timedelta(minutes=30)
    assert built.first_public_leg_departure_time == NOON + timedelta(minutes=10)
    assert built.last_public_leg_arrival_time == NOON + timedelta(minutes=40)
    assert built.first_public_leg is built.last_public_leg
    assert built.min_time == NOON
    assert built.max_time == NOON + timedelta(minutes=50)
    assert built.products() == {Product.BUS}


def test_trip_without_public_legs() -> None:
    """Given only a walk, when reading public timings, then they are absent."""
    built = trip(individual_leg(NOON, NOON + timedelta(minutes=3)))

    assert built.first_public_leg is None
    assert built.public_duration is None
    assert built.products() == frozenset()


def test_fares_are_frozen() -> None:
    """Given fares, when constructing a trip, then they are kept as a tuple."""
    fare = Fare(type=FareType.ADULT, currency="EUR", fare=3.5)

    built = trip(public_leg(), fares=[fare], capacity=[1, 2])

    assert built.fares == (fare,)
    assert built.capacity == (1, 2)


def test_overlapping_walk_is_untravelable_and_gets_adjusted() -> None:
    """Given a walk starting before the ride arrives, when adjusting, then the walk moves."""
    ride = public_leg(NOON, NOON + timedelta(minutes=30), A, B)
    walk = individual_leg(NOON + timedelta(minutes=20), NOON + timedelta(minutes=25), B, C)
    original = Trip(A, C, [ride, walk])

    adjusted = original.adjust_untravelable_individual_legs()

    assert not original.is_travelable()
    assert adjusted.is_travelable()
    assert adjusted is not original
    assert adjusted.id == original.id
    moved = adjusted.legs[1]
    assert isinstance(moved, Individual)
    assert moved.departure_time == NOON + timedelta(minutes=30)
    assert moved.arrival_time == NOON + timedelta(minutes=35)
    assert original.legs[1] is walk


def test_adjust_is_idempotent() -> None:
    """Given an adjusted trip, when adjusting again, then the same trip is returned."""
    original = Trip(
        A,
        C,
        [
            public_leg(NOON, NOON + timedelta(minutes=30), A, B),
            individual_leg(NOON, NOON + timedelta(minutes=5), B, C),
        ],
    )

    adjusted = original.adjust_untravelable_individual_legs()

    assert adjusted.adjust_untravelable_individual_legs() is adjusted


def test_adjust_never_moves_first_or_public_legs() -> None:
    """Given overlapping public legs, when adjusting, then the trip stays untravelable."""
    original = Trip(
        A,
        C,
        [
            individual_leg(NOON + timedelta(minutes=10), NOON + timedelta(minutes=15), A, A),
            public_leg(NOON, NOON + timedelta(minutes=30), A, B),
            public_leg(NOON + timedelta(minutes=20), NOON + timedelta(minutes=50), B, C),
        ],
    )

    assert original.adjust_untravelable_individual_legs() is original
    assert not original.is_travelable()


def test_cancelled_stop_makes_trip_untravelable() -> None:
    """Given a cancelled departure, when checking travelability, then the trip is not travelable."""
    leg = Public(
        Line(product=Product.TRAM, label="17"),
        None,
        Stop(A, planned_departure_time=NOON, departure_cancelled=True),
        Stop(B, planned_arrival_time=NOON + timedelta(minutes=10)),
    )

    assert not Trip(A, B, [leg]).is_travelable()


def test_consecutive_legs_in_order_are_travelable() -> None:
    """Given legs in time order, when checking travelability, then the trip is travelable."""
    built = Trip(
        A,
        C,
        [
            public_leg(NOON, NOON + timedelta(minutes=30), A, B),
            individual_leg(NOON + timedelta(minutes=30), NOON + timedelta(minutes=32), B, B),
            public_leg(NOON + timedelta(minutes=35), NOON + timedelta(minutes=50), B, C),
        ],
    )

    assert built.is_travelable()
    assert built.adjust_untravelable_individual_legs() is built


def test_substitute_id_without_label() -> None:
    """Given a line without label, when deriving the id, then the label part is empty."""
    leg = public_leg(EPOCH, EPOCH + timedelta(seconds=1), A, B)

    assert build_substitute_id([leg]) == "A-B-0-1000-B"
    assert "null" not in build_substitute_id([leg])
