"""Tests for the encoded polyline codec."""

import pytest

from transit_enabler.adapters import polyline_format
from transit_enabler.domain.models import Point

VIENNA = (
    "}qfeHyn|bBnBdA\\R]xBzA|@r@f@u@hCWS{@bCe@t@e@v@h@vCIFu@`@MPDJ@L?NAPIZXf@|@`Br@pAHLZp@~@jBbArBbBjDLTTd@fAzBcFnH"
    "[d@Vf@iA`BWb@t@zAb@~@LTNNdCzE~A{BAA??"
)


def test_decode_vienna_path() -> None:
    """Given a provider path, when decoding, then the points match the known coordinates."""
    path = polyline_format.decode(VIENNA)

    assert len(path) == 44
    assert path[0] == Point.from_double(48.20783, 16.37117)
    assert path[43] == Point.from_double(48.20514, 16.35796)


def test_decode_reference_example() -> None:
    """Given the reference example, when decoding, then the three points come back."""
    path = polyline_format.decode("_p~iF~ps|U_ulLnnqC_mqNvxq`@")

    assert [(p.lat, p.lon) for p in path] == [
        pytest.approx((38.5, -120.2)),
        pytest.approx((40.7, -120.95)),
        pytest.approx((43.252, -126.453)),
    ]


def test_encode_reference_example() -> None:
    """Given the reference points, when encoding, then the reference string is produced."""
    points = [Point(38.5, -120.2), Point(40.7, -120.95), Point(43.252, -126.453)]

    assert polyline_format.encode(points) == "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def test_empty_polyline() -> None:
    """Given no points, when encoding and decoding, then both are empty."""
    assert polyline_format.decode("") == []
    assert polyline_format.encode([]) == ""


@pytest.mark.parametrize("encoded", ["_p~iF", "_p~iF~ps|U_ulL", "_"])
def test_decode_rejects_truncated_input(encoded: str) -> None:
    """Given a truncated string, when decoding, then ValueError is raised."""
    with pytest.raises(ValueError, match="Truncated"):
        polyline_format.decode(encoded)


def test_decode_rejects_invalid_characters() -> None:
    """Given characters outside the alphabet, when decoding, then ValueError is raised."""
    with pytest.raises(ValueError, match="Invalid character"):
        polyline_format.decode("_p~iF ps|U")
