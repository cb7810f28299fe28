"""Encoded polyline codec for leg paths.

Some providers ship leg paths in Google's encoded polyline format: each
coordinate is the delta to the previous one at 1e5 precision, zigzag-encoded
and split into 5-bit chunks offset by 63 into printable ASCII.
"""

import logging
from collections.abc import Iterable

from transit_enabler.domain.models.point import Point

logger = logging.getLogger(__name__)

_OFFSET = 63
_CHUNK_BITS = 5
_CHUNK_MASK = 0x1F
_CONTINUATION = 0x20


def _decode_value(encoded: str, index: int) -> tuple[int, int]:
    """Decode one signed value starting at index, returning it and the next index."""
    result = 0
    shift = 0
    while True:
        if index >= len(encoded):
            raise ValueError(f"Truncated encoded polyline at position {index}")
        chunk = ord(encoded[index]) - _OFFSET
        index += 1
        if chunk < 0 or chunk > _CONTINUATION | _CHUNK_MASK:
            raise ValueError(f"Invalid character in encoded polyline at position {index - 1}")
        result |= (chunk & _CHUNK_MASK) << shift
        shift += _CHUNK_BITS
        if chunk < _CONTINUATION:
            break
    value = ~(result >> 1) if result & 1 else result >> 1
    return value, index


def _encode_value(value: int) -> str:
    value = ~(value << 1) if value < 0 else value << 1
    chars: list[str] = []
    while value >= _CONTINUATION:
        chars.append(chr((_CONTINUATION | (value & _CHUNK_MASK)) + _OFFSET))
        value >>= _CHUNK_BITS
    chars.append(chr(value + _OFFSET))
    return "".join(chars)


def decode(encoded: str) -> list[Point]:
    """Decode an encoded polyline into points.

    Raises:
        ValueError: If the string is truncated or contains characters outside
            the encoding alphabet.
    """
    path: list[Point] = []
    lat = 0
    lon = 0
    index = 0
    while index < len(encoded):
        lat_delta, index = _decode_value(encoded, index)
        lon_delta, index = _decode_value(encoded, index)
        lat += lat_delta
        lon += lon_delta
        path.append(Point.from_1e5(lat, lon))
    logger.debug(f"Decoded polyline of {len(encoded)} characters into {len(path)} points")
    return path


def encode(points: Iterable[Point]) -> str:
    """Encode points as a polyline, rounding each coordinate to 1e5 precision."""
    parts: list[str] = []
    previous_lat = 0
    previous_lon = 0
    for point in points:
        lat = point.lat_as_1e5
        lon = point.lon_as_1e5
        parts.append(_encode_value(lat - previous_lat))
        parts.append(_encode_value(lon - previous_lon))
        previous_lat = lat
        previous_lon = lon
    return "".join(parts)
