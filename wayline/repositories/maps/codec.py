from typing import Iterable, List, Optional
import logging
import polyline

from wayline.models.location import GeoPoint

logger = logging.getLogger(__name__)

# Encoded polylines from the directions provider use 1e-5 degree precision
POLYLINE_PRECISION = 5


def _complete_points_prefix(encoded: str) -> str:
    """Cut ``encoded`` after the last character that completes a lat/lng pair."""
    values, end = 0, 0
    for i, char in enumerate(encoded):
        # A chunk without the continuation bit ends a value
        if ord(char) - 63 < 0x20:
            values += 1
            if values % 2 == 0:
                end = i + 1
    return encoded[:end]


def decode_paths(encoded_paths: Iterable[Optional[str]]) -> List[GeoPoint]:
    """Decode encoded polylines and concatenate their points in input order.

    Each string is decoded on its own, so the running lat/lng totals restart at
    zero for every entry. Empty or missing entries contribute no points. A
    truncated string yields the points decoded before the cut.
    """
    points: List[GeoPoint] = []
    for encoded in encoded_paths:
        if not encoded:
            continue
        try:
            decoded = polyline.decode(encoded, POLYLINE_PRECISION)
        except IndexError:
            logger.warning(f"Truncated polyline of length {len(encoded)}, keeping complete points")
            decoded = polyline.decode(_complete_points_prefix(encoded), POLYLINE_PRECISION)
        for lat, lng in decoded:
            # Decoded values are trusted; skip field validation
            points.append(GeoPoint.model_construct(latitude=lat, longitude=lng))
    return points
