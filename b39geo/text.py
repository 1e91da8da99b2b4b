"""
Helpers for pulling coordinates and phrases out of pasted text.
"""
import math
import re
from typing import List, Optional

from .codec import Coordinate

# Map URLs carry the place pin as !3d<lat>!4d<lon>
_PIN_PATTERN = re.compile(r"!3d(-?\d{1,2}\.\d+)!4d(-?\d{1,3}\.\d+)")
# A visible "lat, lon" pair with at least 3 decimals each
_PAIR_PATTERN = re.compile(r"(-?\d{1,2}\.\d{3,})\s*,\s*(-?\d{1,3}\.\d{3,})")
# Search URLs: query=lat,lon (comma may be URL encoded)
_QUERY_PATTERN = re.compile(r"query=(-?\d{1,2}\.\d+)(?:,|%2C)+(-?\d{1,3}\.\d+)", re.IGNORECASE)


def split_phrase(text: str) -> List[str]:
    """Split a pasted phrase into tokens on whitespace."""
    return text.strip().split()


def _to_coordinate(lat_text: str, lon_text: str) -> Optional[Coordinate]:
    lat = float(lat_text)
    lon = float(lon_text)
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return None
    if abs(lat) > 90 or abs(lon) > 180:
        return None
    return Coordinate(lat=lat, lon=lon)


def parse_coordinates(text: str) -> Optional[Coordinate]:
    """
    Find a latitude/longitude pair in a map URL or page text.

    Args:
        text: URL, HTML or plain text

    Returns:
        First plausible coordinate found, or None
    """
    if not text:
        return None

    match = _PIN_PATTERN.search(text)
    if match:
        coord = _to_coordinate(*match.groups())
        if coord:
            return coord

    for match in _PAIR_PATTERN.finditer(text):
        coord = _to_coordinate(*match.groups())
        if coord:
            return coord

    match = _QUERY_PATTERN.search(text)
    if match:
        return _to_coordinate(*match.groups())
    return None
