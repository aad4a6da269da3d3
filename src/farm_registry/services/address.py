"""Heuristic extraction of administrative regions from lot-number addresses."""

from __future__ import annotations

from typing import Optional, Sequence

from ..config import settings
from ..models.domain import RegionTokens

DISTRICT_SUFFIXES = ("읍", "면", "동")
VILLAGE_SUFFIX = "리"

_EMPTY = RegionTokens()


def parse_address(address: object, prefixes: Optional[Sequence[str]] = None) -> RegionTokens:
    """Split a jibun address into city, district (읍/면/동) and village (리).

    Addresses outside the configured province, or too short to carry a city
    token, produce empty tokens rather than an error.
    """

    if not isinstance(address, str):
        return _EMPTY
    accepted = tuple(prefixes if prefixes is not None else settings.province_prefixes)
    text = address.strip()
    if not accepted or not text.startswith(accepted):
        return _EMPTY

    tokens = text.split()
    if len(tokens) < 3:
        return _EMPTY

    city = tokens[1]
    district: Optional[str] = None
    village: Optional[str] = None

    for index in range(2, len(tokens)):
        if tokens[index].endswith(DISTRICT_SUFFIXES):
            district = tokens[index]
            for candidate in tokens[index + 1:]:
                if candidate.endswith(VILLAGE_SUFFIX):
                    village = candidate
                    break
            break

    return RegionTokens(city=city, district=district, village=village)
