"""Lookup helpers shared by the location catalogs."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from geoquiz.core.models import PointLocation, RegionLocation

L = TypeVar("L", RegionLocation, PointLocation)


def find_location_by_id(locations: Iterable[L], location_id: str) -> L | None:
    """Find a location by exact id."""
    for location in locations:
        if location.id == location_id:
            return location
    return None


def find_location_by_name(locations: Iterable[L], name: str) -> L | None:
    """Find a location by name, ignoring case."""
    wanted = name.lower()
    for location in locations:
        if location.name.lower() == wanted:
            return location
    return None


def filter_locations_by_property(
    locations: Iterable[L], property_name: str, value: Any
) -> list[L]:
    """Return the locations whose attribute equals ``value``."""
    return [loc for loc in locations if getattr(loc, property_name, None) == value]


def find_location_by_region_key(locations: Iterable[L], region_key: str) -> L | None:
    """Find the location owning a clickable map region."""
    for location in locations:
        if region_key in location.region_keys:
            return location
    return None
