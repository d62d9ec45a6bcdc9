"""Rivers and lakes.

A river is drawn as several map paths, so it owns one region key per path.
"""

from __future__ import annotations

from geoquiz.core.models import RegionLocation
from geoquiz.data.helpers import (
    find_location_by_id,
    find_location_by_name,
    find_location_by_region_key,
)


def river_region_key(path_index: int) -> str:
    """Region key of the river path at ``path_index`` in the map."""
    return f"river-{path_index}"


def _river(river_id: str, name: str, *path_indices: int) -> RegionLocation:
    return RegionLocation(
        id=river_id,
        name=name,
        region_keys=tuple(river_region_key(index) for index in path_indices),
    )


RIVERS: tuple[RegionLocation, ...] = (
    _river("aller", "Aller", 4),
    _river("chiemsee", "Chiemsee", 49),
    _river("donau", "Donau", 38, 46),
    _river("elbe", "Elbe", 11, 12),
    _river("ems", "Ems", 1),
    _river("fulda", "Fulda", 0),
    _river("havel", "Havel", 13, 14, 15, 16, 18, 19, 20, 21, 51, 53),
    _river("ijssel", "IJssel", 45),
    _river("inn", "Inn", 39),
    _river("lippe", "Lippe", 6),
    _river("maas", "Maas", 44),
    _river("main", "Main", 32),
    _river("moldau", "Moldau", 7, 8),
    _river("mosel", "Mosel", 42),
    _river("neckar", "Neckar", 47),
    _river("oder", "Oder", 22, 23, 52),
    _river("rhein", "Rhein", 10, 40, 41),
    _river("ruhr", "Ruhr", 35),
    _river("saale", "Saale", 2, 3, 5),
    _river("schwerinersee", "Schweriner See", 50),
    _river("spree", "Spree", 17, 25, 26, 27, 28),
    _river("warthe", "Warthe", 9),
    _river("werra", "Werra", 33),
    _river("weser", "Weser", 34),
)


def get_river_by_id(river_id: str) -> RegionLocation | None:
    return find_location_by_id(RIVERS, river_id)


def get_river_by_name(name: str) -> RegionLocation | None:
    return find_location_by_name(RIVERS, name)


def get_river_by_path_index(path_index: int) -> RegionLocation | None:
    return find_location_by_region_key(RIVERS, river_region_key(path_index))
