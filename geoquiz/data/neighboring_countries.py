"""Countries sharing a border with Germany.

Ids are ISO 3166 alpha-3 codes so they never clash with federal state ids
(Belgium and Berlin would both be "be").
"""

from __future__ import annotations

from geoquiz.core.models import RegionLocation
from geoquiz.data.helpers import find_location_by_id, find_location_by_name


def _country(country_id: str, name: str, capital: str, region_key: str) -> RegionLocation:
    return RegionLocation(
        id=country_id, name=name, capital=capital, region_keys=(region_key,)
    )


NEIGHBORING_COUNTRIES: tuple[RegionLocation, ...] = (
    _country("dnk", "Dänemark", "Kopenhagen", "DK"),
    _country("nld", "Niederlande", "Amsterdam", "NL"),
    _country("bel", "Belgien", "Brüssel", "BE"),
    _country("lux", "Luxemburg", "Luxemburg", "LU"),
    _country("fra", "Frankreich", "Paris", "FR"),
    _country("che", "Schweiz", "Bern", "CH"),
    _country("aut", "Österreich", "Wien", "AT"),
    _country("cze", "Tschechien", "Prag", "CZ"),
    _country("pol", "Polen", "Warschau", "PL"),
)


def get_country_by_id(country_id: str) -> RegionLocation | None:
    return find_location_by_id(NEIGHBORING_COUNTRIES, country_id)


def get_country_by_name(name: str) -> RegionLocation | None:
    return find_location_by_name(NEIGHBORING_COUNTRIES, name)
