"""Cities: the sixteen state capitals plus major cities.

Coordinates are in the map's SVG units.
"""

from __future__ import annotations

from geoquiz.core.models import Point, PointLocation
from geoquiz.data.helpers import (
    filter_locations_by_property,
    find_location_by_id,
    find_location_by_name,
)


def _city(city_id: str, name: str, state_id: str, x: float, y: float) -> PointLocation:
    return PointLocation(
        id=city_id,
        name=name,
        state_id=state_id,
        region_key=f"city-{city_id}",
        coordinates=Point(x=x, y=y),
    )


CITIES: tuple[PointLocation, ...] = (
    # State capitals
    _city("stuttgart", "Stuttgart", "bw", 500, 650),
    _city("muenchen", "München", "by", 650, 700),
    _city("berlin", "Berlin", "be", 700, 300),
    _city("potsdam", "Potsdam", "bb", 680, 310),
    _city("bremen", "Bremen", "hb", 450, 250),
    _city("hamburg", "Hamburg", "hh", 500, 200),
    _city("wiesbaden", "Wiesbaden", "he", 420, 500),
    _city("schwerin", "Schwerin", "mv", 600, 200),
    _city("hannover", "Hannover", "ni", 500, 320),
    _city("duesseldorf", "Düsseldorf", "nw", 350, 420),
    _city("mainz", "Mainz", "rp", 420, 520),
    _city("saarbruecken", "Saarbrücken", "sl", 350, 600),
    _city("dresden", "Dresden", "sn", 700, 450),
    _city("magdeburg", "Magdeburg", "st", 600, 330),
    _city("kiel", "Kiel", "sh", 500, 120),
    _city("erfurt", "Erfurt", "th", 550, 450),
    # Major cities
    _city("frankfurt", "Frankfurt am Main", "he", 450, 500),
    _city("koeln", "Köln", "nw", 350, 450),
    _city("leipzig", "Leipzig", "sn", 650, 400),
    _city("nuernberg", "Nürnberg", "by", 550, 600),
)


def get_city_by_id(city_id: str) -> PointLocation | None:
    return find_location_by_id(CITIES, city_id)


def get_city_by_name(name: str) -> PointLocation | None:
    return find_location_by_name(CITIES, name)


def get_cities_by_state_id(state_id: str) -> list[PointLocation]:
    return filter_locations_by_property(CITIES, "state_id", state_id)
