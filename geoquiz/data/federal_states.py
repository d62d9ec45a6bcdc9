"""The sixteen German federal states."""

from __future__ import annotations

from geoquiz.core.models import RegionLocation
from geoquiz.data.helpers import find_location_by_id, find_location_by_name


def _state(state_id: str, name: str, capital: str, region_key: str) -> RegionLocation:
    return RegionLocation(id=state_id, name=name, capital=capital, region_keys=(region_key,))


FEDERAL_STATES: tuple[RegionLocation, ...] = (
    _state("bw", "Baden-Württemberg", "Stuttgart", "DE-BW"),
    _state("by", "Bayern", "München", "DE-BY"),
    _state("be", "Berlin", "Berlin", "DE-BE"),
    _state("bb", "Brandenburg", "Potsdam", "DE-BB"),
    _state("hb", "Bremen", "Bremen", "DE-HB"),
    _state("hh", "Hamburg", "Hamburg", "DE-HH"),
    _state("he", "Hessen", "Wiesbaden", "DE-HE"),
    _state("mv", "Mecklenburg-Vorpommern", "Schwerin", "DE-MV"),
    _state("ni", "Niedersachsen", "Hannover", "DE-NI"),
    _state("nw", "Nordrhein-Westfalen", "Düsseldorf", "DE-NW"),
    _state("rp", "Rheinland-Pfalz", "Mainz", "DE-RP"),
    _state("sl", "Saarland", "Saarbrücken", "DE-SL"),
    _state("sn", "Sachsen", "Dresden", "DE-SN"),
    _state("st", "Sachsen-Anhalt", "Magdeburg", "DE-ST"),
    _state("sh", "Schleswig-Holstein", "Kiel", "DE-SH"),
    _state("th", "Thüringen", "Erfurt", "DE-TH"),
)


def get_federal_state_by_id(state_id: str) -> RegionLocation | None:
    return find_location_by_id(FEDERAL_STATES, state_id)


def get_federal_state_by_name(name: str) -> RegionLocation | None:
    return find_location_by_name(FEDERAL_STATES, name)
