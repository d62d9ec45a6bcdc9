"""Static location catalogs."""

from geoquiz.data.cities import CITIES, get_cities_by_state_id, get_city_by_id, get_city_by_name
from geoquiz.data.federal_states import (
    FEDERAL_STATES,
    get_federal_state_by_id,
    get_federal_state_by_name,
)
from geoquiz.data.neighboring_countries import (
    NEIGHBORING_COUNTRIES,
    get_country_by_id,
    get_country_by_name,
)
from geoquiz.data.rivers import (
    RIVERS,
    get_river_by_id,
    get_river_by_name,
    get_river_by_path_index,
    river_region_key,
)

__all__ = [
    "CITIES",
    "FEDERAL_STATES",
    "NEIGHBORING_COUNTRIES",
    "RIVERS",
    "get_cities_by_state_id",
    "get_city_by_id",
    "get_city_by_name",
    "get_country_by_id",
    "get_country_by_name",
    "get_federal_state_by_id",
    "get_federal_state_by_name",
    "get_river_by_id",
    "get_river_by_name",
    "get_river_by_path_index",
    "river_region_key",
]
