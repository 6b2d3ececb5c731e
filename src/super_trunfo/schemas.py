from typing import Tuple
from pydantic import BaseModel, ConfigDict

from .constants import Attribute, OrderingRule
from .models import CityProfileBase

# --- Attribute Schemas ---

class AttributeDisplay(BaseModel):
    id: Attribute
    name: str
    ordering: OrderingRule

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "id": 5,
            "name": "Population Density",
            "ordering": "lower-is-better"
        }
    })

# --- Match Schemas ---

class MatchRequest(BaseModel):
    """Two raw city cards plus the two attribute ids to compare them on."""
    first: CityProfileBase
    second: CityProfileBase
    attributes: Tuple[Attribute, Attribute]

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "first": {
                "state_code": "A",
                "card_code": "A01",
                "city_name": "São Paulo",
                "population": 12325000,
                "area_km2": 1521.11,
                "gdp_billions": 699.28,
                "tourist_points": 50
            },
            "second": {
                "state_code": "B",
                "card_code": "B02",
                "city_name": "Rio de Janeiro",
                "population": 6748000,
                "area_km2": 1200.25,
                "gdp_billions": 300.50,
                "tourist_points": 30
            },
            "attributes": [1, 5]
        }
    })

