from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

# Raw fields the derived metrics are computed from.
METRIC_INPUTS = frozenset({"population", "area_km2", "gdp_billions"})


class CityProfileBase(BaseModel):
    """Raw fields of a city card, as captured from the player."""
    state_code: str = Field("A", pattern=r"^[A-H]$", description="State letter (A-H)")
    card_code: str = Field("A01", min_length=1, max_length=4, description="Card code, e.g. A01")
    city_name: str = Field("", max_length=49)
    population: int = Field(0, ge=0)
    area_km2: float = Field(0.0, ge=0, allow_inf_nan=False, description="Area in square kilometers")
    gdp_billions: float = Field(0.0, ge=0, allow_inf_nan=False, description="GDP in billions of currency units")
    tourist_points: int = Field(0, ge=0, description="Number of tourist points of interest")

    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "state_code": "A",
                "card_code": "A01",
                "city_name": "São Paulo",
                "population": 12325000,
                "area_km2": 1521.11,
                "gdp_billions": 699.28,
                "tourist_points": 50
            }
        },
    )


class CityProfile(CityProfileBase):
    """
    One player's city card.

    The two derived fields stay None until metrics.compute_derived() has
    run on the profile. Changing population, area or GDP afterwards clears
    them again, so they never describe older raw values.
    """
    population_density: Optional[float] = None # inhabitants per km²
    gdp_per_capita: Optional[float] = None

    def __setattr__(self, name, value):
        super().__setattr__(name, value)
        if name in METRIC_INPUTS:
            super().__setattr__("population_density", None)
            super().__setattr__("gdp_per_capita", None)

    @property
    def metrics_computed(self) -> bool:
        return self.population_density is not None and self.gdp_per_capita is not None
