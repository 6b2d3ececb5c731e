import logging
from typing import NamedTuple

from .models import CityProfile

logger = logging.getLogger(__name__)

# GDP is captured in billions; per capita figures are in whole currency units.
BILLION = 1_000_000_000


class DerivedMetrics(NamedTuple):
    population_density: float
    gdp_per_capita: float


def compute_derived(profile: CityProfile) -> DerivedMetrics:
    """
    Computes population density and GDP per capita and stores them on the profile.

    A zero area gives a density of 0 and a zero population gives a per capita
    value of 0. Neither case is an error.
    """
    if profile.area_km2 > 0:
        density = profile.population / profile.area_km2
    else:
        density = 0.0

    if profile.population > 0:
        per_capita = (profile.gdp_billions * BILLION) / profile.population
    else:
        per_capita = 0.0

    profile.population_density = density
    profile.gdp_per_capita = per_capita
    logger.debug(
        "Derived metrics for %s (%s): density=%.4f per_capita=%.4f",
        profile.city_name, profile.card_code, density, per_capita,
    )
    return DerivedMetrics(density, per_capita)
