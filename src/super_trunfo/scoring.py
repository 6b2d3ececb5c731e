from typing import Callable, Dict

from .constants import Attribute, OrderingRule, ordering_rule
from .exceptions import MetricsNotComputed, UnknownAttribute
from .models import CityProfile


def _derived(field: str) -> Callable[[CityProfile], float]:
    def read(profile: CityProfile) -> float:
        value = getattr(profile, field)
        if value is None:
            raise MetricsNotComputed(
                f"{field} has not been computed for {profile.city_name or profile.card_code!r}"
            )
        return value
    return read


_ACCESSORS: Dict[Attribute, Callable[[CityProfile], float]] = {
    Attribute.POPULATION: lambda p: float(p.population),
    Attribute.AREA: lambda p: p.area_km2,
    Attribute.ECONOMIC_OUTPUT: lambda p: p.gdp_billions,
    Attribute.POINTS_OF_INTEREST: lambda p: float(p.tourist_points),
    Attribute.POPULATION_DENSITY: _derived("population_density"),
    Attribute.OUTPUT_PER_CAPITA: _derived("gdp_per_capita"),
}


def base_value(profile: CityProfile, attribute: Attribute) -> float:
    """
    Returns the raw or derived value of an attribute for a profile.

    Derived attributes must already be computed; this does not compute them.

    Raises:
        UnknownAttribute: attribute is not one of the six.
        MetricsNotComputed: a derived attribute was read too early.
    """
    try:
        accessor = _ACCESSORS[attribute]
    except (KeyError, TypeError):
        raise UnknownAttribute(attribute) from None
    return accessor(profile)


def score(profile: CityProfile, attribute: Attribute) -> float:
    """
    Converts an attribute value into a score where higher always wins.

    Lower-is-better attributes are scored by their reciprocal. A value of 0
    scores 0 instead of infinity, so it is the worst possible score.
    """
    value = base_value(profile, attribute)
    if ordering_rule(attribute) is OrderingRule.LOWER_IS_BETTER:
        return 1.0 / value if value > 0 else 0.0
    return value


def aggregate_score(profile: CityProfile, first: Attribute, second: Attribute) -> float:
    # Scores of different units are summed as-is.
    return score(profile, first) + score(profile, second)
