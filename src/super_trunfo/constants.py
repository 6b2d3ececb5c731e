from enum import Enum
from typing import Dict, Iterator, NamedTuple, Tuple, Union

from .exceptions import UnknownAttribute


class OrderingRule(str, Enum):
    """Whether a bigger raw value wins or loses a comparison."""
    HIGHER_IS_BETTER = 'higher-is-better'
    LOWER_IS_BETTER = 'lower-is-better'


class Attribute(int, Enum):
    """
    The six comparable card attributes.
    Values match the numbers shown in the attribute menu.
    """
    POPULATION = 1
    AREA = 2
    ECONOMIC_OUTPUT = 3
    POINTS_OF_INTEREST = 4
    POPULATION_DENSITY = 5
    OUTPUT_PER_CAPITA = 6


class AttributeInfo(NamedTuple):
    display_name: str
    ordering: OrderingRule


ATTRIBUTE_CATALOG: Dict[Attribute, AttributeInfo] = {
    Attribute.POPULATION: AttributeInfo("Population", OrderingRule.HIGHER_IS_BETTER),
    Attribute.AREA: AttributeInfo("Area", OrderingRule.HIGHER_IS_BETTER),
    Attribute.ECONOMIC_OUTPUT: AttributeInfo("GDP", OrderingRule.HIGHER_IS_BETTER),
    Attribute.POINTS_OF_INTEREST: AttributeInfo("Tourist Points", OrderingRule.HIGHER_IS_BETTER),
    Attribute.POPULATION_DENSITY: AttributeInfo("Population Density", OrderingRule.LOWER_IS_BETTER),
    Attribute.OUTPUT_PER_CAPITA: AttributeInfo("GDP per Capita", OrderingRule.HIGHER_IS_BETTER),
}


def parse_attribute(value: Union[int, str, Attribute]) -> Attribute:
    """
    Converts a menu number (int or numeric text) into an Attribute.

    Raises:
        UnknownAttribute: if the value is not one of the six menu numbers.
    """
    if isinstance(value, Attribute):
        return value
    try:
        return Attribute(int(value))
    except (TypeError, ValueError):
        raise UnknownAttribute(value) from None


def _info(attribute) -> AttributeInfo:
    try:
        return ATTRIBUTE_CATALOG[attribute]
    except (KeyError, TypeError):
        raise UnknownAttribute(attribute) from None


def display_name(attribute: Attribute) -> str:
    """Returns the human readable name of an attribute."""
    return _info(attribute).display_name


def ordering_rule(attribute: Attribute) -> OrderingRule:
    """Returns whether higher or lower raw values are better for an attribute."""
    return _info(attribute).ordering


def menu_entries() -> Iterator[Tuple[int, str]]:
    """Yields (number, label) pairs for the attribute selection menu."""
    for attribute, info in ATTRIBUTE_CATALOG.items():
        label = info.display_name
        if info.ordering is OrderingRule.LOWER_IS_BETTER:
            label = f"{label} (lower is better)"
        yield attribute.value, label
