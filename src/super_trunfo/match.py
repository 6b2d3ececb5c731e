import logging
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel

from .constants import Attribute, display_name, parse_attribute
from .exceptions import DuplicateAttributeSelection
from .metrics import compute_derived
from .models import CityProfile
from .scoring import aggregate_score, base_value

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    FIRST = 'first'
    SECOND = 'second'
    TIE = 'tie'


class MatchSelection(BaseModel):
    """Two cards and the two attributes they will be compared on."""
    first: CityProfile
    second: CityProfile
    attributes: Tuple[Attribute, Attribute]


class AttributeComparison(BaseModel):
    attribute: Attribute
    name: str
    first_value: float
    second_value: float


class MatchResult(BaseModel):
    first: CityProfile
    second: CityProfile
    comparisons: List[AttributeComparison]
    first_score: float
    second_score: float
    outcome: Outcome

    @property
    def winner(self) -> Optional[CityProfile]:
        """The winning card, or None on a tie."""
        if self.outcome is Outcome.FIRST:
            return self.first
        if self.outcome is Outcome.SECOND:
            return self.second
        return None


def ensure_distinct(first: Attribute, second: Attribute) -> None:
    """
    Raises:
        DuplicateAttributeSelection: if both attributes are the same.
    """
    if first == second:
        raise DuplicateAttributeSelection(first)


def evaluate(selection: MatchSelection) -> MatchResult:
    """
    Compares two cards on the two selected attributes.

    Derived metrics are computed for any card that does not have them yet.
    The card with the strictly higher aggregate score wins; equal scores tie.
    """
    attr1, attr2 = selection.attributes
    ensure_distinct(attr1, attr2)

    for profile in (selection.first, selection.second):
        if not profile.metrics_computed:
            compute_derived(profile)

    comparisons = [
        AttributeComparison(
            attribute=attribute,
            name=display_name(attribute),
            first_value=base_value(selection.first, attribute),
            second_value=base_value(selection.second, attribute),
        )
        for attribute in (attr1, attr2)
    ]

    first_score = aggregate_score(selection.first, attr1, attr2)
    second_score = aggregate_score(selection.second, attr1, attr2)

    if first_score > second_score:
        outcome = Outcome.FIRST
    elif second_score > first_score:
        outcome = Outcome.SECOND
    else:
        outcome = Outcome.TIE

    logger.info(
        "Match %s vs %s on %s + %s: %.4f to %.4f (%s)",
        selection.first.city_name, selection.second.city_name,
        attr1.name, attr2.name, first_score, second_score, outcome.value,
    )
    return MatchResult(
        first=selection.first,
        second=selection.second,
        comparisons=comparisons,
        first_score=first_score,
        second_score=second_score,
        outcome=outcome,
    )


def evaluate_match(first: CityProfile, second: CityProfile, attr1, attr2) -> MatchResult:
    """Shortcut that accepts raw menu numbers for the two attributes."""
    attributes = (parse_attribute(attr1), parse_attribute(attr2))
    ensure_distinct(*attributes)
    return evaluate(MatchSelection(first=first, second=second, attributes=attributes))
