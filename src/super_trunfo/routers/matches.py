# src/super_trunfo/routers/matches.py
from fastapi import APIRouter, HTTPException, status

from .. import schemas
from ..exceptions import DuplicateAttributeSelection
from ..match import MatchResult, MatchSelection, evaluate
from ..metrics import compute_derived
from ..models import CityProfile, CityProfileBase

router = APIRouter(
    prefix="/matches",
    tags=["Matches"],
)


def _to_profile(card: CityProfileBase) -> CityProfile:
    # Derived fields are never taken from the request body.
    return CityProfile(**card.model_dump())


@router.post("/derived", response_model=CityProfile, summary="Compute a card's derived metrics")
async def derive_metrics(card: CityProfileBase):
    """
    Returns the card with population density and GDP per capita filled in.
    """
    profile = _to_profile(card)
    compute_derived(profile)
    return profile


@router.post("/", response_model=MatchResult, summary="Play a match between two cards")
async def play_match(match_input: schemas.MatchRequest):
    """
    Compares two cards on two different attributes.

    - **first**, **second**: the raw city cards.
    - **attributes**: two different attribute ids (1-6).

    Population density is the only attribute where the lower value wins.
    """
    selection = MatchSelection(
        first=_to_profile(match_input.first),
        second=_to_profile(match_input.second),
        attributes=match_input.attributes,
    )
    try:
        return evaluate(selection)
    except DuplicateAttributeSelection as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
