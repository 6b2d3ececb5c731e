# src/super_trunfo/routers/attributes.py
from typing import List
from fastapi import APIRouter, HTTPException, status

from .. import schemas
from ..constants import ATTRIBUTE_CATALOG, parse_attribute
from ..exceptions import UnknownAttribute

router = APIRouter(
    prefix="/attributes",  # All routes in this router will start with /attributes
    tags=["Attributes"],
    responses={404: {"description": "Not found"}},
)


def _to_display(attribute, info) -> schemas.AttributeDisplay:
    return schemas.AttributeDisplay(id=attribute, name=info.display_name, ordering=info.ordering)


@router.get("/", response_model=List[schemas.AttributeDisplay])
async def read_attributes():
    """
    List the six attributes a match can be played on, in menu order.
    """
    return [_to_display(attribute, info) for attribute, info in ATTRIBUTE_CATALOG.items()]


@router.get("/{attribute_id}", response_model=schemas.AttributeDisplay)
async def read_attribute(attribute_id: int):
    """
    Retrieve the name and ordering rule of one attribute by its menu number.
    """
    try:
        attribute = parse_attribute(attribute_id)
    except UnknownAttribute as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_display(attribute, ATTRIBUTE_CATALOG[attribute])
