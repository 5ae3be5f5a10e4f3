"""
Availability Router

Public listing feed for the filter page and admin maintenance of listings.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.mentors.api.auth import require_admin
from src.mentors.api.dependencies import get_db
from src.mentors.api.schemas import (
    AvailabilityItem,
    AvailabilityListResponse,
    AvailabilityPayload,
    AvailabilityResponse,
    OkResponse,
    error_responses,
)
from src.mentors.db.exceptions import RecordNotFoundError
from src.mentors.db.repository import AvailabilityRepository
from src.mentors.utils.validation import normalize_budget, is_positive_budget

router = APIRouter(
    prefix="/api/availability",
    tags=["availability"],
    responses=error_responses(400, 401, 404),
)

REQUIRED_FIELDS_MESSAGE = "Destination, property type, developer, budget, and delivery are required."


def validate_availability(body: AvailabilityPayload) -> Dict[str, Any]:
    """
    Check an availability payload and convert it to column values.

    Args:
        body: Request body

    Returns:
        Column values with the budget normalized to a Decimal

    Raises:
        HTTPException: 400 if a required field is missing or the budget is not positive
    """
    if not (body.destination and body.property_type and body.budget and body.delivery and body.developer):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=REQUIRED_FIELDS_MESSAGE)

    budget = normalize_budget(body.budget)
    if not is_positive_budget(budget):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Budget must be a positive number.")

    return {
        "destination": body.destination,
        "property_type": body.property_type,
        "budget": budget,
        "delivery": body.delivery,
        "developer": body.developer,
        "notes": body.notes or "",
    }


@router.get("", response_model=AvailabilityListResponse)
def list_availability(db: Session = Depends(get_db)):
    """List all listings, newest first, with budgets formatted for display."""
    items = AvailabilityRepository().list_all_ordered_by_created_desc(db)
    return AvailabilityListResponse(items=[AvailabilityItem.model_validate(item) for item in items])


@router.post("", response_model=AvailabilityResponse, dependencies=[Depends(require_admin)])
def create_availability(body: AvailabilityPayload, db: Session = Depends(get_db)):
    """Create a listing."""
    item = AvailabilityRepository().insert(db, validate_availability(body))
    db.commit()
    return AvailabilityResponse(item=AvailabilityItem.model_validate(item))


@router.put("/{item_id}", response_model=AvailabilityResponse, dependencies=[Depends(require_admin)])
def update_availability(item_id: int, body: AvailabilityPayload, db: Session = Depends(get_db)):
    """
    Replace a listing's fields.

    Raises:
        HTTPException: 400 on invalid input, 404 if the listing does not exist
    """
    values = validate_availability(body)
    try:
        item = AvailabilityRepository().update_by_id(db, item_id, values)
    except RecordNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Availability not found.")
    db.commit()
    return AvailabilityResponse(item=AvailabilityItem.model_validate(item))


@router.delete("/{item_id}", response_model=OkResponse, dependencies=[Depends(require_admin)])
def delete_availability(item_id: int, db: Session = Depends(get_db)):
    """Delete a listing."""
    AvailabilityRepository().delete_by_id(db, item_id)
    db.commit()
    return OkResponse()
