"""
Leads Router

Public property-request submission and admin access to captured leads.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.mentors.api.auth import require_admin
from src.mentors.api.dependencies import get_db
from src.mentors.api.schemas import (
    LeadItem,
    LeadListResponse,
    LeadRequest,
    LeadResponse,
    OkResponse,
    error_responses,
)
from src.mentors.db.repository import LeadRepository
from src.mentors.utils.logger import get_logger
from src.mentors.utils.validation import (
    is_lead_budget_in_range,
    is_valid_phone,
    normalize_budget,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["leads"], responses=error_responses(400, 401))


@router.post("/requests", response_model=LeadResponse)
def submit_request(body: LeadRequest, db: Session = Depends(get_db)):
    """
    Capture a customer request as a lead.

    Args:
        body: Contact details and property criteria
        db: Database session

    Returns:
        Stored lead with the budget formatted for display

    Raises:
        HTTPException: 400 on missing contact info, bad phone or out-of-range budget
    """
    if not (body.username and body.email and body.phone):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing user info.")
    if not is_valid_phone(body.phone):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid phone number.")

    budget = normalize_budget(body.budget)
    if not is_lead_budget_in_range(budget):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Budget must be between 1,000,000 and 1,000,000,000.",
        )

    lead = LeadRepository().insert(
        db,
        {
            "username": body.username,
            "email": body.email,
            "phone": body.phone,
            "password": body.password,
            "destination": body.destination,
            "property_type": body.property_type,
            "developer": body.developer or "",
            "budget": budget,
            "delivery": body.delivery,
            "looking_for": body.looking_for,
        },
    )
    db.commit()
    logger.info("lead_captured", lead_id=lead.id, developer=lead.developer)
    return LeadResponse(lead=LeadItem.model_validate(lead))


@router.get("/leads", response_model=LeadListResponse, dependencies=[Depends(require_admin)])
def list_leads(db: Session = Depends(get_db)):
    """List all leads, newest first."""
    leads = LeadRepository().list_all_ordered_by_created_desc(db)
    return LeadListResponse(leads=[LeadItem.model_validate(lead) for lead in leads])


@router.delete("/leads/{lead_id}", response_model=OkResponse, dependencies=[Depends(require_admin)])
def delete_lead(lead_id: int, db: Session = Depends(get_db)):
    """Delete a lead."""
    LeadRepository().delete_by_id(db, lead_id)
    db.commit()
    return OkResponse()
