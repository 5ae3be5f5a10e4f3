"""
Developers Router

Public developer list plus admin create/delete.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.mentors.api.auth import require_admin
from src.mentors.api.dependencies import get_db
from src.mentors.api.schemas import (
    DeveloperCreate,
    DeveloperItem,
    DeveloperListResponse,
    DeveloperResponse,
    OkResponse,
    error_responses,
)
from src.mentors.db.exceptions import DuplicateRecordError
from src.mentors.db.repository import DeveloperRepository
from src.mentors.utils.validation import clean_text

router = APIRouter(
    prefix="/api/developers",
    tags=["developers"],
    responses=error_responses(400, 401, 409),
)


@router.get("", response_model=DeveloperListResponse)
def list_developers(db: Session = Depends(get_db)):
    """List developers, most recently added first."""
    developers = DeveloperRepository().list_all_ordered_by_id_desc(db)
    return DeveloperListResponse(
        developers=[DeveloperItem.model_validate(developer) for developer in developers]
    )


@router.post("", response_model=DeveloperResponse, dependencies=[Depends(require_admin)])
def create_developer(body: DeveloperCreate, db: Session = Depends(get_db)):
    """
    Add a developer name.

    Raises:
        HTTPException: 400 if the name is blank, 409 if it already exists
    """
    name = clean_text(body.name)
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Developer name is required.")

    try:
        developer = DeveloperRepository().insert_unique(db, name)
    except DuplicateRecordError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Developer already exists.")
    db.commit()

    return DeveloperResponse(developer=DeveloperItem.model_validate(developer))


@router.delete("/{developer_id}", response_model=OkResponse, dependencies=[Depends(require_admin)])
def delete_developer(developer_id: int, db: Session = Depends(get_db)):
    """Delete a developer. Listings and leads keep the name they were saved with."""
    DeveloperRepository().delete_by_id(db, developer_id)
    db.commit()
    return OkResponse()
