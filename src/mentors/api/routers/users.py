"""
Users Router

Admin-only listing and removal of registered users.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.mentors.api.auth import require_admin
from src.mentors.api.dependencies import get_db
from src.mentors.api.schemas import OkResponse, UserAdminItem, UserListResponse, error_responses
from src.mentors.db.repository import UserRepository

router = APIRouter(
    prefix="/api/users",
    tags=["users"],
    dependencies=[Depends(require_admin)],
    responses=error_responses(401),
)


@router.get("", response_model=UserListResponse)
def list_users(db: Session = Depends(get_db)):
    """List all users, newest first. Password hashes are not returned."""
    users = UserRepository().list_all_ordered_by_created_desc(db)
    return UserListResponse(users=[UserAdminItem.model_validate(user) for user in users])


@router.delete("/{user_id}", response_model=OkResponse)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    """Delete a user. Unknown ids succeed silently."""
    UserRepository().delete_by_id(db, user_id)
    db.commit()
    return OkResponse()
