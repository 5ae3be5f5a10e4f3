"""
Authentication Router

Endpoints for user signup/login and the admin password check.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from config.settings import Settings
from src.mentors.api.auth import is_admin_secret
from src.mentors.api.dependencies import get_db, get_settings
from src.mentors.api.schemas import (
    AdminLoginRequest,
    LoginRequest,
    OkResponse,
    SignupRequest,
    UserPublic,
    UserResponse,
    error_responses,
)
from src.mentors.db.exceptions import DuplicateRecordError
from src.mentors.db.repository import UserRepository
from src.mentors.utils.logger import get_logger
from src.mentors.utils.validation import is_valid_phone

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["authentication"], responses=error_responses(400, 401, 409))

USERNAME_TAKEN = "Username already exists."


@router.post("/admin/login", response_model=OkResponse)
def admin_login(body: AdminLoginRequest, app_settings: Settings = Depends(get_settings)):
    """
    Check the admin password entered on the admin page.

    Raises:
        HTTPException: 401 if the password is wrong
    """
    if not is_admin_secret(body.password, app_settings):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Wrong password.")
    return OkResponse()


@router.post("/signup", response_model=UserResponse)
def signup(body: SignupRequest, db: Session = Depends(get_db)):
    """
    Register a user account.

    Args:
        body: Username, password, phone and email
        db: Database session

    Returns:
        Created user (without password)

    Raises:
        HTTPException: 400 on missing fields or bad phone, 409 if the username is taken
    """
    if not (body.username and body.password and body.phone and body.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="All fields are required.")
    if not is_valid_phone(body.phone):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid phone number.")

    repo = UserRepository()
    if repo.find_by_username_case_insensitive(db, body.username):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=USERNAME_TAKEN)

    try:
        user = repo.insert(
            db,
            username=body.username,
            password=body.password,
            phone=body.phone,
            email=body.email,
        )
    except DuplicateRecordError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=USERNAME_TAKEN)
    db.commit()

    logger.info("user_signed_up", user_id=user.id)
    return UserResponse(user=UserPublic.model_validate(user))


@router.post("/login", response_model=UserResponse, response_model_exclude_none=True)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    """
    Log a user in with username (any case) and password.

    Raises:
        HTTPException: 400 on missing fields, 401 if no account matches
    """
    if not (body.username and body.password):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username and password are required.",
        )

    user = UserRepository().find_by_username_and_password(db, body.username, body.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials.")

    return UserResponse(
        user=UserPublic(username=user.username, email=user.email, phone=user.phone)
    )
