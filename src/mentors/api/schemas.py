"""
Pydantic Schemas for API Request/Response Models

These schemas define the JSON structure for API endpoints. Field names are
camelCase on the wire to match what the static pages send and read.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from src.mentors.utils.formatting import format_budget

BudgetInput = Union[str, int, float, None]


class CamelModel(BaseModel):
    """Base schema accepting and emitting camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ===========================================
# REQUEST BODIES
# ===========================================

class RequestModel(CamelModel):
    """
    Base for request bodies.

    Every field is optional and JSON numbers are accepted as text, so the
    handlers' own checks produce the field-specific 400 messages instead of
    a generic validation error.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)


class SignupRequest(RequestModel):
    """Signup form."""
    username: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class LoginRequest(RequestModel):
    """User login form."""
    username: Optional[str] = None
    password: Optional[str] = None


class AdminLoginRequest(RequestModel):
    """Admin login form."""
    password: Optional[str] = None


class DeveloperCreate(RequestModel):
    """New developer name."""
    name: Optional[str] = None


class AvailabilityPayload(RequestModel):
    """Availability create/update body."""
    destination: Optional[str] = None
    property_type: Optional[str] = None
    budget: BudgetInput = None
    delivery: Optional[str] = None
    developer: Optional[str] = None
    notes: Optional[str] = None


class LeadRequest(RequestModel):
    """Public property request (lead) form."""
    username: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    destination: Optional[str] = None
    property_type: Optional[str] = None
    developer: Optional[str] = None
    budget: BudgetInput = None
    delivery: Optional[str] = None
    looking_for: Optional[str] = None


# ===========================================
# RECORDS
# ===========================================

class UserPublic(CamelModel):
    """User returned from signup and login."""
    id: Optional[int] = None
    username: str
    email: str
    phone: str


class UserAdminItem(CamelModel):
    """User row in the admin list."""
    id: int
    username: str
    phone: str
    email: str
    created_at: Optional[datetime] = None


class DeveloperItem(CamelModel):
    """Developer record."""
    id: int
    name: str


class BudgetDisplayModel(CamelModel):
    """Record whose numeric budget is rendered as a grouped string."""
    budget: str

    @field_validator("budget", mode="before")
    @classmethod
    def format_stored_budget(cls, value):
        if isinstance(value, str):
            return value
        return format_budget(value)


class AvailabilityItem(BudgetDisplayModel):
    """Availability listing as shown on the filter page."""
    id: int
    destination: str
    property_type: str
    delivery: str
    developer: str
    notes: str = ""
    created_at: Optional[datetime] = None

    @field_validator("notes", mode="before")
    @classmethod
    def default_notes(cls, value):
        return value or ""


class LeadItem(BudgetDisplayModel):
    """Lead as shown to the admin. The stored password hash is never included."""
    id: int
    username: str
    email: str
    phone: str
    destination: Optional[str] = None
    property_type: Optional[str] = None
    developer: Optional[str] = None
    delivery: Optional[str] = None
    looking_for: Optional[str] = None
    created_at: Optional[datetime] = None


# ===========================================
# ENVELOPES
# ===========================================

class OkResponse(BaseModel):
    """Bare success envelope."""
    ok: bool = True


class UserResponse(OkResponse):
    user: UserPublic


class UserListResponse(OkResponse):
    users: List[UserAdminItem]


class DeveloperResponse(OkResponse):
    developer: DeveloperItem


class DeveloperListResponse(OkResponse):
    developers: List[DeveloperItem]


class AvailabilityResponse(OkResponse):
    item: AvailabilityItem


class AvailabilityListResponse(OkResponse):
    items: List[AvailabilityItem]


class LeadResponse(OkResponse):
    lead: LeadItem


class LeadListResponse(OkResponse):
    leads: List[LeadItem]


class ErrorResponse(BaseModel):
    """Error envelope returned for every 4xx/5xx."""
    error: str


def error_responses(*status_codes: int) -> Dict[int, Dict[str, Any]]:
    """OpenAPI `responses` entries documenting the error envelope for the given statuses."""
    return {code: {"model": ErrorResponse} for code in status_codes}


class HealthCheck(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str
    database: str = "connected"
    timestamp: datetime
