"""
SQLAlchemy ORM Models

One table per resource: users, developers, availability listings and leads.
Availability and leads reference developers by name, not by foreign key.
"""
from decimal import Decimal
from typing import Optional

from sqlalchemy import String, Numeric, Text, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.mentors.db.base import Base, IntegerIdMixin, CreatedAtMixin


class User(Base, IntegerIdMixin, CreatedAtMixin):
    """
    Registered end user.

    Usernames are unique; the application compares them case-insensitively.
    """
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="passlib hash"
    )
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"


class Developer(Base, IntegerIdMixin):
    """Real-estate developer name offered in the filter and lead forms."""
    __tablename__ = "developers"

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Developer(id={self.id}, name={self.name})>"


class Availability(Base, IntegerIdMixin, CreatedAtMixin):
    """
    Property availability listing managed by the admin.
    """
    __tablename__ = "availability"

    destination: Mapped[str] = mapped_column(String(255), nullable=False)
    property_type: Mapped[str] = mapped_column(String(255), nullable=False)
    budget: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    delivery: Mapped[str] = mapped_column(String(255), nullable=False)
    developer: Mapped[str] = mapped_column(String(255), nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint("budget >= 0", name="check_availability_budget_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<Availability(id={self.id}, destination={self.destination}, budget={self.budget})>"


class Lead(Base, IntegerIdMixin, CreatedAtMixin):
    """
    Customer inquiry submitted from the public request form.
    """
    __tablename__ = "leads"

    username: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    password: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        comment="passlib hash, empty when the visitor gave none"
    )
    destination: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    property_type: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    developer: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    budget: Mapped[Optional[Decimal]] = mapped_column(Numeric(18, 2), nullable=True)
    delivery: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    looking_for: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        CheckConstraint("budget >= 0", name="check_lead_budget_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<Lead(id={self.id}, username={self.username}, budget={self.budget})>"
