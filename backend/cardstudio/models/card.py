"""SQLAlchemy ORM models for CardProfile and CardDesign."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    String,
    Text,
    DateTime,
    Boolean,
    ForeignKey,
    Index,
    func,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cardstudio.db.session import Base


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CardProfile(Base):
    """A set of contact details a user prints on their cards."""

    __tablename__ = "card_profiles"

    id: Mapped[str] = mapped_column(String(255), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    profile_name: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Contact details
    job_title: Mapped[str | None] = mapped_column(Text, nullable=True)
    company_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    secondary_phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    website: Mapped[str | None] = mapped_column(Text, nullable=True)
    address_line1: Mapped[str | None] = mapped_column(Text, nullable=True)
    address_line2: Mapped[str | None] = mapped_column(Text, nullable=True)
    city: Mapped[str | None] = mapped_column(Text, nullable=True)
    state: Mapped[str | None] = mapped_column(Text, nullable=True)
    country: Mapped[str | None] = mapped_column(Text, nullable=True)
    postal_code: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
    )

    # Relationships
    designs: Mapped[list[CardDesign]] = relationship(
        back_populates="profile", cascade="all, delete-orphan"
    )

    __table_args__ = (
        # At most one default profile per user
        Index(
            "uq_card_profiles_default_per_user",
            "user_id",
            unique=True,
            postgresql_where=text("is_default"),
            sqlite_where=text("is_default"),
        ),
    )

    def __repr__(self) -> str:
        return f"<CardProfile {self.profile_name} ({self.id})>"


class CardDesign(Base):
    """A visual variant of one profile's card."""

    __tablename__ = "card_designs"

    id: Mapped[str] = mapped_column(String(255), primary_key=True, default=new_id)
    profile_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("card_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    design_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    template_key: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Presentation config stored as opaque JSON text
    color_palette: Mapped[str | None] = mapped_column(Text, nullable=True)
    font_config: Mapped[str | None] = mapped_column(Text, nullable=True)
    layout_config: Mapped[str | None] = mapped_column(Text, nullable=True)
    logo_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    is_favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_primary_design: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
    )

    # Relationships
    profile: Mapped[CardProfile] = relationship(back_populates="designs")

    __table_args__ = (
        # At most one primary design per (user, profile)
        Index(
            "uq_card_designs_primary_per_profile",
            "user_id",
            "profile_id",
            unique=True,
            postgresql_where=text("is_primary_design"),
            sqlite_where=text("is_primary_design"),
        ),
    )

    def __repr__(self) -> str:
        return f"<CardDesign {self.design_name} ({self.id})>"
