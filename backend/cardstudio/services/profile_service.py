"""Profile service — business logic for card profile CRUD."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cardstudio.auth import CurrentUser
from cardstudio.errors import ActionError
from cardstudio.models.card import CardProfile, new_id
from cardstudio.schemas.profile import ProfileCreate, ProfileUpdate
from cardstudio.services.flags import clear_flag, merge_changes, provided_fields

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, db: AsyncSession, user: CurrentUser):
        self.db = db
        self.user = user

    async def create(self, data: ProfileCreate) -> CardProfile:
        if data.id and await self.db.get(CardProfile, data.id) is not None:
            raise ActionError.id_taken("Profile")

        if data.is_default:
            await clear_flag(
                self.db, CardProfile.is_default, CardProfile.user_id == self.user.id
            )

        fields = data.model_dump(exclude={"id", "is_default"})
        profile = CardProfile(
            id=data.id or new_id(),
            user_id=self.user.id,
            is_default=bool(data.is_default),
            **fields,
        )
        self.db.add(profile)
        await self.db.flush()
        logger.info("Created profile %s for user %s", profile.id, self.user.id)
        return profile

    async def get_owned(self, profile_id: str) -> CardProfile:
        """Fetch a profile owned by the caller; anything else is NOT_FOUND."""
        stmt = select(CardProfile).where(
            CardProfile.id == profile_id, CardProfile.user_id == self.user.id
        )
        result = await self.db.execute(stmt)
        profile = result.scalar_one_or_none()
        if not profile:
            logger.debug("Profile %s not owned by %s", profile_id, self.user.id)
            raise ActionError.profile_not_found()
        return profile

    async def list_all(self) -> list[CardProfile]:
        stmt = (
            select(CardProfile)
            .where(CardProfile.user_id == self.user.id)
            .order_by(CardProfile.created_at, CardProfile.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def update(self, profile_id: str, data: ProfileUpdate) -> CardProfile:
        profile = await self.get_owned(profile_id)

        if data.is_default:
            await clear_flag(
                self.db,
                CardProfile.is_default,
                CardProfile.user_id == self.user.id,
                exclude_id=profile.id,
            )

        if not merge_changes(profile, provided_fields(data)):
            return profile
        await self.db.flush()
        return profile

    async def delete(self, profile_id: str) -> CardProfile:
        """Delete a profile together with its designs."""
        profile = await self.get_owned(profile_id)
        await self.db.delete(profile)
        await self.db.flush()
        logger.info("Deleted profile %s for user %s", profile.id, self.user.id)
        return profile
