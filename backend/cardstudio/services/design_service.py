"""Design service — business logic for card design CRUD."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cardstudio.auth import CurrentUser
from cardstudio.errors import ActionError
from cardstudio.models.card import CardDesign, CardProfile, new_id
from cardstudio.schemas.design import DesignCreate, DesignUpdate
from cardstudio.services.flags import clear_flag, merge_changes, provided_fields
from cardstudio.services.profile_service import ProfileService

logger = logging.getLogger(__name__)


class DesignService:
    def __init__(self, db: AsyncSession, user: CurrentUser):
        self.db = db
        self.user = user
        self.profiles = ProfileService(db, user)

    async def _clear_primary(self, profile_id: str, exclude_id: str | None = None):
        await clear_flag(
            self.db,
            CardDesign.is_primary_design,
            CardDesign.profile_id == profile_id,
            CardDesign.user_id == self.user.id,
            exclude_id=exclude_id,
        )

    async def create(self, data: DesignCreate) -> CardDesign:
        profile = await self.profiles.get_owned(data.profile_id)

        if data.id and await self.db.get(CardDesign, data.id) is not None:
            raise ActionError.id_taken("Design")

        if data.is_primary_design:
            await self._clear_primary(profile.id)

        fields = data.model_dump(exclude={"id", "is_favorite", "is_primary_design"})
        design = CardDesign(
            id=data.id or new_id(),
            user_id=self.user.id,
            is_favorite=bool(data.is_favorite),
            is_primary_design=bool(data.is_primary_design),
            **fields,
        )
        self.db.add(design)
        await self.db.flush()
        logger.info("Created design %s under profile %s", design.id, profile.id)
        return design

    async def get_owned(self, design_id: str) -> CardDesign:
        stmt = select(CardDesign).where(
            CardDesign.id == design_id, CardDesign.user_id == self.user.id
        )
        result = await self.db.execute(stmt)
        design = result.scalar_one_or_none()
        if not design:
            logger.debug("Design %s not owned by %s", design_id, self.user.id)
            raise ActionError.design_not_found()
        return design

    async def list_all(self, profile_id: str | None = None) -> list[CardDesign]:
        """List the caller's designs, optionally for one owned profile.

        Without a filter, designs whose profile the caller no longer owns
        are left out.
        """
        owned_profiles = select(CardProfile.id).where(
            CardProfile.user_id == self.user.id
        )
        stmt = select(CardDesign).where(CardDesign.user_id == self.user.id)

        if profile_id:
            await self.profiles.get_owned(profile_id)
            stmt = stmt.where(CardDesign.profile_id == profile_id)
        else:
            stmt = stmt.where(CardDesign.profile_id.in_(owned_profiles))

        stmt = stmt.order_by(CardDesign.created_at, CardDesign.id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def update(self, design_id: str, data: DesignUpdate) -> CardDesign:
        profile = await self.profiles.get_owned(data.profile_id)

        design = await self.get_owned(design_id)
        if design.profile_id != profile.id:
            raise ActionError.design_not_found()

        if data.is_primary_design:
            await self._clear_primary(profile.id, exclude_id=design.id)

        if not merge_changes(design, provided_fields(data, "profile_id")):
            return design
        await self.db.flush()
        return design

    async def delete(self, design_id: str) -> CardDesign:
        design = await self.get_owned(design_id)
        await self.db.delete(design)
        await self.db.flush()
        logger.info("Deleted design %s for user %s", design.id, self.user.id)
        return design
