"""Tests for card design CRUD, listing filters and the primary-design rule."""

import pytest

from cardstudio.errors import ActionError, ErrorCode
from cardstudio.models.card import CardDesign
from cardstudio.schemas.design import DesignCreate, DesignUpdate
from cardstudio.schemas.profile import ProfileCreate


async def _profile(profiles_for, user, name: str = "Main"):
    return await profiles_for(user).create(
        ProfileCreate(profile_name=name, full_name="Grace Hopper")
    )


@pytest.fixture
async def profile(profiles_for, alice):
    return await _profile(profiles_for, alice)


# ─── Create ───


async def test_create_design_under_own_profile(designs_for, alice, profile):
    design = await designs_for(alice).create(
        DesignCreate(
            profile_id=profile.id,
            design_name="Dark minimal",
            template_key="minimal-01",
            color_palette='{"bg": "#111", "fg": "#eee"}',
        )
    )

    assert design.user_id == alice.id
    assert design.profile_id == profile.id
    assert design.color_palette == '{"bg": "#111", "fg": "#eee"}'
    assert design.is_favorite is False
    assert design.is_primary_design is False


async def test_create_design_on_foreign_profile_is_not_found(
    designs_for, bob, profile
):
    with pytest.raises(ActionError) as exc_info:
        await designs_for(bob).create(DesignCreate(profile_id=profile.id))
    assert exc_info.value.code == ErrorCode.NOT_FOUND
    assert exc_info.value.message == "Profile not found."


async def test_new_primary_design_clears_previous(db, designs_for, alice, profile):
    service = designs_for(alice)
    first = await service.create(
        DesignCreate(profile_id=profile.id, is_primary_design=True)
    )
    second = await service.create(
        DesignCreate(profile_id=profile.id, is_primary_design=True)
    )

    await db.refresh(first)
    await db.refresh(second)
    assert first.is_primary_design is False
    assert second.is_primary_design is True


async def test_primary_flag_is_scoped_per_profile(
    db, profiles_for, designs_for, alice, profile
):
    other = await _profile(profiles_for, alice, "Freelance")
    service = designs_for(alice)
    a = await service.create(DesignCreate(profile_id=profile.id, is_primary_design=True))
    await service.create(DesignCreate(profile_id=other.id, is_primary_design=True))

    await db.refresh(a)
    assert a.is_primary_design is True


async def test_reused_design_id_is_conflict(designs_for, alice, profile):
    service = designs_for(alice)
    await service.create(DesignCreate(id="d1", profile_id=profile.id))

    with pytest.raises(ActionError) as exc_info:
        await service.create(DesignCreate(id="d1", profile_id=profile.id))
    assert exc_info.value.code == ErrorCode.CONFLICT


# ─── Update ───


async def test_update_merges_provided_fields(designs_for, alice, profile):
    service = designs_for(alice)
    design = await service.create(
        DesignCreate(profile_id=profile.id, design_name="Gradient", logo_url="/logo.png")
    )

    updated = await service.update(
        design.id, DesignUpdate(profile_id=profile.id, is_favorite=True)
    )

    assert updated.is_favorite is True
    assert updated.design_name == "Gradient"
    assert updated.logo_url == "/logo.png"


async def test_update_with_only_profile_id_is_noop(designs_for, alice, profile):
    service = designs_for(alice)
    design = await service.create(DesignCreate(profile_id=profile.id))
    stamp = design.updated_at

    same = await service.update(design.id, DesignUpdate(profile_id=profile.id))

    assert same is design
    assert same.updated_at == stamp


async def test_update_to_primary_clears_siblings(db, designs_for, alice, profile):
    service = designs_for(alice)
    a = await service.create(DesignCreate(profile_id=profile.id, is_primary_design=True))
    b = await service.create(DesignCreate(profile_id=profile.id))

    await service.update(b.id, DesignUpdate(profile_id=profile.id, is_primary_design=True))

    await db.refresh(a)
    await db.refresh(b)
    assert a.is_primary_design is False
    assert b.is_primary_design is True


async def test_update_with_mismatched_profile_is_not_found(
    profiles_for, designs_for, alice, profile
):
    other = await _profile(profiles_for, alice, "Other")
    design = await designs_for(alice).create(DesignCreate(profile_id=profile.id))

    with pytest.raises(ActionError) as exc_info:
        await designs_for(alice).update(
            design.id, DesignUpdate(profile_id=other.id, design_name="Moved")
        )
    assert exc_info.value.message == "Design not found."


async def test_update_foreign_design_is_not_found(
    profiles_for, designs_for, alice, bob, profile
):
    design = await designs_for(alice).create(DesignCreate(profile_id=profile.id))
    bobs_profile = await _profile(profiles_for, bob)

    with pytest.raises(ActionError) as exc_info:
        await designs_for(bob).update(
            design.id, DesignUpdate(profile_id=bobs_profile.id, design_name="Mine now")
        )
    assert exc_info.value.code == ErrorCode.NOT_FOUND


# ─── List / get / delete ───


async def test_list_filters_by_profile(profiles_for, designs_for, alice, profile):
    other = await _profile(profiles_for, alice, "Other")
    service = designs_for(alice)
    a = await service.create(DesignCreate(profile_id=profile.id))
    b = await service.create(DesignCreate(profile_id=other.id))

    assert {d.id for d in await service.list_all()} == {a.id, b.id}
    assert [d.id for d in await service.list_all(profile_id=other.id)] == [b.id]


async def test_list_with_foreign_profile_is_not_found(designs_for, bob, profile):
    with pytest.raises(ActionError) as exc_info:
        await designs_for(bob).list_all(profile_id=profile.id)
    assert exc_info.value.code == ErrorCode.NOT_FOUND


async def test_list_excludes_other_users_designs(
    profiles_for, designs_for, alice, bob, profile
):
    await designs_for(alice).create(DesignCreate(profile_id=profile.id))
    assert await designs_for(bob).list_all() == []


async def test_get_foreign_design_is_not_found(designs_for, alice, bob, profile):
    design = await designs_for(alice).create(DesignCreate(profile_id=profile.id))

    with pytest.raises(ActionError):
        await designs_for(bob).get_owned(design.id)


async def test_delete_foreign_design_is_not_found(db, designs_for, alice, bob, profile):
    design = await designs_for(alice).create(DesignCreate(profile_id=profile.id))

    with pytest.raises(ActionError) as exc_info:
        await designs_for(bob).delete(design.id)
    assert exc_info.value.code == ErrorCode.NOT_FOUND
    assert exc_info.value.message == "Design not found."
    assert await db.get(CardDesign, design.id) is not None


async def test_delete_design(db, designs_for, alice, profile):
    service = designs_for(alice)
    design = await service.create(DesignCreate(profile_id=profile.id))

    deleted = await service.delete(design.id)

    assert deleted.id == design.id
    assert await db.get(CardDesign, design.id) is None


async def test_deleting_profile_removes_its_designs(
    db, profiles_for, designs_for, alice, profile
):
    design = await designs_for(alice).create(DesignCreate(profile_id=profile.id))

    await profiles_for(alice).delete(profile.id)

    assert await db.get(CardDesign, design.id) is None
    assert await designs_for(alice).list_all() == []
