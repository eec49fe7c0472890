import uuid

import pytest

from skillroster.core.exceptions import (
    ConstraintViolationException,
    ReferentialViolationException,
)
from skillroster.services.skill_service import UserSkillService


@pytest.fixture
def user_skill_service():
    return UserSkillService()


@pytest.mark.asyncio
async def test_create_and_list_skills(db, skill_service):
    baking = await skill_service.create_skill(db, "baking")
    await skill_service.create_skill(db, "archery")

    skills = await skill_service.list_skills(db)

    assert [s.name for s in skills] == ["archery", "baking"]
    assert baking.id in {s.id for s in skills}


@pytest.mark.asyncio
async def test_duplicate_skill_name_is_a_constraint_violation(db, skill_service):
    await skill_service.create_skill(db, "baking")

    with pytest.raises(ConstraintViolationException):
        await skill_service.create_skill(db, "baking")


@pytest.mark.asyncio
async def test_add_skill_twice_is_a_constraint_violation(
    db, make_user, skill_service, user_skill_service
):
    user = await make_user()
    user_id = user.id  # the failed insert rolls back and expires ORM state
    skill = await skill_service.create_skill(db, "baking")

    created = await user_skill_service.add_skill(db, user_id=user_id, skill_id=skill.id)
    assert created.user_id == user_id
    assert created.skill_id == skill.id

    with pytest.raises(ConstraintViolationException):
        await user_skill_service.add_skill(db, user_id=user_id, skill_id=skill.id)

    assert len(await user_skill_service.list_for_user(db, user_id)) == 1


@pytest.mark.asyncio
async def test_add_unknown_skill_is_a_referential_violation(db, make_user, user_skill_service):
    user = await make_user()

    with pytest.raises(ReferentialViolationException):
        await user_skill_service.add_skill(db, user_id=user.id, skill_id=uuid.uuid4())


@pytest.mark.asyncio
async def test_add_skill_for_unknown_user_is_a_referential_violation(
    db, skill_service, user_skill_service
):
    skill = await skill_service.create_skill(db, "baking")

    with pytest.raises(ReferentialViolationException):
        await user_skill_service.add_skill(db, user_id=uuid.uuid4(), skill_id=skill.id)


@pytest.mark.asyncio
async def test_list_for_user_only_returns_that_users_rows(
    db, make_user, skill_service, user_skill_service
):
    alice = await make_user("alice", "pw1")
    bob = await make_user("bob", "pw2")
    skill = await skill_service.create_skill(db, "baking")
    await user_skill_service.add_skill(db, user_id=alice.id, skill_id=skill.id)
    await user_skill_service.add_skill(db, user_id=bob.id, skill_id=skill.id)

    rows = await user_skill_service.list_for_user(db, alice.id)

    assert [row.user_id for row in rows] == [alice.id]


@pytest.mark.asyncio
async def test_remove_missing_association_is_a_no_op(
    db, make_user, skill_service, user_skill_service
):
    user = await make_user()
    skill = await skill_service.create_skill(db, "baking")
    await user_skill_service.add_skill(db, user_id=user.id, skill_id=skill.id)

    await user_skill_service.remove_skill(db, user_id=user.id, user_skill_id=uuid.uuid4())

    assert len(await user_skill_service.list_for_user(db, user.id)) == 1


@pytest.mark.asyncio
async def test_remove_requires_matching_owner(
    db, make_user, skill_service, user_skill_service
):
    alice = await make_user("alice", "pw1")
    bob = await make_user("bob", "pw2")
    skill = await skill_service.create_skill(db, "baking")
    alices = await user_skill_service.add_skill(db, user_id=alice.id, skill_id=skill.id)

    await user_skill_service.remove_skill(db, user_id=bob.id, user_skill_id=alices.id)
    assert len(await user_skill_service.list_for_user(db, alice.id)) == 1

    await user_skill_service.remove_skill(db, user_id=alice.id, user_skill_id=alices.id)
    assert await user_skill_service.list_for_user(db, alice.id) == []
