import pytest
from sqlalchemy.exc import OperationalError
from skillmatch.core.errors import InputValidationError, NotFoundError, StorageError
from skillmatch.models import Skill, UserSkill
from skillmatch.services.skill_service import SkillService
from conftest import AUTH_HEADERS, AUTH_USER_ID, make_result


@pytest.mark.asyncio
async def test_list_skills(mock_session):
    skills = [Skill(id=2, name="Guitar"), Skill(id=1, name="Python")]
    mock_session.execute.return_value = make_result(scalars=skills)

    assert await SkillService(mock_session).list_skills() == skills


@pytest.mark.asyncio
async def test_list_skills_storage_failure(mock_session):
    mock_session.execute.side_effect = OperationalError("SELECT", {}, Exception("db down"))

    with pytest.raises(StorageError):
        await SkillService(mock_session).list_skills()


@pytest.mark.asyncio
async def test_add_user_skill_inserts_once(mock_session):
    mock_session.get.return_value = Skill(id=1, name="Python")

    user_skill = await SkillService(mock_session).add_user_skill("u", 1, "want")

    assert (user_skill.user_id, user_skill.skill_id, user_skill.type) == ("u", 1, "want")
    mock_session.add.assert_called_once_with(user_skill)
    mock_session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_add_user_skill_is_idempotent(mock_session):
    existing = UserSkill(user_id="u", skill_id=1, type="give")
    mock_session.execute.return_value = make_result(scalars=[existing])

    user_skill = await SkillService(mock_session).add_user_skill("u", 1, "give")

    assert user_skill is existing
    mock_session.add.assert_not_called()


@pytest.mark.asyncio
async def test_add_user_skill_unknown_skill(mock_session):
    with pytest.raises(NotFoundError):
        await SkillService(mock_session).add_user_skill("u", 99, "want")

    mock_session.add.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("skill_type", [None, "", "teach", "WANT"])
async def test_add_user_skill_invalid_type(mock_session, skill_type):
    with pytest.raises(InputValidationError):
        await SkillService(mock_session).add_user_skill("u", 1, skill_type)


@pytest.mark.asyncio
async def test_remove_user_skill(mock_session):
    existing = UserSkill(user_id="u", skill_id=1, type="want")
    mock_session.execute.return_value = make_result(scalars=[existing])

    await SkillService(mock_session).remove_user_skill("u", 1, "want")

    mock_session.delete.assert_awaited_once_with(existing)
    mock_session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_remove_missing_user_skill(mock_session):
    with pytest.raises(NotFoundError):
        await SkillService(mock_session).remove_user_skill("u", 1, "want")


def test_get_skills_endpoint_is_public(client, mock_session):
    mock_session.execute.return_value = make_result(scalars=[Skill(id=1, name="Python")])

    response = client.get("/skills")

    assert response.status_code == 200
    assert response.json() == {"skills": [{"id": 1, "name": "Python"}]}


def test_add_my_skill_uses_token_identity(client, mock_session):
    mock_session.get.return_value = Skill(id=1, name="Python")

    response = client.post("/me/skills", json={"skill_id": 1, "type": "give"}, headers=AUTH_HEADERS)

    assert response.status_code == 200
    assert response.json()["skill"] == {"user_id": AUTH_USER_ID, "skill_id": 1, "type": "give"}


def test_remove_my_skill_bad_type(client):
    response = client.delete("/me/skills/1", params={"type": "teach"}, headers=AUTH_HEADERS)

    assert response.status_code == 400


def test_my_skills_requires_token(client):
    assert client.get("/me/skills").status_code == 401
