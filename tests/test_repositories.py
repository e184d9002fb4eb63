"""Repository tests against a mocked Supabase client."""

from unittest.mock import MagicMock

import pytest

from cim.infra.supabase.repositories import (
    IdeaRepository,
    IdeaTagRepository,
    TagRepository,
)
from cim.models import IdeaCreate, TagCreate, TagUpdate

NOW = "2025-01-01T12:00:00+00:00"


def _idea_row(**kwargs):
    row = {
        "id": "idea-1",
        "user_id": "user-1",
        "title": "Launch",
        "created_at": NOW,
        "updated_at": NOW,
    }
    row.update(kwargs)
    return row


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def table(client):
    return client.table.return_value


async def test_create_sends_unset_fields_as_nulls(client, table):
    table.insert.return_value.execute.return_value = MagicMock(
        data=[{"id": "t1", "name": "Evergreen", "color": "#6366f1", "user_id": "user-1"}]
    )

    tag = await TagRepository(client).create("user-1", TagCreate(name="Evergreen"))

    client.table.assert_called_with("tags")
    table.insert.assert_called_once_with(
        {"name": "Evergreen", "color": "#6366f1", "user_id": "user-1"}
    )
    assert tag.id == "t1"


async def test_create_of_joined_record_reads_it_back(client, table):
    table.insert.return_value.execute.return_value = MagicMock(data=[_idea_row()])
    table.select.return_value.eq.return_value.execute.return_value = MagicMock(
        data=[_idea_row(content_type={"id": "ct", "name": "Video"})]
    )

    idea = await IdeaRepository(client).create("user-1", IdeaCreate(title="Launch"))

    payload = table.insert.call_args.args[0]
    assert payload["user_id"] == "user-1"
    assert payload["status"] == "developing"
    assert payload["scheduled_date"] is None
    assert payload["content_type_id"] is None
    table.select.assert_called_once_with(IdeaRepository.select_columns)
    table.select.return_value.eq.assert_called_once_with("id", "idea-1")
    assert idea.content_type.name == "Video"


async def test_create_without_returned_row_raises(client, table):
    table.insert.return_value.execute.return_value = MagicMock(data=[])

    with pytest.raises(ValueError):
        await TagRepository(client).create("user-1", TagCreate(name="Evergreen"))


async def test_update_sends_only_set_fields(client, table):
    table.update.return_value.eq.return_value.execute.return_value = MagicMock(
        data=[{"id": "t1", "name": "Classic"}]
    )

    tag = await TagRepository(client).update("t1", TagUpdate(name="Classic"))

    table.update.assert_called_once_with({"name": "Classic"})
    table.update.return_value.eq.assert_called_once_with("id", "t1")
    assert tag.name == "Classic"


async def test_update_matching_no_row_returns_none(client, table):
    table.update.return_value.eq.return_value.execute.return_value = MagicMock(data=[])

    assert await TagRepository(client).update("missing", TagUpdate(name="Classic")) is None


async def test_empty_update_reads_current_row(client, table):
    table.select.return_value.eq.return_value.execute.return_value = MagicMock(
        data=[{"id": "t1", "name": "Evergreen"}]
    )

    tag = await TagRepository(client).update("t1", TagUpdate())

    table.update.assert_not_called()
    assert tag.name == "Evergreen"


async def test_delete_reports_whether_a_row_matched(client, table):
    execute = table.delete.return_value.eq.return_value.execute
    repository = TagRepository(client)

    execute.return_value = MagicMock(data=[{"id": "t1"}])
    assert await repository.delete("t1") is True

    execute.return_value = MagicMock(data=[])
    assert await repository.delete("t1") is False


async def test_find_by_user_applies_default_order(client, table):
    ordered = table.select.return_value.eq.return_value.order
    ordered.return_value.execute.return_value = MagicMock(data=[_idea_row()])

    ideas = await IdeaRepository(client).find_by_user("user-1")

    table.select.return_value.eq.assert_called_once_with("user_id", "user-1")
    ordered.assert_called_once_with("created_at", desc=True)
    assert [idea.id for idea in ideas] == ["idea-1"]


async def test_idea_tag_links_are_one_row_per_tag(client, table):
    await IdeaTagRepository(client).insert_links("user-1", "idea-1", ["t1", "t2"])

    client.table.assert_called_with("idea_tags")
    table.insert.assert_called_once_with([
        {"idea_id": "idea-1", "tag_id": "t1", "user_id": "user-1"},
        {"idea_id": "idea-1", "tag_id": "t2", "user_id": "user-1"},
    ])


async def test_idea_tag_ids_are_read_by_idea(client, table):
    eq = table.select.return_value.eq
    eq.return_value.execute.return_value = MagicMock(data=[{"tag_id": "t1"}, {"tag_id": "t2"}])

    assert await IdeaTagRepository(client).find_tag_ids("idea-1") == ["t1", "t2"]
    table.select.assert_called_once_with("tag_id")
    eq.assert_called_once_with("idea_id", "idea-1")
