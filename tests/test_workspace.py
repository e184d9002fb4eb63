"""Workspace composition tests: state transitions, duplicate, registry."""

from datetime import date

from cim.models import (
    IdeaFilters,
    IdeaPriority,
    IdeaStatus,
    NoticeLevel,
    ViewMode,
)
from cim.models.idea import EnergyLevel, TimeEstimate
from cim.services.automation import NullWebhookSink, ZapierWebhookSink
from cim.services.workspace import IdeaWorkspace, WorkspaceRegistry

from fakes import FakeRepositoryFactory, make_idea


async def _seed(workspace, repos, *ideas):
    repos.ideas.rows = {idea.id: idea for idea in ideas}
    await workspace.ideas.load()


async def test_archive_clears_scheduled_date(workspace, repos):
    await _seed(workspace, repos, make_idea(
        id="x", status=IdeaStatus.SCHEDULED, scheduled_date=date(2025, 1, 10),
    ))

    archived = await workspace.archive("x")

    assert archived.status == IdeaStatus.ARCHIVED
    assert archived.scheduled_date is None


async def test_recycle_then_restore(workspace, repos):
    await _seed(workspace, repos, make_idea(id="x", status=IdeaStatus.READY))

    recycled = await workspace.recycle("x")
    restored = await workspace.restore("x")

    assert recycled.status == IdeaStatus.RECYCLED
    assert restored.status == IdeaStatus.DEVELOPING


async def test_archived_idea_leaves_default_view(workspace, repos):
    await _seed(workspace, repos, make_idea(id="x"), make_idea(id="y"))

    await workspace.archive("x")
    view = await workspace.view()

    assert [idea.id for idea in view.rendered] == ["y"]
    assert view.stats.by_status[IdeaStatus.ARCHIVED] == 1


async def test_duplicate_copies_fields_and_tags(workspace, repos):
    source = make_idea(
        id="src",
        title="Launch video",
        description="Teaser",
        content="<p>Script</p>",
        content_type_id="ct",
        platform_id="yt",
        priority=IdeaPriority.BEST,
        status=IdeaStatus.SCHEDULED,
        is_timely=True,
        scheduled_date=date(2025, 1, 10),
        source="Podcast",
        next_action="Outline",
        energy_level=EnergyLevel.HIGH,
        time_estimate=TimeEstimate.DAY,
    )
    await _seed(workspace, repos, source)
    repos.idea_tags.links = {"src": ["t1", "t2"]}

    copy = await workspace.duplicate(source)

    assert copy.id != source.id
    assert copy.title == "Launch video (Copy)"
    assert copy.status == IdeaStatus.DEVELOPING
    assert copy.is_timely is False
    assert copy.scheduled_date is None
    for field in (
        "description", "content", "content_type_id", "platform_id", "priority",
        "source", "next_action", "energy_level", "time_estimate",
    ):
        assert getattr(copy, field) == getattr(source, field)
    assert await workspace.idea_tags.get(copy.id) == ["t1", "t2"]
    assert workspace.ideas.items[0].id == copy.id


async def test_duplicate_without_tags_skips_tag_write(workspace, repos):
    source = make_idea(id="src", title="Solo")
    await _seed(workspace, repos, source)

    await workspace.duplicate(source)

    assert "delete_for_idea" not in repos.idea_tags.calls


async def test_failed_duplicate_returns_none(workspace, repos):
    source = make_idea(id="src")
    await _seed(workspace, repos, source)
    repos.ideas.fail_on.add("create")

    assert await workspace.duplicate(source) is None
    assert workspace.drain_notices()[-1].level == NoticeLevel.ERROR


async def test_view_state_changes(workspace):
    workspace.set_view_mode(ViewMode.LIST)
    workspace.set_filters(IdeaFilters(search="video"))

    assert workspace.view_mode == ViewMode.LIST
    assert workspace.filters.search == "video"

    workspace.clear_filters()
    assert workspace.filters.is_empty


async def test_view_loads_collection_on_first_read(workspace, repos):
    repos.ideas.rows = {"x": make_idea(id="x")}

    view = await workspace.view()

    assert [idea.id for idea in view.filtered] == ["x"]
    assert workspace.ideas.loaded is True


def test_registry_keeps_one_workspace_per_user():
    registry = WorkspaceRegistry(FakeRepositoryFactory())

    first = registry.get("user-1")

    assert registry.get("user-1") is first
    assert registry.get("user-2") is not first
    assert len(registry) == 2

    registry.discard("user-1")
    assert len(registry) == 1
    assert registry.get("user-1") is not first


def test_registry_wires_webhook_sink():
    assert isinstance(WorkspaceRegistry(FakeRepositoryFactory()).get("u").webhooks, ZapierWebhookSink)
    disabled = WorkspaceRegistry(FakeRepositoryFactory(), webhooks_enabled=False)
    assert isinstance(disabled.get("u").webhooks, NullWebhookSink)


def test_workspace_defaults():
    workspace = IdeaWorkspace("user-1", FakeRepositoryFactory())

    assert workspace.view_mode == ViewMode.GRID
    assert workspace.filters.is_empty
    assert isinstance(workspace.webhooks, NullWebhookSink)
