"""Tests for the derived idea view."""

from datetime import date, datetime, timezone

from cim.models import IdeaFilters, IdeaPriority, IdeaStatus, EnergyLevel
from cim.models.view import DateRange
from cim.services.idea_view import (
    build_archive_view,
    build_calendar_view,
    build_idea_view,
    compute_stats,
    filter_ideas,
    partition_timely,
    past_scheduled_ideas,
    pin_best,
)

from fakes import make_idea


def _scenario_ideas():
    idea_a = make_idea(
        id="a",
        title="Video: intro",
        status=IdeaStatus.SCHEDULED,
        scheduled_date=date(2025, 1, 10),
        priority=IdeaPriority.BEST,
        is_timely=False,
    )
    idea_b = make_idea(
        id="b",
        title="Blog draft",
        status=IdeaStatus.DEVELOPING,
        priority=IdeaPriority.NONE,
        is_timely=True,
    )
    return [idea_a, idea_b]


# --- scenarios ---


def test_no_filters_renders_timely_group_first():
    view = build_idea_view(_scenario_ideas(), IdeaFilters())

    assert [idea.id for idea in view.rendered] == ["b", "a"]
    assert [idea.id for idea in view.timely] == ["b"]
    assert [idea.id for idea in view.non_timely] == ["a"]


def test_status_filter_keeps_only_matching_ideas():
    view = build_idea_view(_scenario_ideas(), IdeaFilters(status=[IdeaStatus.SCHEDULED]))

    assert [idea.id for idea in view.filtered] == ["a"]
    assert [idea.id for idea in view.rendered] == ["a"]


# --- hidden statuses ---


def test_default_view_hides_archived_and_recycled():
    ideas = [
        make_idea(id="live", status=IdeaStatus.HOLD),
        make_idea(id="archived", status=IdeaStatus.ARCHIVED),
        make_idea(id="recycled", status=IdeaStatus.RECYCLED),
    ]

    filtered = filter_ideas(ideas, IdeaFilters())

    assert [idea.id for idea in filtered] == ["live"]


def test_explicit_status_filter_includes_hidden_status():
    ideas = [
        make_idea(id="live", status=IdeaStatus.HOLD),
        make_idea(id="archived", status=IdeaStatus.ARCHIVED),
    ]

    filtered = filter_ideas(ideas, IdeaFilters(status=[IdeaStatus.ARCHIVED]))

    assert [idea.id for idea in filtered] == ["archived"]


# --- partition and ordering ---


def test_timely_idea_is_timely_regardless_of_priority():
    ideas = [
        make_idea(id="t1", is_timely=True, priority=IdeaPriority.NONE),
        make_idea(id="t2", is_timely=True, priority=IdeaPriority.BEST),
    ]

    view = build_idea_view(ideas, IdeaFilters())

    # no best-first pinning inside the timely group
    assert [idea.id for idea in view.timely] == ["t1", "t2"]
    assert view.non_timely == []


def test_pin_best_is_stable_within_buckets():
    ideas = [
        make_idea(id="n1", priority=IdeaPriority.GOOD),
        make_idea(id="b1", priority=IdeaPriority.BEST),
        make_idea(id="n2", priority=IdeaPriority.NONE),
        make_idea(id="b2", priority=IdeaPriority.BEST),
        make_idea(id="n3", priority=IdeaPriority.BETTER),
    ]

    assert [idea.id for idea in pin_best(ideas)] == ["b1", "b2", "n1", "n2", "n3"]


def test_partition_keeps_source_order():
    ideas = [
        make_idea(id="1", is_timely=False),
        make_idea(id="2", is_timely=True),
        make_idea(id="3", is_timely=False),
        make_idea(id="4", is_timely=True),
    ]

    timely, non_timely = partition_timely(ideas)

    assert [idea.id for idea in timely] == ["2", "4"]
    assert [idea.id for idea in non_timely] == ["1", "3"]


# --- filter axes ---


def test_search_matches_title_or_description_case_insensitively():
    ideas = [
        make_idea(id="title", title="Podcast Launch"),
        make_idea(id="desc", title="Other", description="notes about a PODCAST guest"),
        make_idea(id="none", title="Unrelated"),
    ]

    filtered = filter_ideas(ideas, IdeaFilters(search="podcast"))

    assert [idea.id for idea in filtered] == ["title", "desc"]


def test_content_type_and_platform_filters():
    ideas = [
        make_idea(id="match", content_type_id="ct1", platform_id="p1"),
        make_idea(id="wrong-platform", content_type_id="ct1", platform_id="p2"),
        make_idea(id="untyped"),
    ]

    filtered = filter_ideas(ideas, IdeaFilters(content_type=["ct1"], platform=["p1"]))

    assert [idea.id for idea in filtered] == ["match"]


def test_priority_and_energy_filters():
    ideas = [
        make_idea(id="hit", priority=IdeaPriority.GOOD, energy_level=EnergyLevel.LOW),
        make_idea(id="miss-energy", priority=IdeaPriority.GOOD, energy_level=EnergyLevel.HIGH),
        make_idea(id="miss-priority", priority=IdeaPriority.NONE, energy_level=EnergyLevel.LOW),
    ]

    filters = IdeaFilters(priority=[IdeaPriority.GOOD], energy_level=[EnergyLevel.LOW])

    assert [idea.id for idea in filter_ideas(ideas, filters)] == ["hit"]


def test_date_range_is_inclusive_on_created_at():
    ideas = [
        make_idea(id="before", created_at=datetime(2025, 1, 1, tzinfo=timezone.utc)),
        make_idea(id="start", created_at=datetime(2025, 2, 1, tzinfo=timezone.utc)),
        make_idea(id="end", created_at=datetime(2025, 2, 28, tzinfo=timezone.utc)),
        make_idea(id="after", created_at=datetime(2025, 3, 1, tzinfo=timezone.utc)),
    ]
    date_range = DateRange(**{
        "from": datetime(2025, 2, 1, tzinfo=timezone.utc),
        "to": datetime(2025, 2, 28, tzinfo=timezone.utc),
    })

    filtered = filter_ideas(ideas, IdeaFilters(date_range=date_range))

    assert [idea.id for idea in filtered] == ["start", "end"]


def test_open_ended_date_range():
    ideas = [
        make_idea(id="old", created_at=datetime(2024, 6, 1, tzinfo=timezone.utc)),
        make_idea(id="new", created_at=datetime(2025, 6, 1, tzinfo=timezone.utc)),
    ]

    filters = IdeaFilters(date_range=DateRange(from_=datetime(2025, 1, 1)))

    assert [idea.id for idea in filter_ideas(ideas, filters)] == ["new"]


# --- stats ---


def test_stats_cover_unfiltered_collection():
    ideas = [
        make_idea(status=IdeaStatus.HOLD, is_timely=True),
        make_idea(status=IdeaStatus.READY),
        make_idea(status=IdeaStatus.ARCHIVED, is_timely=True),
        make_idea(status=IdeaStatus.RECYCLED),
    ]

    view = build_idea_view(ideas, IdeaFilters(status=[IdeaStatus.READY]))

    assert len(view.filtered) == 1
    assert view.stats.total == 4
    assert sum(view.stats.by_status.values()) == view.stats.total
    assert view.stats.by_status[IdeaStatus.ARCHIVED] == 1
    assert view.stats.by_status[IdeaStatus.SCHEDULED] == 0
    # archived ideas are not counted as timely
    assert view.stats.timely == 1


def test_stats_of_empty_collection():
    stats = compute_stats([])

    assert stats.total == 0
    assert set(stats.by_status) == set(IdeaStatus)
    assert stats.timely == 0


def test_rendered_order_is_serialized():
    body = build_idea_view(_scenario_ideas(), IdeaFilters()).model_dump(mode="json")

    assert [idea["id"] for idea in body["rendered"]] == ["b", "a"]
    assert [idea["id"] for idea in body["filtered"]] == ["a", "b"]


# --- archive, calendar and past ---


def _at(day: int) -> datetime:
    return datetime(2025, 2, day, tzinfo=timezone.utc)


def test_archive_view_sorts_by_last_update():
    ideas = [
        make_idea(id="old", status=IdeaStatus.ARCHIVED, updated_at=_at(1)),
        make_idea(id="bin", status=IdeaStatus.RECYCLED, updated_at=_at(2)),
        make_idea(id="new", status=IdeaStatus.ARCHIVED, updated_at=_at(5)),
        make_idea(id="live", status=IdeaStatus.DEVELOPING, updated_at=_at(9)),
    ]

    archive = build_archive_view(ideas)

    assert [idea.id for idea in archive.archived] == ["new", "old"]
    assert [idea.id for idea in archive.recycled] == ["bin"]


def test_calendar_lists_scheduled_ideas_for_the_day():
    ideas = [
        make_idea(id="a", status=IdeaStatus.SCHEDULED, scheduled_date=date(2025, 3, 2)),
        make_idea(id="b", status=IdeaStatus.SCHEDULED, scheduled_date=date(2025, 3, 1)),
        make_idea(id="c", status=IdeaStatus.SCHEDULED, scheduled_date=date(2025, 3, 2)),
        make_idea(id="d", status=IdeaStatus.READY, scheduled_date=date(2025, 3, 2)),
        make_idea(id="e", status=IdeaStatus.SCHEDULED),
    ]

    calendar = build_calendar_view(ideas, date(2025, 3, 2))

    assert calendar.selected_date == date(2025, 3, 2)
    assert calendar.dates == [date(2025, 3, 1), date(2025, 3, 2)]
    assert [idea.id for idea in calendar.ideas] == ["a", "c"]


def test_calendar_day_without_ideas():
    ideas = [make_idea(status=IdeaStatus.SCHEDULED, scheduled_date=date(2025, 3, 2))]

    calendar = build_calendar_view(ideas, date(2025, 3, 9))

    assert calendar.ideas == []
    assert calendar.dates == [date(2025, 3, 2)]


def test_past_ideas_latest_date_first_including_today():
    ideas = [
        make_idea(id="jan", status=IdeaStatus.SCHEDULED, scheduled_date=date(2025, 1, 5)),
        make_idea(id="today", status=IdeaStatus.SCHEDULED, scheduled_date=date(2025, 3, 1)),
        make_idea(id="later", status=IdeaStatus.SCHEDULED, scheduled_date=date(2025, 4, 1)),
        make_idea(id="feb", status=IdeaStatus.SCHEDULED, scheduled_date=date(2025, 2, 5)),
        make_idea(id="done", status=IdeaStatus.ARCHIVED, scheduled_date=date(2025, 2, 6)),
    ]

    past = past_scheduled_ideas(ideas, today=date(2025, 3, 1))

    assert [idea.id for idea in past] == ["today", "feb", "jan"]
