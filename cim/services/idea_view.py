"""
Idea View

Derives what the idea screens show from the full idea collection and the
current filters. Everything here is a pure function of its inputs; the
view is rebuilt on every read instead of being cached.

Order of the source collection (newest first, as the idea store keeps it)
is preserved everywhere except for pinning ``best`` ideas to the front of
the non-timely group. The archive, calendar and past views carry their
own orderings.
"""

from datetime import date
from typing import Iterable, List, Sequence, Tuple

from cim.models.idea import HIDDEN_STATUSES, Idea, IdeaPriority, IdeaStatus
from cim.models.view import ArchiveView, CalendarView, IdeaFilters, IdeaStats, IdeaView


def matches_filters(idea: Idea, filters: IdeaFilters) -> bool:
    """Apply each filter axis in turn, stopping at the first that fails"""
    if not filters.status:
        if idea.status in HIDDEN_STATUSES:
            return False
    elif idea.status not in filters.status:
        return False

    if filters.content_type and idea.content_type_id not in filters.content_type:
        return False

    if filters.platform and idea.platform_id not in filters.platform:
        return False

    if filters.priority and idea.priority not in filters.priority:
        return False

    if filters.energy_level and idea.energy_level not in filters.energy_level:
        return False

    date_range = filters.date_range
    if date_range is not None:
        if date_range.from_ is not None and idea.created_at < date_range.from_:
            return False
        if date_range.to is not None and idea.created_at > date_range.to:
            return False

    if filters.search:
        needle = filters.search.lower()
        in_title = needle in idea.title.lower()
        in_description = idea.description is not None and needle in idea.description.lower()
        if not (in_title or in_description):
            return False

    return True


def filter_ideas(ideas: Iterable[Idea], filters: IdeaFilters) -> List[Idea]:
    return [idea for idea in ideas if matches_filters(idea, filters)]


def partition_timely(ideas: Sequence[Idea]) -> Tuple[List[Idea], List[Idea]]:
    """Split into (timely, non-timely), each keeping source order"""
    timely = [idea for idea in ideas if idea.is_timely]
    non_timely = [idea for idea in ideas if not idea.is_timely]
    return timely, non_timely


def pin_best(ideas: Sequence[Idea]) -> List[Idea]:
    """Stable reorder putting ``best`` priority ideas first"""
    best = [idea for idea in ideas if idea.priority == IdeaPriority.BEST]
    rest = [idea for idea in ideas if idea.priority != IdeaPriority.BEST]
    return best + rest


def compute_stats(ideas: Sequence[Idea]) -> IdeaStats:
    """Counts over the whole, unfiltered collection"""
    by_status = {status: 0 for status in IdeaStatus}
    timely = 0
    for idea in ideas:
        by_status[idea.status] += 1
        if idea.is_timely and idea.status not in HIDDEN_STATUSES:
            timely += 1
    return IdeaStats(total=len(ideas), by_status=by_status, timely=timely)


def build_idea_view(ideas: Sequence[Idea], filters: IdeaFilters) -> IdeaView:
    filtered = filter_ideas(ideas, filters)
    timely, non_timely = partition_timely(filtered)
    return IdeaView(
        filtered=filtered,
        timely=timely,
        non_timely=pin_best(non_timely),
        stats=compute_stats(ideas),
    )


def _recently_updated(ideas: Iterable[Idea], status: IdeaStatus) -> List[Idea]:
    matching = [idea for idea in ideas if idea.status == status]
    return sorted(matching, key=lambda idea: idea.updated_at, reverse=True)


def build_archive_view(ideas: Sequence[Idea]) -> ArchiveView:
    return ArchiveView(
        archived=_recently_updated(ideas, IdeaStatus.ARCHIVED),
        recycled=_recently_updated(ideas, IdeaStatus.RECYCLED),
    )


def scheduled_ideas(ideas: Iterable[Idea]) -> List[Idea]:
    """Ideas in the scheduled state that actually carry a date"""
    return [
        idea for idea in ideas
        if idea.status == IdeaStatus.SCHEDULED and idea.scheduled_date is not None
    ]


def build_calendar_view(ideas: Sequence[Idea], selected_date: date) -> CalendarView:
    scheduled = scheduled_ideas(ideas)
    return CalendarView(
        selected_date=selected_date,
        dates=sorted({idea.scheduled_date for idea in scheduled}),
        ideas=[idea for idea in scheduled if idea.scheduled_date == selected_date],
    )


def past_scheduled_ideas(ideas: Sequence[Idea], today: date) -> List[Idea]:
    """
    Scheduled ideas whose day has started, latest date first.

    A date counts as past from the start of that day, so today's ideas are
    included.
    """
    past = [idea for idea in scheduled_ideas(ideas) if idea.scheduled_date <= today]
    return sorted(past, key=lambda idea: idea.scheduled_date, reverse=True)
