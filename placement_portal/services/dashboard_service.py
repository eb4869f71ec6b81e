"""
Dashboard Service
Admin overview counts
"""

from datetime import datetime

from placement_portal.services.alumni_service import alumni_service
from placement_portal.services.attendance_service import attendance_service
from placement_portal.services.event_service import event_service
from placement_portal.services.event_status import EventStatus
from placement_portal.services.student_service import student_service

RECENT_EVENTS_LIMIT = 5


async def get_dashboard_stats(now: datetime) -> dict:
    """Totals per record type plus event status counts for `now`"""
    events = await event_service.list_with_status(now)
    status_counts = {status: 0 for status in EventStatus}
    for event in events:
        status_counts[EventStatus(event["status"])] += 1

    recent_events = sorted(events, key=lambda event: event["id"], reverse=True)[:RECENT_EVENTS_LIMIT]

    return {
        "total_students": await student_service.count(),
        "placed_students": await student_service.count(selected=True),
        "total_events": len(events),
        "ongoing_events": status_counts[EventStatus.ONGOING],
        "upcoming_events": status_counts[EventStatus.UPCOMING],
        "past_events": status_counts[EventStatus.PAST],
        "total_alumni": await alumni_service.count(),
        "total_attendance": await attendance_service.count(),
        "recent_events": recent_events,
    }
