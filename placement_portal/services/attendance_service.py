"""
Attendance Service
Attendance marks, optionally linked to an event
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import select

from placement_portal.errors import NotFoundError
from placement_portal.models.attendance import Attendance
from placement_portal.models.event import Event
from placement_portal.services.record_service import RecordService


class AttendanceService(RecordService):
    """Service for attendance operations"""

    model = Attendance
    label = "Attendance"
    required_fields = ("student_name", "roll_number")
    created_field = "marked_at"
    order_by = ("-marked_at", "-id")

    async def _check_event(self, event_id: Optional[int]) -> None:
        if event_id is None:
            return
        events = Event.__table__
        if await self._fetch_one(select(events.c.id).where(events.c.id == event_id)) is None:
            raise NotFoundError("Event not found")

    async def before_create(self, values: Dict[str, Any]) -> None:
        await self._check_event(values.get("event_id"))

    async def before_update(self, current: dict, changes: Dict[str, Any]) -> None:
        if "event_id" in changes:
            await self._check_event(changes["event_id"])

    async def list_with_events(self, event_id: Optional[int] = None) -> List[dict]:
        """Attendance rows with the linked event title (None when unlinked)"""
        table = self.table
        events = Event.__table__
        query = select(table, events.c.title.label("event_title")).select_from(
            table.outerjoin(events, table.c.event_id == events.c.id)
        )
        if event_id is not None:
            query = query.where(table.c.event_id == event_id)
        query = query.order_by(*self._order())
        return await self._fetch_all(query)


attendance_service = AttendanceService()
