"""
Event Service
Events with status derived at read time
"""

from datetime import datetime
from typing import Any, Dict, List

from placement_portal.database import database
from placement_portal.errors import ValidationError, UpstreamFailure
from placement_portal.logging_config import get_logger
from placement_portal.models.attendance import Attendance
from placement_portal.models.event import Event
from placement_portal.schemas.event import EventResponse
from placement_portal.services.event_status import EventStatus, classify_event_status, to_naive_utc
from placement_portal.services.grouping import UNKNOWN_COMPANY, event_year, group_records
from placement_portal.services.record_service import RecordService

logger = get_logger(__name__)


def check_date_order(start_date, end_date) -> None:
    """Reject an event that ends before it starts"""
    if start_date is not None and end_date is not None and end_date < start_date:
        raise ValidationError("endDate must not be before startDate")


class EventService(RecordService):
    """Service for event management operations"""

    model = Event
    label = "Event"
    required_fields = ("title", "description", "company", "start_date", "end_date")
    updated_field = "updated_at"
    order_by = ("start_date", "id")

    @staticmethod
    def _normalize_dates(values: Dict[str, Any]) -> None:
        for name in ("start_date", "end_date"):
            if values.get(name) is not None:
                values[name] = to_naive_utc(values[name])

    async def before_create(self, values: Dict[str, Any]) -> None:
        self._normalize_dates(values)
        check_date_order(values.get("start_date"), values.get("end_date"))

    async def before_update(self, current: dict, changes: Dict[str, Any]) -> None:
        self._normalize_dates(changes)
        check_date_order(
            changes.get("start_date", current["start_date"]),
            changes.get("end_date", current["end_date"]),
        )

    async def delete(self, record_id: int) -> dict:
        """Delete an event; its attendance records are kept unlinked"""
        await self.get(record_id)
        attendance = Attendance.__table__
        try:
            await database.execute(
                attendance.update().where(attendance.c.event_id == record_id).values(event_id=None)
            )
        except Exception as e:
            logger.error("Failed to unlink attendance for event %s: %s", record_id, e)
            raise UpstreamFailure("Failed to delete event")
        return await super().delete(record_id)

    @staticmethod
    def with_status(record: dict, now: datetime) -> dict:
        """Event as a camelCase dict with its status for `now`"""
        data = dict(record)
        data["status"] = classify_event_status(now, record.get("start_date"), record.get("end_date"))
        return EventResponse.model_validate(data).model_dump(by_alias=True, mode="json")

    async def list_with_status(self, now: datetime) -> List[dict]:
        return [self.with_status(record, now) for record in await self.list()]

    async def grouped(self, now: datetime) -> dict:
        """
        Events split by status, each grouped company -> year of start date
        """
        events = await self.list_with_status(now)
        by_status = {status.value: [] for status in (EventStatus.ONGOING, EventStatus.UPCOMING, EventStatus.PAST)}
        for event in events:
            by_status[event["status"]].append(event)

        result = {}
        for status, items in by_status.items():
            result[status] = group_records(items, ("company", UNKNOWN_COMPANY), event_year)
        result["counts"] = {status: len(items) for status, items in by_status.items()}
        return result


event_service = EventService()
