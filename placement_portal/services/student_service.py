"""
Student Service
Student records and placement figures
"""

from typing import Any, Dict

from sqlalchemy import func, select

from placement_portal.database import database
from placement_portal.errors import ConflictError, UpstreamFailure
from placement_portal.logging_config import get_logger
from placement_portal.models.student import Student
from placement_portal.services.record_service import RecordService

logger = get_logger(__name__)

RECENT_PLACEMENTS_LIMIT = 10


class StudentService(RecordService):
    """Service for student management operations"""

    model = Student
    label = "Student"
    required_fields = ("name", "roll_number")
    conflict_message = "Roll number already exists"
    updated_field = "updated_at"

    async def _roll_number_taken(self, roll_number: str, exclude_id: int = None) -> bool:
        query = select(self.table.c.id).where(self.table.c.roll_number == roll_number)
        if exclude_id is not None:
            query = query.where(self.table.c.id != exclude_id)
        return await self._fetch_one(query) is not None

    async def before_create(self, values: Dict[str, Any]) -> None:
        # The unique index still decides concurrent creates
        if await self._roll_number_taken(values["roll_number"]):
            raise ConflictError(self.conflict_message)

    async def before_update(self, current: dict, changes: Dict[str, Any]) -> None:
        roll_number = changes.get("roll_number")
        if roll_number and roll_number != current["roll_number"]:
            if await self._roll_number_taken(roll_number, exclude_id=current["id"]):
                raise ConflictError(self.conflict_message)

    async def placement_stats(self) -> dict:
        """Placed count, distinct companies, average and highest package"""
        table = self.table
        placed = table.c.selected.is_(True)
        query = select(
            func.count(table.c.id).label("placed"),
            func.count(func.distinct(table.c.company_name)).label("companies"),
            func.avg(table.c.package).label("average"),
            func.max(table.c.package).label("highest"),
        ).where(placed)

        try:
            row = await database.fetch_one(query)
        except Exception as e:
            logger.error("Failed to compute placement stats: %s", e)
            raise UpstreamFailure("Failed to fetch placement stats")

        average = row["average"] if row else None
        return {
            "students_placed": (row["placed"] if row else 0) or 0,
            "active_companies": (row["companies"] if row else 0) or 0,
            "avg_package": round(float(average), 1) if average is not None else 0.0,
            "highest_package": (row["highest"] if row else 0) or 0,
        }

    async def recent_placements(self, limit: int = RECENT_PLACEMENTS_LIMIT) -> list:
        """Selected students, most recently updated first"""
        table = self.table
        query = (
            select(table)
            .where(table.c.selected.is_(True))
            .order_by(table.c.updated_at.desc(), table.c.id.desc())
            .limit(limit)
        )
        return await self._fetch_all(query)


student_service = StudentService()
