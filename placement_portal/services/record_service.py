"""
Record Service
Shared create/read/update/delete operations over one table
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from pydantic.alias_generators import to_camel
from sqlalchemy import Table, func, select

from placement_portal.database import database
from placement_portal.errors import (
    ConflictError,
    NotFoundError,
    UpstreamFailure,
    ValidationError,
    is_unique_violation,
)
from placement_portal.logging_config import get_logger

logger = get_logger(__name__)


def utc_naive_now() -> datetime:
    """Store timestamps as naive UTC"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class RecordService:
    """
    CRUD for a single table.

    Subclasses set `model`, `label` and `required_fields` and may override
    the hooks `before_create` / `before_update` for entity rules.
    """

    model = None
    label = "Record"
    required_fields: Sequence[str] = ()
    conflict_message = "Record already exists"
    created_field: Optional[str] = "created_at"
    updated_field: Optional[str] = None
    order_by: Sequence[str] = ("id",)

    @property
    def table(self) -> Table:
        return self.model.__table__

    def _order(self):
        columns = []
        for name in self.order_by:
            descending = name.startswith("-")
            column = self.table.c[name.lstrip("-")]
            columns.append(column.desc() if descending else column.asc())
        return columns

    @staticmethod
    def _row_dict(query, row) -> dict:
        """Record as a plain dict keyed by the selected column names"""
        return {column.key: row[column.key] for column in query.selected_columns}

    async def _fetch_all(self, query) -> List[dict]:
        try:
            rows = await database.fetch_all(query)
        except Exception as e:
            logger.error("Failed to read %s records: %s", self.label.lower(), e)
            raise UpstreamFailure(f"Failed to fetch {self.label.lower()} records")
        return [self._row_dict(query, row) for row in rows]

    async def _fetch_one(self, query) -> Optional[dict]:
        try:
            row = await database.fetch_one(query)
        except Exception as e:
            logger.error("Failed to read %s record: %s", self.label.lower(), e)
            raise UpstreamFailure(f"Failed to fetch {self.label.lower()}")
        return self._row_dict(query, row) if row is not None else None

    async def _execute(self, statement, action: str):
        try:
            return await database.execute(statement)
        except Exception as e:
            if is_unique_violation(e):
                raise ConflictError(self.conflict_message)
            logger.error("Failed to %s %s: %s", action, self.label.lower(), e)
            raise UpstreamFailure(f"Failed to {action} {self.label.lower()}")

    async def list(self, filters: Optional[Dict[str, Any]] = None) -> List[dict]:
        """List records, applying equality filters for non-None values"""
        query = select(self.table)
        for name, value in (filters or {}).items():
            if value is not None:
                query = query.where(self.table.c[name] == value)
        query = query.order_by(*self._order())
        return await self._fetch_all(query)

    async def count(self, **filters) -> int:
        query = select(func.count()).select_from(self.table)
        for name, value in filters.items():
            query = query.where(self.table.c[name] == value)
        try:
            total = await database.fetch_val(query)
        except Exception as e:
            logger.error("Failed to count %s records: %s", self.label.lower(), e)
            raise UpstreamFailure(f"Failed to count {self.label.lower()} records")
        return total or 0

    async def get(self, record_id: int) -> dict:
        """Get record by ID"""
        record = await self._fetch_one(select(self.table).where(self.table.c.id == record_id))
        if not record:
            raise NotFoundError(f"{self.label} not found")
        return record

    async def before_create(self, values: Dict[str, Any]) -> None:
        """Entity rules checked before insert"""

    async def before_update(self, current: dict, changes: Dict[str, Any]) -> None:
        """Entity rules checked against the merged record before update"""

    async def create(self, values: Dict[str, Any]) -> dict:
        """Insert a record and return it as stored"""
        values = {key: value for key, value in values.items() if key in self.table.c and key != "id"}
        await self.before_create(values)

        now = utc_naive_now()
        for name in (self.created_field, self.updated_field):
            if name:
                values[name] = now

        record_id = await self._execute(self.table.insert().values(**values), "create")
        logger.info("Created %s %s", self.label.lower(), record_id)
        return await self.get(record_id)

    async def update(self, record_id: int, changes: Dict[str, Any]) -> dict:
        """
        Apply a partial update.

        Only keys present in `changes` are written. Null for a non-nullable
        column, or blank text for a required field, is rejected.
        """
        current = await self.get(record_id)
        changes = {key: value for key, value in changes.items() if key in self.table.c and key != "id"}

        cleared = [
            name for name, value in changes.items()
            if (value is None and not self.table.c[name].nullable)
            or (name in self.required_fields and isinstance(value, str) and not value.strip())
        ]
        if cleared:
            raise ValidationError(f"{', '.join(to_camel(name) for name in cleared)} cannot be empty")

        await self.before_update(current, changes)
        if not changes:
            return current

        if self.updated_field:
            changes[self.updated_field] = utc_naive_now()

        await self._execute(
            self.table.update().where(self.table.c.id == record_id).values(**changes),
            "update",
        )
        logger.info("Updated %s %s (%s)", self.label.lower(), record_id, ", ".join(sorted(changes)))
        return await self.get(record_id)

    async def delete(self, record_id: int) -> dict:
        """Hard delete by ID"""
        await self.get(record_id)
        await self._execute(self.table.delete().where(self.table.c.id == record_id), "delete")
        logger.info("Deleted %s %s", self.label.lower(), record_id)
        return {"success": True, "message": f"{self.label} deleted successfully"}
