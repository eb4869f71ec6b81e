"""
Notification Service
Hero and important notifications for the landing page, plus news
"""

from typing import Any, Dict, List

from placement_portal.errors import NotFoundError
from placement_portal.models.news import News
from placement_portal.models.notification import HeroNotification, ImportantNotification
from placement_portal.services.record_service import RecordService

# Shown when no important notification exists; never stored, never editable
DEFAULT_IMPORTANT_NOTIFICATIONS = [
    {
        "id": -1,
        "title": "Placement Registration Open",
        "type": "URGENT",
        "link": "/placements/register",
        "is_default": True,
    },
    {
        "id": -2,
        "title": "Resume Building Workshop",
        "type": "NEW",
        "link": "/workshops/resume-building",
        "is_default": True,
    },
    {
        "id": -3,
        "title": "Mock Interview Sessions",
        "type": "INFO",
        "link": "/interviews/mock",
        "is_default": True,
    },
]


class NotificationService(RecordService):
    """Notifications are ordered newest first"""

    required_fields = ("title", "type")
    updated_field = "updated_at"
    order_by = ("-created_at", "-id")

    async def get(self, record_id: int) -> dict:
        # Non-positive ids belong to built-in defaults
        if record_id <= 0:
            raise NotFoundError(f"{self.label} not found")
        return await super().get(record_id)


class HeroNotificationService(NotificationService):
    model = HeroNotification
    label = "Hero notification"


class ImportantNotificationService(NotificationService):
    model = ImportantNotification
    label = "Important notification"

    async def list_for_display(self) -> List[Dict[str, Any]]:
        """Stored notifications, or the built-in defaults when there are none"""
        records = await self.list()
        if records:
            return records
        return [dict(item) for item in DEFAULT_IMPORTANT_NOTIFICATIONS]


class NewsService(RecordService):
    model = News
    label = "News"
    required_fields = ("title", "content")
    updated_field = "updated_at"
    order_by = ("-created_at", "-id")


hero_notification_service = HeroNotificationService()
important_notification_service = ImportantNotificationService()
news_service = NewsService()
