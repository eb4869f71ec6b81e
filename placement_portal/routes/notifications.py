"""
Notification Routes
Hero and important notifications shown on the landing page
"""

from enum import Enum
from typing import List
from fastapi import APIRouter, Depends, status
from placement_portal.auth import get_tpo_admin
from placement_portal.schemas.notification import NotificationCreate, NotificationUpdate, NotificationResponse
from placement_portal.services.notification_service import (
    hero_notification_service,
    important_notification_service,
)

router = APIRouter()


class NotificationKind(str, Enum):
    HERO = "hero"
    IMPORTANT = "important"


SERVICES = {
    NotificationKind.HERO: hero_notification_service,
    NotificationKind.IMPORTANT: important_notification_service,
}


@router.get("/{kind}", response_model=List[NotificationResponse])
async def list_notifications(kind: NotificationKind):
    """
    Notifications, newest first

    Important notifications fall back to a built-in set (negative ids,
    `isDefault: true`) while none are stored.
    """
    if kind == NotificationKind.IMPORTANT:
        return await important_notification_service.list_for_display()
    return await hero_notification_service.list()


@router.post("/{kind}", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    kind: NotificationKind,
    request: NotificationCreate,
    current_admin: dict = Depends(get_tpo_admin)
):
    return await SERVICES[kind].create(request.model_dump())


@router.put("/{kind}/{notification_id}", response_model=NotificationResponse)
async def update_notification(
    kind: NotificationKind,
    notification_id: int,
    request: NotificationUpdate,
    current_admin: dict = Depends(get_tpo_admin)
):
    return await SERVICES[kind].update(notification_id, request.model_dump(exclude_unset=True))


@router.delete("/{kind}/{notification_id}")
async def delete_notification(
    kind: NotificationKind,
    notification_id: int,
    current_admin: dict = Depends(get_tpo_admin)
):
    return await SERVICES[kind].delete(notification_id)
