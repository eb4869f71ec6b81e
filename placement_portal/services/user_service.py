"""
User Service
TPO accounts used by the authentication boundary
"""

from typing import Optional

from sqlalchemy import select

from placement_portal.auth.password import hash_password, verify_password
from placement_portal.config import settings
from placement_portal.logging_config import get_logger
from placement_portal.models.user import User
from placement_portal.services.record_service import RecordService

logger = get_logger(__name__)


class UserService(RecordService):
    """Service for TPO user accounts"""

    model = User
    label = "User"
    required_fields = ("username", "password_hash")
    conflict_message = "Username already exists"

    async def get_by_username(self, username: str) -> Optional[dict]:
        return await self._fetch_one(select(self.table).where(self.table.c.username == username))

    async def authenticate(self, username: str, password: str) -> Optional[dict]:
        """User for valid credentials, otherwise None"""
        user = await self.get_by_username(username)
        if not user or not verify_password(password, user["password_hash"]):
            return None
        return user

    async def create_user(self, username: str, password: str, role: str = "tpo") -> dict:
        return await self.create({
            "username": username,
            "password_hash": hash_password(password),
            "role": role,
        })

    async def ensure_default_admin(self) -> Optional[dict]:
        """Create the configured TPO account if a password is set and it does not exist yet"""
        if not settings.DEFAULT_ADMIN_PASSWORD:
            return None
        existing = await self.get_by_username(settings.DEFAULT_ADMIN_USERNAME)
        if existing:
            return existing
        user = await self.create_user(settings.DEFAULT_ADMIN_USERNAME, settings.DEFAULT_ADMIN_PASSWORD)
        logger.info("Created default TPO account '%s'", settings.DEFAULT_ADMIN_USERNAME)
        return user


user_service = UserService()
