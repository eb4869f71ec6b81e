"""
Database Models
Import all models here for Alembic migrations
"""

from placement_portal.models.user import User
from placement_portal.models.student import Student
from placement_portal.models.event import Event
from placement_portal.models.alumni import Alumni
from placement_portal.models.attendance import Attendance
from placement_portal.models.notification import HeroNotification, ImportantNotification
from placement_portal.models.news import News

__all__ = [
    "User",
    "Student",
    "Event",
    "Alumni",
    "Attendance",
    "HeroNotification",
    "ImportantNotification",
    "News",
]
