"""
Notification Models
Hero banner and "important" notifications on the landing page
"""

from sqlalchemy import Column, Integer, String, Text, DateTime
from placement_portal.database import Base


class HeroNotification(Base):
    __tablename__ = "hero_notifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    type = Column(String(20), nullable=False)  # URGENT / NEW / INFO / EVENT
    link = Column(Text, nullable=True)
    icon = Column(String(50), nullable=True)  # icon name for the frontend
    created_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, nullable=True)


class ImportantNotification(Base):
    __tablename__ = "important_notifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    type = Column(String(20), nullable=False)
    link = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, nullable=True)
