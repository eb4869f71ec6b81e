"""
Event Model
Placement drives and campus events; status is derived, never stored
"""

from sqlalchemy import Column, Integer, Text, DateTime
from placement_portal.database import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    company = Column(Text, nullable=False, index=True)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    attachment_url = Column(Text, nullable=True)
    notification_link = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, nullable=True)
