"""
Attendance Model
Students marked present at an event
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from placement_portal.database import Base


class Attendance(Base):
    __tablename__ = "attendance"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=True)  # unlinked records allowed
    student_name = Column(Text, nullable=False)
    roll_number = Column(String(50), nullable=False, index=True)
    branch = Column(String(50), nullable=True)
    year = Column(Integer, nullable=True)
    marked_at = Column(DateTime, nullable=True)

    # Relationship
    event = relationship("Event", backref="attendance")
