"""
Student Model
Current students and their placement outcome
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from placement_portal.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    roll_number = Column(String(50), unique=True, nullable=False, index=True)
    branch = Column(String(50), nullable=True, index=True)
    year = Column(Integer, nullable=True)
    batch = Column(String(20), nullable=True)  # e.g. "2020-2024"
    email = Column(Text, nullable=True)
    phone = Column(String(30), nullable=True)
    photo_url = Column(Text, nullable=True)

    # Placement (only meaningful when selected)
    selected = Column(Boolean, nullable=False, default=False)
    company_name = Column(Text, nullable=True)
    offer_letter_url = Column(Text, nullable=True)
    package = Column(Integer, nullable=True)  # LPA
    role = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, nullable=True)
