"""
Alumni Model
Graduates and where they went on to study
"""

from sqlalchemy import Column, Integer, String, Text, DateTime
from placement_portal.database import Base


class Alumni(Base):
    __tablename__ = "alumni"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    roll_number = Column(String(50), nullable=False)
    pass_out_year = Column(Integer, nullable=False, index=True)
    higher_education_college = Column(Text, nullable=True)
    college_roll_number = Column(String(50), nullable=True)
    address = Column(Text, nullable=False)
    contact_number = Column(String(30), nullable=False)
    email = Column(Text, nullable=False)

    created_at = Column(DateTime, nullable=True)
