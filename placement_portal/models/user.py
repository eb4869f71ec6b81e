"""
User Model
TPO staff accounts for the admin dashboard
"""

from sqlalchemy import Column, Integer, String, Text, DateTime
from placement_portal.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(Text, nullable=False)
    role = Column(String(20), nullable=False, default="tpo")
    created_at = Column(DateTime, nullable=True)
