"""
News Model
Short announcements shown on the landing page
"""

from sqlalchemy import Column, Integer, Text, DateTime
from placement_portal.database import Base


class News(Base):
    __tablename__ = "news"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, nullable=True)
