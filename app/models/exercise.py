from sqlalchemy import Column, String, Integer
from app.database.base import Base
import cuid


class Exercise(Base):
    """Global exercise catalog entry, not owned by any identity."""

    __tablename__ = "exercises"

    id = Column(String(25), primary_key=True, index=True, default=lambda: cuid.cuid())
    name = Column(String(100), nullable=False)
    category = Column(String(30), nullable=False)
    calories_per_minute = Column(Integer, nullable=False)
    emoji = Column(String(16), nullable=False)
