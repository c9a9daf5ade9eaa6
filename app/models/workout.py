from sqlalchemy import Column, String, ForeignKey, DateTime, Integer, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database.base import Base
import cuid


class Workout(Base):
    """A logged workout, owned by exactly one identity."""

    __tablename__ = "workouts"

    id = Column(String(25), primary_key=True, index=True, default=lambda: cuid.cuid())
    user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)

    exercise_type = Column(String(100), nullable=False)
    duration = Column(Integer, nullable=False)  # minutes
    calories = Column(Integer, nullable=False)
    intensity = Column(String(10), nullable=False)  # low, medium, high
    notes = Column(String(500), nullable=True)
    date = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)  # UTC

    user = relationship("User", back_populates="workouts")

    __table_args__ = (
        Index("ix_workout_user_date", "user_id", "date"),
    )
