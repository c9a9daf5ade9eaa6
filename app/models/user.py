from sqlalchemy import Column, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database.base import Base
import cuid


class User(Base):
    """Guest or registered identity. Both share the same id namespace."""

    __tablename__ = "users"

    # Guest ids are "guest_<uuid4>" (42 chars), registered ids are cuids
    id = Column(String(64), primary_key=True, index=True, default=lambda: cuid.cuid())
    username = Column(String(255), unique=True, index=True, nullable=True)
    password_hash = Column(String(255), nullable=True)
    is_guest = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    workouts = relationship("Workout", back_populates="user")
    goals = relationship("Goal", back_populates="user")
