from sqlalchemy import Column, String, ForeignKey, DateTime, Float
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database.base import Base
import cuid


class Goal(Base):
    """Calorie or activity target. ``current`` only moves on explicit progress updates."""

    __tablename__ = "goals"

    id = Column(String(25), primary_key=True, index=True, default=lambda: cuid.cuid())
    user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)

    type = Column(String(30), nullable=False)  # Store as string to avoid enum issues
    target = Column(Float, nullable=False)
    current = Column(Float, nullable=False, default=0)
    date = Column(DateTime, nullable=False, default=datetime.utcnow)

    user = relationship("User", back_populates="goals")
