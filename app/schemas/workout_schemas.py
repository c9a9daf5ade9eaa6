from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from app.enums import IntensityLevel


class WorkoutCreate(BaseModel):
    """Schema for logging a workout."""
    exercise_type: str = Field(..., min_length=1, max_length=100)
    duration: int = Field(..., gt=0, le=1440, description="Duration in minutes")
    calories: int = Field(..., ge=0, le=20000)
    intensity: IntensityLevel
    notes: Optional[str] = Field(None, max_length=500)
    date: Optional[datetime] = Field(None, description="Defaults to now (UTC)")

    class Config:
        json_schema_extra = {
            "example": {
                "exercise_type": "Running",
                "duration": 30,
                "calories": 240,
                "intensity": "medium",
                "notes": "Morning jog in the park"
            }
        }


class WorkoutUpdate(BaseModel):
    """Partial workout update; only the fields sent are changed."""
    exercise_type: Optional[str] = Field(None, min_length=1, max_length=100)
    duration: Optional[int] = Field(None, gt=0, le=1440)
    calories: Optional[int] = Field(None, ge=0, le=20000)
    intensity: Optional[IntensityLevel] = None
    notes: Optional[str] = Field(None, max_length=500)
    date: Optional[datetime] = None


class WorkoutRecord(BaseModel):
    id: str
    user_id: str
    exercise_type: str
    duration: int
    calories: int
    intensity: IntensityLevel
    notes: Optional[str] = None
    date: datetime

    class Config:
        from_attributes = True
