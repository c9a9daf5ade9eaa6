from pydantic import BaseModel, Field
from datetime import datetime

from app.enums import GoalType


class GoalCreate(BaseModel):
    type: GoalType
    target: float = Field(..., gt=0)

    class Config:
        json_schema_extra = {
            "example": {
                "type": "daily_calories",
                "target": 500
            }
        }


class GoalProgressUpdate(BaseModel):
    current: float = Field(..., ge=0)


class GoalRecord(BaseModel):
    id: str
    user_id: str
    type: GoalType
    target: float
    current: float = 0
    date: datetime

    class Config:
        from_attributes = True
