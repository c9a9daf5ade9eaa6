from pydantic import BaseModel, Field

from app.enums import ExerciseCategory


class ExerciseCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    category: ExerciseCategory
    calories_per_minute: int = Field(..., gt=0, le=100)
    emoji: str = Field(..., min_length=1, max_length=16)

    class Config:
        use_enum_values = True


class ExerciseRecord(BaseModel):
    id: str
    name: str
    category: str
    calories_per_minute: int
    emoji: str

    class Config:
        from_attributes = True
