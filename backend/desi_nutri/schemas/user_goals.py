from pydantic import BaseModel, Field
from typing import Optional
from datetime import date

class UserGoalsBase(BaseModel):
    daily_exercise_minutes: int = Field(30, gt=0, description="Target active minutes per day")
    daily_calories_burn: int = Field(300, gt=0, description="Target kcal burned per day")
    exercise_goal_enabled: bool = False

class UserGoalsUpdate(BaseModel):
    daily_exercise_minutes: Optional[int] = Field(None, gt=0)
    daily_calories_burn: Optional[int] = Field(None, gt=0)
    exercise_goal_enabled: Optional[bool] = None

class UserGoalsResponse(UserGoalsBase):
    user_id: str

    class Config:
        from_attributes = True

class DailyProgressResponse(BaseModel):
    date: date
    total_minutes: int
    total_calories: float
    target_minutes: int
    target_calories: int
    minutes_progress: float
    calories_progress: float
    minutes_goal_met: bool
    calories_goal_met: bool
    plan_completed: int
    plan_total: int
