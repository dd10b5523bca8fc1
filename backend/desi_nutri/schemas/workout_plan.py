from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date, datetime

class WorkoutItem(BaseModel):
    id: Optional[str] = None  # library id, absent on manually added items
    name: str
    name_bn: Optional[str] = None
    duration: int = 0  # planned minutes
    type: Optional[str] = None
    checked: bool = False
    completed_at: Optional[datetime] = None

    # Filled in once a logged exercise has been synced into the item
    planned_duration: Optional[int] = None
    completed_duration: Optional[int] = None
    completion_percentage: Optional[int] = None

class MissedWorkout(BaseModel):
    en: str
    bn: str
    id: str = ""

class WorkoutPlanResponse(BaseModel):
    id: str
    user_id: str
    plan_date: date
    workouts: List[WorkoutItem]
    generated_en: Optional[str] = None
    generated_bn: Optional[str] = None
    missed_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class GeneratePlanRequest(BaseModel):
    fitness_goal: Optional[str] = Field(None, alias="fitnessGoal")
    force_regenerate: bool = Field(False, alias="forceRegenerate")

    class Config:
        populate_by_name = True

class GeneratePlanResponse(BaseModel):
    plan: WorkoutPlanResponse
    missed_workouts: Optional[List[MissedWorkout]] = Field(None, alias="missedWorkouts")

    class Config:
        populate_by_name = True

class ToggleItemRequest(BaseModel):
    checked: bool
