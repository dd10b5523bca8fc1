import logging
from datetime import date as DateType, datetime
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from desi_nutri.api.auth import get_current_user
from desi_nutri.api.deps import get_user_today
from desi_nutri.crud import tracking as crud_tracking
from desi_nutri.database import get_db
from desi_nutri.services import stats_service, workout_service
from desi_nutri.utils.utils import utc_now

logger = logging.getLogger(__name__)

router = APIRouter()

# --- Pydantic Schemas ---
class LoggedExercise(BaseModel):
    exercise_name: str = Field(..., min_length=1, max_length=100)
    exercise_type: Literal["cardio", "strength", "flexibility", "sports", "other"] = "other"
    duration_minutes: int = Field(..., ge=0)
    calories_burned: float = Field(0.0, ge=0)
    intensity: Literal["low", "medium", "high"] = "medium"
    notes: Optional[str] = Field(None, max_length=255)

class LogExercisesRequest(BaseModel):
    exercises: List[LoggedExercise] = Field(..., min_length=1)
    date: Optional[DateType] = None

class ExerciseLogResponse(BaseModel):
    id: int
    log_date: DateType
    exercise_name: str
    exercise_type: Optional[str] = None
    duration_minutes: int
    calories_burned: Optional[float] = None
    intensity: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class LogFoodRequest(BaseModel):
    food_name: str = Field(..., min_length=1, max_length=100)
    meal_type: Literal["breakfast", "lunch", "dinner", "snack"] = "snack"
    calories: Optional[float] = Field(None, ge=0)
    protein_g: Optional[float] = Field(None, ge=0)
    carbs_g: Optional[float] = Field(None, ge=0)
    fat_g: Optional[float] = Field(None, ge=0)
    quantity: float = Field(1.0, gt=0)
    unit: Optional[str] = Field(None, max_length=20)
    notes: Optional[str] = Field(None, max_length=255)
    date: Optional[DateType] = None

class FoodLogResponse(BaseModel):
    id: int
    log_date: DateType
    food_name: str
    meal_type: Optional[str] = None
    calories: Optional[float] = None
    protein_g: Optional[float] = None
    carbs_g: Optional[float] = None
    fat_g: Optional[float] = None
    quantity: Optional[float] = None
    unit: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class LogWaterRequest(BaseModel):
    amount_ml: int = Field(..., gt=0, le=5000)
    date: Optional[DateType] = None

class WaterLogResponse(BaseModel):
    id: int
    log_date: DateType
    amount_ml: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

# --- Endpoints: exercise ---

@router.post("/exercises", status_code=status.HTTP_201_CREATED)
def log_exercises(
    request: LogExercisesRequest,
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Log exercises and credit them to matching items in today's workout plan.
    Only today's plan is kept in sync; back-dated logs are history only.
    """
    today = get_user_today(db, user_id)
    log_date = request.date or today
    entries = [exercise.model_dump() for exercise in request.exercises]

    try:
        logs, synced = workout_service.record_logged_exercises(
            db, user_id, log_date, today, entries, now=utc_now()
        )
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to save exercises")

    return {
        "message": f"Logged {len(logs)} exercise{'s' if len(logs) != 1 else ''}",
        "log_ids": [log.id for log in logs],
        "synced_items": synced,
    }

@router.get("/exercises", response_model=List[ExerciseLogResponse])
def list_exercises(
    date: Optional[DateType] = Query(None, description="Defaults to today in the user's timezone"),
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    day = date or get_user_today(db, user_id)
    return crud_tracking.get_exercise_logs(db, user_id, day)

@router.delete("/exercises/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_exercise(
    log_id: int,
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    db_log = crud_tracking.get_exercise_log(db, user_id, log_id)
    if not db_log:
        raise HTTPException(status_code=404, detail="Exercise log not found")
    crud_tracking.delete_log(db, db_log)

# --- Endpoints: food ---

@router.post("/food", status_code=status.HTTP_201_CREATED, response_model=FoodLogResponse)
def log_food(
    request: LogFoodRequest,
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    log_date = request.date or get_user_today(db, user_id)
    try:
        return crud_tracking.create_food_log(db, user_id, log_date, request.model_dump(exclude={"date"}))
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to save food log for user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to save food log")

@router.get("/food")
def list_food(
    date: Optional[DateType] = Query(None, description="Defaults to today in the user's timezone"),
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    The day's food logs plus calorie and macro totals per meal type.
    """
    day = date or get_user_today(db, user_id)
    logs = crud_tracking.get_food_logs(db, user_id, day)
    return {
        "logs": [FoodLogResponse.model_validate(log) for log in logs],
        "totals": stats_service.get_daily_food_totals(db, user_id, day),
    }

@router.get("/food/weekly")
def weekly_food(
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return stats_service.get_weekly_nutrition(db, user_id, get_user_today(db, user_id))

@router.delete("/food/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_food(
    log_id: int,
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    db_log = crud_tracking.get_food_log(db, user_id, log_id)
    if not db_log:
        raise HTTPException(status_code=404, detail="Food log not found")
    crud_tracking.delete_log(db, db_log)

# --- Endpoints: water ---

@router.post("/water", status_code=status.HTTP_201_CREATED, response_model=WaterLogResponse)
def log_water(
    request: LogWaterRequest,
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    log_date = request.date or get_user_today(db, user_id)
    try:
        return crud_tracking.create_water_log(db, user_id, log_date, request.amount_ml)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to save water log for user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to save water log")

@router.get("/water")
def list_water(
    date: Optional[DateType] = Query(None, description="Defaults to today in the user's timezone"),
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    day = date or get_user_today(db, user_id)
    logs = crud_tracking.get_water_logs(db, user_id, day)
    return {
        "logs": [WaterLogResponse.model_validate(log) for log in logs],
        "totals": stats_service.get_daily_water_totals(db, user_id, day),
    }

@router.delete("/water/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_water(
    log_id: int,
    user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    db_log = crud_tracking.get_water_log(db, user_id, log_id)
    if not db_log:
        raise HTTPException(status_code=404, detail="Water log not found")
    crud_tracking.delete_log(db, db_log)
