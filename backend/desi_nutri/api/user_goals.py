from datetime import date as DateType
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from desi_nutri.api.auth import get_current_user
from desi_nutri.api.deps import get_user_today
from desi_nutri.crud import user_goals as crud_user_goals
from desi_nutri.database import get_db
from desi_nutri.schemas.user_goals import DailyProgressResponse, UserGoalsResponse, UserGoalsUpdate
from desi_nutri.services import stats_service

router = APIRouter(
    prefix="/goals",
    tags=["goals"]
)

@router.get("/me", response_model=UserGoalsResponse)
def get_my_goals(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user)
):
    goals = crud_user_goals.get_by_user_id(db, user_id)
    if not goals:
        # Defaults until the user saves something
        return UserGoalsResponse(user_id=user_id)
    return goals

@router.put("/me", response_model=UserGoalsResponse)
def update_my_goals(
    goals_in: UserGoalsUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user)
):
    return crud_user_goals.upsert(db, user_id, goals_in)

@router.get("/me/progress", response_model=DailyProgressResponse)
def get_my_progress(
    date: Optional[DateType] = Query(None),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user)
):
    day = date or get_user_today(db, user_id)
    return stats_service.get_daily_progress(db, user_id, day)
