from datetime import date
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from desi_nutri.models.tracking import ExerciseLog, FoodLog, WaterLog

"""
Tracking CRUD
-------------
Exercise logs are staged only (flush, no commit); the workout service commits
them together with the plan sync. Food and water logs are standalone rows and
commit here.
"""

def create_exercise_logs(db: Session, user_id: str, log_date: date, entries: List[dict]) -> List[ExerciseLog]:
    logs = [ExerciseLog(user_id=user_id, log_date=log_date, **entry) for entry in entries]
    db.add_all(logs)
    db.flush()
    return logs

def get_exercise_logs(db: Session, user_id: str, log_date: date) -> List[ExerciseLog]:
    return db.query(ExerciseLog).filter(
        ExerciseLog.user_id == user_id,
        ExerciseLog.log_date == log_date
    ).order_by(ExerciseLog.created_at, ExerciseLog.id).all()

def get_exercise_log(db: Session, user_id: str, log_id: int) -> Optional[ExerciseLog]:
    return db.query(ExerciseLog).filter(
        ExerciseLog.id == log_id,
        ExerciseLog.user_id == user_id
    ).first()

def create_food_log(db: Session, user_id: str, log_date: date, entry: dict) -> FoodLog:
    db_log = FoodLog(user_id=user_id, log_date=log_date, **entry)
    db.add(db_log)
    db.commit()
    db.refresh(db_log)
    return db_log

def get_food_logs(db: Session, user_id: str, start_date: date, end_date: Optional[date] = None) -> List[FoodLog]:
    """Food logs from start_date through end_date (inclusive), oldest first."""
    return db.query(FoodLog).filter(
        FoodLog.user_id == user_id,
        FoodLog.log_date >= start_date,
        FoodLog.log_date <= (end_date or start_date)
    ).order_by(FoodLog.log_date, FoodLog.created_at, FoodLog.id).all()

def get_food_log(db: Session, user_id: str, log_id: int) -> Optional[FoodLog]:
    return db.query(FoodLog).filter(
        FoodLog.id == log_id,
        FoodLog.user_id == user_id
    ).first()

def create_water_log(db: Session, user_id: str, log_date: date, amount_ml: int) -> WaterLog:
    db_log = WaterLog(user_id=user_id, log_date=log_date, amount_ml=amount_ml)
    db.add(db_log)
    db.commit()
    db.refresh(db_log)
    return db_log

def get_water_logs(db: Session, user_id: str, log_date: date) -> List[WaterLog]:
    return db.query(WaterLog).filter(
        WaterLog.user_id == user_id,
        WaterLog.log_date == log_date
    ).order_by(WaterLog.created_at, WaterLog.id).all()

def get_water_log(db: Session, user_id: str, log_id: int) -> Optional[WaterLog]:
    return db.query(WaterLog).filter(
        WaterLog.id == log_id,
        WaterLog.user_id == user_id
    ).first()

def delete_log(db: Session, db_log: Union[ExerciseLog, FoodLog, WaterLog]):
    db.delete(db_log)
    db.commit()
