from datetime import date
from typing import Dict, List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified

from desi_nutri.models.workout_plan import WorkoutPlan

"""
Workout Plan CRUD
-----------------
Pure Database Access Object for daily Workout Plans.
Functions here stage changes only; desi_nutri.services.workout_service owns
commit and rollback so delete-then-insert runs in a single transaction.
"""

def get_plan(db: Session, plan_id: str) -> Optional[WorkoutPlan]:
    return db.query(WorkoutPlan).filter(WorkoutPlan.id == plan_id).first()

def get_plan_for_date(db: Session, user_id: str, plan_date: date) -> Optional[WorkoutPlan]:
    return db.query(WorkoutPlan).filter(
        WorkoutPlan.user_id == user_id,
        WorkoutPlan.plan_date == plan_date
    ).first()

def count_plans_for_date(db: Session, user_id: str, plan_date: date) -> int:
    return db.query(WorkoutPlan).filter(
        WorkoutPlan.user_id == user_id,
        WorkoutPlan.plan_date == plan_date
    ).count()

def create_plan(
    db: Session,
    user_id: str,
    plan_date: date,
    workouts: List[Dict],
    tip_en: str,
    tip_bn: str,
    missed_count: int = 0,
) -> WorkoutPlan:
    db_plan = WorkoutPlan(
        user_id=user_id,
        plan_date=plan_date,
        workouts=workouts,
        generated_en=tip_en,
        generated_bn=tip_bn,
        missed_count=missed_count,
    )
    db.add(db_plan)
    db.flush()
    return db_plan

def delete_plan_for_date(db: Session, user_id: str, plan_date: date) -> int:
    deleted = db.query(WorkoutPlan).filter(
        WorkoutPlan.user_id == user_id,
        WorkoutPlan.plan_date == plan_date
    ).delete(synchronize_session="fetch")
    db.flush()
    return deleted

def replace_workouts(db: Session, db_plan: WorkoutPlan, workouts: List[Dict]) -> WorkoutPlan:
    """Full rewrite of the items list; there is no per-item update."""
    db_plan.workouts = workouts
    # JSON columns do not track in-place mutation
    flag_modified(db_plan, "workouts")
    db.add(db_plan)
    db.flush()
    return db_plan
