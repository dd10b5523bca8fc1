import copy
import logging
import random
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from desi_nutri.crud import tracking as crud_tracking
from desi_nutri.crud import workout_plan as crud_workout_plan
from desi_nutri.models.tracking import ExerciseLog
from desi_nutri.models.workout_plan import WorkoutPlan
from desi_nutri.services.exercise_library import pick_tip
from desi_nutri.services.plan_selector import GoalQuotaStrategy, goal_to_quota, select_exercises
from desi_nutri.utils.matching import NameMatcher, names_match

logger = logging.getLogger(__name__)

"""
Workout Service
---------------
Owns the daily workout plan lifecycle.
1. Computes yesterday's missed items.
2. Returns today's plan, or generates and stores one.
3. Toggles items on user interaction.
4. Syncs logged exercises into today's plan by fuzzy name match.
The caller always passes the user id and the current date/time explicitly.
"""


def _isoformat(moment: datetime) -> str:
    return moment.isoformat()


def collect_missed_workouts(db: Session, user_id: str, today: date) -> List[Dict[str, str]]:
    """Unchecked items from yesterday's plan, as {en, bn, id}."""
    yesterday_plan = crud_workout_plan.get_plan_for_date(db, user_id, today - timedelta(days=1))
    if not yesterday_plan:
        return []

    missed = []
    for item in yesterday_plan.workouts or []:
        if item.get("checked"):
            continue
        name = item.get("name") or ""
        missed.append({
            "en": name,
            "bn": item.get("name_bn") or name,
            "id": item.get("id") or "",
        })
    return missed


def get_or_create_today_plan(
    db: Session,
    user_id: str,
    fitness_goal: Optional[str],
    force_regenerate: bool,
    today: date,
    rng: Optional[random.Random] = None,
    quota_strategy: GoalQuotaStrategy = goal_to_quota,
) -> Tuple[WorkoutPlan, List[Dict[str, str]]]:
    """
    Return today's plan plus yesterday's missed items.

    An existing plan is returned untouched unless force_regenerate is set, in
    which case it is replaced. Missed items are recomputed on every call.
    """
    missed = collect_missed_workouts(db, user_id, today)

    if not force_regenerate:
        existing = crud_workout_plan.get_plan_for_date(db, user_id, today)
        if existing:
            return existing, missed

    rng = rng or random.Random()
    missed_ids = [m["id"] for m in missed if m["id"]]
    exercises = select_exercises(fitness_goal, missed_ids, rng=rng, quota_strategy=quota_strategy)
    workouts = [exercise.to_workout_item() for exercise in exercises]
    tip_en, tip_bn = pick_tip(rng)

    logger.info(
        f"Generating workout plan for user {user_id} on {today} "
        f"(goal={fitness_goal!r}, missed={len(missed)}, force={force_regenerate})"
    )

    try:
        if force_regenerate:
            crud_workout_plan.delete_plan_for_date(db, user_id, today)
        plan = crud_workout_plan.create_plan(
            db,
            user_id=user_id,
            plan_date=today,
            workouts=workouts,
            tip_en=tip_en,
            tip_bn=tip_bn,
            missed_count=len(missed),
        )
        db.commit()
    except IntegrityError:
        # A concurrent request already stored today's plan
        db.rollback()
        existing = crud_workout_plan.get_plan_for_date(db, user_id, today)
        if existing is None:
            raise
        logger.info(f"Plan for user {user_id} on {today} created concurrently, returning stored plan")
        return existing, missed
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to save workout plan for user {user_id}")
        raise

    db.refresh(plan)
    return plan, missed


def get_today_plan(db: Session, user_id: str, today: date) -> Optional[WorkoutPlan]:
    return crud_workout_plan.get_plan_for_date(db, user_id, today)


def set_item_checked(
    db: Session,
    user_id: str,
    plan_id: str,
    index: int,
    checked: bool,
    now: datetime,
) -> Optional[WorkoutPlan]:
    """
    Mark one item done or not done.

    Returns None when the plan does not exist for this user.
    """
    plan = crud_workout_plan.get_plan(db, plan_id)
    if not plan or plan.user_id != user_id:
        return None

    workouts = copy.deepcopy(plan.workouts or [])
    if index < 0 or index >= len(workouts):
        raise ValueError(f"Item index {index} out of range for plan with {len(workouts)} items")

    item = workouts[index]
    if not checked:
        item["completed_at"] = None
    elif not item.get("checked") or not item.get("completed_at"):
        item["completed_at"] = _isoformat(now)
    item["checked"] = checked

    try:
        crud_workout_plan.replace_workouts(db, plan, workouts)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to update item {index} of plan {plan_id}")
        raise

    db.refresh(plan)
    return plan


def _apply_logged_exercises(
    workouts: List[Dict],
    entries: Iterable[Dict],
    now: datetime,
    matcher: NameMatcher,
) -> List[int]:
    updated = []
    for entry in entries:
        exercise_name = entry.get("exercise_name") or ""
        logged_minutes = entry.get("duration_minutes") or 0

        for i, item in enumerate(workouts):
            if item.get("checked"):
                continue
            if not (matcher(exercise_name, item.get("name") or "")
                    or matcher(exercise_name, item.get("name_bn") or "")):
                continue

            planned = item.get("duration") or item.get("planned_duration") or 0
            completed = (item.get("completed_duration") or 0) + logged_minutes
            done = completed >= planned

            item["planned_duration"] = planned
            item["completed_duration"] = completed
            item["completion_percentage"] = min(100, round(completed / planned * 100)) if planned > 0 else 100
            item["checked"] = done
            item["completed_at"] = _isoformat(now) if done else None

            if i not in updated:
                updated.append(i)
            break
    return updated


def _stage_plan_sync(
    db: Session,
    user_id: str,
    today: date,
    entries: Iterable[Dict],
    now: datetime,
    matcher: NameMatcher,
) -> Tuple[Optional[WorkoutPlan], List[int]]:
    plan = crud_workout_plan.get_plan_for_date(db, user_id, today)
    if not plan or not plan.workouts:
        return plan, []

    workouts = copy.deepcopy(plan.workouts)
    updated = _apply_logged_exercises(workouts, entries, now, matcher)
    if updated:
        crud_workout_plan.replace_workouts(db, plan, workouts)
    return plan, updated


def sync_logged_exercises(
    db: Session,
    user_id: str,
    today: date,
    entries: Iterable[Dict],
    now: datetime,
    matcher: NameMatcher = names_match,
) -> List[int]:
    """
    Credit logged minutes to matching unchecked items in today's plan.

    Each entry ({exercise_name, duration_minutes}) updates at most the first
    matching unchecked item. Returns the indices that changed.
    """
    try:
        plan, updated = _stage_plan_sync(db, user_id, today, entries, now, matcher)
        if not updated:
            return []
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to sync logged exercises for user {user_id} on {today}")
        raise

    logger.info(f"Synced logged exercises into plan {plan.id}: items {updated}")
    return updated


def record_logged_exercises(
    db: Session,
    user_id: str,
    log_date: date,
    today: date,
    entries: List[Dict],
    now: datetime,
    matcher: NameMatcher = names_match,
) -> Tuple[List[ExerciseLog], List[int]]:
    """
    Store exercise logs and sync today's plan in one transaction.

    Back-dated logs are stored without touching any plan. Either the logs
    and the plan update are both committed or neither is.
    """
    updated: List[int] = []
    try:
        logs = crud_tracking.create_exercise_logs(db, user_id, log_date, entries)
        if log_date == today:
            _, updated = _stage_plan_sync(db, user_id, today, entries, now, matcher)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to save exercise logs for user {user_id}")
        raise

    for log in logs:
        db.refresh(log)
    if updated:
        logger.info(f"Synced {len(logs)} logged exercises for user {user_id}: items {updated}")
    return logs, updated
