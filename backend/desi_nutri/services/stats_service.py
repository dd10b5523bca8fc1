from datetime import date, timedelta
from typing import Dict

from sqlalchemy.orm import Session

from desi_nutri.crud import tracking as crud_tracking
from desi_nutri.crud import user_goals as crud_user_goals
from desi_nutri.crud import workout_plan as crud_workout_plan
from desi_nutri.models.tracking import DAILY_WATER_GOAL_ML
from desi_nutri.models.user_goals import DEFAULT_DAILY_CALORIES_BURN, DEFAULT_DAILY_EXERCISE_MINUTES

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")


def _progress(done: float, target: float) -> float:
    """Percentage towards target, capped at 100. Zero target means no progress to show."""
    if target <= 0:
        return 0.0
    return round(min(done / target * 100, 100.0), 1)


def get_daily_progress(db: Session, user_id: str, day: date) -> Dict:
    """
    Exercise totals for one day against the user's goals, plus plan completion.
    """
    goals = crud_user_goals.get_by_user_id(db, user_id)
    target_minutes = goals.daily_exercise_minutes if goals else DEFAULT_DAILY_EXERCISE_MINUTES
    target_calories = goals.daily_calories_burn if goals else DEFAULT_DAILY_CALORIES_BURN

    logs = crud_tracking.get_exercise_logs(db, user_id, day)
    total_minutes = sum(log.duration_minutes or 0 for log in logs)
    total_calories = round(sum(log.calories_burned or 0.0 for log in logs), 1)

    plan = crud_workout_plan.get_plan_for_date(db, user_id, day)
    items = plan.workouts if plan and plan.workouts else []

    return {
        "date": day,
        "total_minutes": total_minutes,
        "total_calories": total_calories,
        "target_minutes": target_minutes,
        "target_calories": target_calories,
        "minutes_progress": _progress(total_minutes, target_minutes),
        "calories_progress": _progress(total_calories, target_calories),
        "minutes_goal_met": total_minutes >= target_minutes,
        "calories_goal_met": total_calories >= target_calories,
        "plan_completed": sum(1 for item in items if item.get("checked")),
        "plan_total": len(items),
    }


def _sum_macros(food_logs) -> Dict:
    return {
        "calories": round(sum(log.calories or 0.0 for log in food_logs), 1),
        "protein_g": round(sum(log.protein_g or 0.0 for log in food_logs), 1),
        "carbs_g": round(sum(log.carbs_g or 0.0 for log in food_logs), 1),
        "fat_g": round(sum(log.fat_g or 0.0 for log in food_logs), 1),
    }


def get_daily_food_totals(db: Session, user_id: str, day: date) -> Dict:
    """Calories and macros for one day, overall and per meal type."""
    logs = crud_tracking.get_food_logs(db, user_id, day)
    by_meal = {}
    for meal_type in MEAL_TYPES:
        by_meal[meal_type] = _sum_macros([log for log in logs if log.meal_type == meal_type])
    return {"date": day, **_sum_macros(logs), "by_meal": by_meal}


def get_daily_water_totals(db: Session, user_id: str, day: date) -> Dict:
    total_ml = sum(log.amount_ml or 0 for log in crud_tracking.get_water_logs(db, user_id, day))
    return {
        "date": day,
        "total_ml": total_ml,
        "goal_ml": DAILY_WATER_GOAL_ML,
        "progress": _progress(total_ml, DAILY_WATER_GOAL_ML),
    }


def get_weekly_nutrition(db: Session, user_id: str, today: date) -> Dict:
    """
    Last 7 days of food totals (oldest first, today included).

    Averages only count days where any calories were logged.
    """
    start = today - timedelta(days=6)
    logs = crud_tracking.get_food_logs(db, user_id, start, today)

    days = []
    for offset in range(7):
        day = start + timedelta(days=offset)
        totals = _sum_macros([log for log in logs if log.log_date == day])
        days.append({"date": day, "day": day.strftime("%a"), **totals})

    tracked = [d for d in days if d["calories"] > 0]
    averages = {
        key: round(sum(d[key] for d in tracked) / len(tracked)) if tracked else 0
        for key in ("calories", "protein_g", "carbs_g", "fat_g")
    }
    return {"days": days, "averages": averages, "days_tracked": len(tracked)}
