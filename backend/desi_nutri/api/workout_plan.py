import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from desi_nutri.api.auth import get_current_user
from desi_nutri.api.deps import get_profile_fitness_goal, get_user_today
from desi_nutri.database import get_db
from desi_nutri.schemas.workout_plan import (
    GeneratePlanRequest, GeneratePlanResponse, MissedWorkout, ToggleItemRequest, WorkoutPlanResponse,
)
from desi_nutri.services import workout_service
from desi_nutri.utils.utils import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Workout Plans"])


@router.post("/generate-workout-plan", response_model=GeneratePlanResponse)
def generate_plan_endpoint(
    request: GeneratePlanRequest,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user)
):
    """
    Return today's workout plan, generating one if needed (or if forced),
    together with the items left unchecked yesterday.
    """
    fitness_goal = request.fitness_goal
    if fitness_goal is None:
        fitness_goal = get_profile_fitness_goal(db, user_id)

    try:
        today = get_user_today(db, user_id)
        plan, missed = workout_service.get_or_create_today_plan(
            db,
            user_id=user_id,
            fitness_goal=fitness_goal,
            force_regenerate=request.force_regenerate,
            today=today,
        )
    except Exception:
        # Return generic error message to client, log the specific error
        logger.exception(f"Failed to generate workout plan for user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to save workout plan")

    return GeneratePlanResponse(
        plan=WorkoutPlanResponse.model_validate(plan),
        missed_workouts=[MissedWorkout(**m) for m in missed] or None,
    )


@router.get("/workout-plans/today", response_model=WorkoutPlanResponse)
def get_today_workout(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user)
):
    plan = workout_service.get_today_plan(db, user_id, get_user_today(db, user_id))
    if not plan:
        raise HTTPException(status_code=404, detail="Workout plan not found")
    return plan


@router.patch("/workout-plans/{plan_id}/items/{index}", response_model=WorkoutPlanResponse)
def toggle_workout_item(
    plan_id: str,
    index: int,
    body: ToggleItemRequest,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user)
):
    """
    Check or uncheck one item. The whole item list is rewritten.
    """
    try:
        plan = workout_service.set_item_checked(db, user_id, plan_id, index, body.checked, now=utc_now())
    except ValueError as ve:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(ve))
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to save progress")

    if not plan:
        raise HTTPException(status_code=404, detail="Workout plan not found")
    return plan
