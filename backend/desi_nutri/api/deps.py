from datetime import date, datetime
from typing import Optional

from sqlalchemy.orm import Session

from desi_nutri.crud import user_profile as crud_user_profile
from desi_nutri.utils.utils import get_local_date


def get_user_today(db: Session, user_id: str, now: Optional[datetime] = None) -> date:
    """
    Today's date on the user's wall clock.
    Uses the profile timezone, defaulting to the configured one.
    """
    profile = crud_user_profile.get_profile_by_user_id(db, user_id)
    tz_name = profile.timezone if profile else None
    return get_local_date(tz_name, now)


def get_profile_fitness_goal(db: Session, user_id: str) -> Optional[str]:
    profile = crud_user_profile.get_profile_by_user_id(db, user_id)
    return profile.fitness_goal if profile else None
