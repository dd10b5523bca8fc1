from sqlalchemy import Boolean, Column, DateTime, Integer, String
from datetime import datetime
from desi_nutri.database import Base

DEFAULT_DAILY_EXERCISE_MINUTES = 30
DEFAULT_DAILY_CALORIES_BURN = 300

class UserGoals(Base):
    __tablename__ = "user_goals"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), unique=True, nullable=False)

    daily_exercise_minutes = Column(Integer, default=DEFAULT_DAILY_EXERCISE_MINUTES)
    daily_calories_burn = Column(Integer, default=DEFAULT_DAILY_CALORIES_BURN)
    exercise_goal_enabled = Column(Boolean, default=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
