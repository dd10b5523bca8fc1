import uuid
from datetime import datetime

from sqlalchemy import JSON, Column, Date, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB

from desi_nutri.database import Base


def _new_uuid() -> str:
    return str(uuid.uuid4())


class WorkoutPlan(Base):
    """One user's workout checklist for one calendar day."""

    __tablename__ = "workout_plans"
    __table_args__ = (
        UniqueConstraint("user_id", "plan_date", name="uq_workout_plans_user_date"),
    )

    id = Column(String(36), primary_key=True, default=_new_uuid)
    user_id = Column(String(64), nullable=False, index=True)
    plan_date = Column(Date, nullable=False)

    # Ordered list of items: {id, name, name_bn, duration, type, checked, completed_at, ...}
    workouts = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)

    # Motivational tip pair
    generated_en = Column(Text, nullable=True)
    generated_bn = Column(Text, nullable=True)

    # Unchecked items left on the previous day's plan at generation time
    missed_count = Column(Integer, default=0)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<WorkoutPlan {self.user_id} {self.plan_date} items={len(self.workouts or [])}>"
