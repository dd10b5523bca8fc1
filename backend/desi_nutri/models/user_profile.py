# desi_nutri/models/user_profile.py
from sqlalchemy import Column, Integer, Float, String, DateTime
from datetime import datetime
from desi_nutri.config import DEFAULT_TIMEZONE
from desi_nutri.database import Base

class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), unique=True, nullable=False)

    full_name = Column(String(100), nullable=True)
    fitness_goal = Column(String(100), nullable=True)  # free text, e.g. "weight_loss", "ওজন কমানো"
    height_cm = Column(Float, nullable=True)
    weight_kg = Column(Float, nullable=True)
    timezone = Column(String(50), default=DEFAULT_TIMEZONE) # e.g. "Asia/Dhaka"

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
