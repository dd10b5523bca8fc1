from sqlalchemy import Column, Integer, String, Float, Date, DateTime
from datetime import datetime, date
from desi_nutri.database import Base

DAILY_WATER_GOAL_ML = 2500

class ExerciseLog(Base):
    __tablename__ = "exercise_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    log_date = Column(Date, default=date.today, index=True)

    # Logged Activity
    exercise_name = Column(String(100), nullable=False)
    exercise_type = Column(String(20), default="other") # cardio, strength, flexibility, sports, other
    duration_minutes = Column(Integer, nullable=False, default=0)
    calories_burned = Column(Float, default=0.0)
    intensity = Column(String(10), default="medium") # low, medium, high
    notes = Column(String(255), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

class FoodLog(Base):
    __tablename__ = "food_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    log_date = Column(Date, default=date.today, index=True)

    # Logged Item
    food_name = Column(String(100), nullable=False)
    meal_type = Column(String(20), default="snack") # breakfast, lunch, dinner, snack
    calories = Column(Float, nullable=True)
    protein_g = Column(Float, nullable=True)
    carbs_g = Column(Float, nullable=True)
    fat_g = Column(Float, nullable=True)
    quantity = Column(Float, default=1.0)
    unit = Column(String(20), nullable=True)
    notes = Column(String(255), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

class WaterLog(Base):
    __tablename__ = "water_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    log_date = Column(Date, default=date.today, index=True)
    amount_ml = Column(Integer, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
