from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
import pytz

class ProfileBase(BaseModel):
    full_name: Optional[str] = Field(None, max_length=100)
    fitness_goal: Optional[str] = Field(None, max_length=100, description="Free text, English or Bangla")
    height_cm: Optional[float] = Field(None, gt=0, le=300)
    weight_kg: Optional[float] = Field(None, gt=0, le=500)
    timezone: Optional[str] = Field(None, description="IANA name, e.g. Asia/Dhaka")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v):
        if v is not None and v not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone: {v}")
        return v

class ProfileUpdate(ProfileBase):
    pass

class ProfileResponse(ProfileBase):
    id: int
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class BMIResponse(BaseModel):
    bmi: float
    category: str
