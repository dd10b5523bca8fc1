from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from desi_nutri.api.auth import get_current_user
from desi_nutri.crud import user_profile as crud_user_profile
from desi_nutri.database import get_db
from desi_nutri.schemas.user_profile import BMIResponse, ProfileResponse, ProfileUpdate
from desi_nutri.utils.health_calc import bmi_category, calculate_bmi

router = APIRouter(
    prefix="/profile",
    tags=["profile"]
)

@router.get("/me", response_model=ProfileResponse)
def get_my_profile(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user)
):
    profile = crud_user_profile.get_profile_by_user_id(db, user_id)
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile

@router.put("/me", response_model=ProfileResponse)
def upsert_my_profile(
    profile_in: ProfileUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user)
):
    return crud_user_profile.upsert_profile(db, user_id, profile_in)

@router.get("/me/bmi", response_model=BMIResponse)
def get_my_bmi(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user)
):
    profile = crud_user_profile.get_profile_by_user_id(db, user_id)
    bmi = calculate_bmi(profile.weight_kg, profile.height_cm) if profile else None
    if bmi is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Add your height and weight to see your BMI"
        )
    return {"bmi": bmi, "category": bmi_category(bmi)}
