# desi_nutri/crud/user_profile.py
from sqlalchemy.orm import Session
from desi_nutri.models.user_profile import Profile
from desi_nutri.schemas.user_profile import ProfileUpdate

def get_profile_by_user_id(db: Session, user_id: str):
    """Get profile by user ID"""
    return db.query(Profile).filter(Profile.user_id == user_id).first()

def upsert_profile(db: Session, user_id: str, profile_in: ProfileUpdate):
    """
    Create the profile on first save, otherwise update the fields that were sent.
    """
    db_profile = get_profile_by_user_id(db, user_id)
    if not db_profile:
        db_profile = Profile(user_id=user_id)

    update_data = profile_in.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        if value is not None:
            setattr(db_profile, field, value)

    db.add(db_profile)
    db.commit()
    db.refresh(db_profile)
    return db_profile
