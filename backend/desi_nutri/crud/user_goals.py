from sqlalchemy.orm import Session
from desi_nutri.models.user_goals import UserGoals
from desi_nutri.schemas.user_goals import UserGoalsUpdate

def get_by_user_id(db: Session, user_id: str):
    return db.query(UserGoals).filter(UserGoals.user_id == user_id).first()

def upsert(db: Session, user_id: str, obj_in: UserGoalsUpdate):
    db_obj = get_by_user_id(db, user_id)
    if not db_obj:
        db_obj = UserGoals(user_id=user_id)

    update_data = obj_in.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        if value is not None:
            setattr(db_obj, field, value)

    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    return db_obj
