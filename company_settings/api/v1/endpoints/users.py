from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from company_settings.db.session import get_db
from company_settings.schemas.user_settings import UserSettingsOut, UserSettingsUpdate
from company_settings.services import user_settings_service

router = APIRouter(prefix='/users', tags=['users'])


@router.get('/{user_id}/settings', response_model=UserSettingsOut)
def read_user_settings(user_id: int, db: Session = Depends(get_db)) -> UserSettingsOut:
    record = user_settings_service.get_user_settings(db, user_id=user_id)
    return UserSettingsOut.model_validate(record)


@router.patch('/{user_id}/settings', response_model=UserSettingsOut)
def update_user_settings(
    user_id: int,
    payload: UserSettingsUpdate,
    db: Session = Depends(get_db),
) -> UserSettingsOut:
    record = user_settings_service.upsert_user_settings(db, user_id=user_id, preferences=payload.preferences)
    db.commit()
    return UserSettingsOut.model_validate(record)
