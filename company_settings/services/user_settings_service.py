import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from company_settings.core.exceptions import NotFoundError
from company_settings.models.user_settings import UserSettings


logger = logging.getLogger(__name__)


def get_user_settings(db: Session, *, user_id: int) -> UserSettings:
    record = db.scalar(select(UserSettings).where(UserSettings.user_id == user_id))
    if not record:
        raise NotFoundError('User settings', user_id)
    return record


def upsert_user_settings(db: Session, *, user_id: int, preferences: dict[str, Any]) -> UserSettings:
    record = db.scalar(select(UserSettings).where(UserSettings.user_id == user_id))
    if record:
        record.preferences = dict(preferences)
        action = 'Updated'
    else:
        record = UserSettings(user_id=user_id, preferences=dict(preferences))
        db.add(record)
        action = 'Created'
    db.flush()
    logger.info('%s settings for user %s', action, user_id)
    return record
