from typing import Any

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from company_settings.db.base_class import Base
from company_settings.models.mixins import IntegerPrimaryKeyMixin, JSONDocument, TimestampMixin


class UserSettings(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'user_settings'

    # Users live outside this service; the id is an opaque reference.
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, unique=True, index=True)
    preferences: Mapped[dict[str, Any]] = mapped_column(JSONDocument, nullable=False, default=dict)
