from typing import Any

from pydantic import Field

from company_settings.schemas.common import CamelSchema, TimestampedSchema


class UserSettingsOut(TimestampedSchema):
    user_id: int
    preferences: dict[str, Any]


class UserSettingsUpdate(CamelSchema):
    preferences: dict[str, Any] = Field(default_factory=dict)
