from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class CamelSchema(BaseSchema):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)


class TimestampedSchema(CamelSchema):
    id: int
    created_at: datetime
    updated_at: datetime


class FieldErrorOut(CamelSchema):
    field_id: str
    message: str


class ErrorResponse(BaseModel):
    error: str
    fields: list[FieldErrorOut] | None = None
