from typing import Any

from pydantic import Field

from company_settings.operations.catalog import ActionType
from company_settings.schemas.common import CamelSchema, FieldErrorOut, TimestampedSchema


OPERATION_UPDATE_TYPES = ('toggle', 'config', 'details')
ACTION_UPDATE_TYPES = ('toggle', 'config')


class ActionOut(TimestampedSchema):
    operation_id: int
    type: str
    name: str
    description: str
    enabled: bool
    config: dict[str, Any]


class OperationOut(TimestampedSchema):
    company_id: int
    type: str
    name: str
    description: str
    enabled: bool
    config: dict[str, Any]
    actions: list[ActionOut] = Field(default_factory=list)


class OperationUpdate(CamelSchema):
    # updateType stays a plain string so unknown kinds can be reported as a 400.
    update_type: str
    enabled: bool | None = None
    config: dict[str, Any] | None = None
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None


class ActionUpdate(CamelSchema):
    update_type: str
    enabled: bool | None = None
    config: dict[str, Any] | None = None


class ActionCreate(CamelSchema):
    type: ActionType
    enabled: bool = True
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    config: dict[str, Any] | None = None


class ActionFormOut(CamelSchema):
    operation_type: str
    fields: list[dict[str, Any]]
    defaults: dict[str, Any]



class ActionConfigFormOut(CamelSchema):
    action_id: int
    operation_type: str
    fields: list[dict[str, Any]]
    values: dict[str, Any]
    valid: bool
    errors: list[FieldErrorOut] = Field(default_factory=list)
