from company_settings.schemas.common import CamelSchema, ErrorResponse, FieldErrorOut
from company_settings.schemas.operation import (
    ActionCreate,
    ActionFormOut,
    ActionOut,
    ActionUpdate,
    OperationOut,
    OperationUpdate,
)
from company_settings.schemas.settings import SchemaValidationResult
from company_settings.schemas.user_settings import UserSettingsOut, UserSettingsUpdate

__all__ = [
    'ActionCreate',
    'ActionFormOut',
    'ActionOut',
    'ActionUpdate',
    'CamelSchema',
    'ErrorResponse',
    'FieldErrorOut',
    'OperationOut',
    'OperationUpdate',
    'SchemaValidationResult',
    'UserSettingsOut',
    'UserSettingsUpdate',
]
