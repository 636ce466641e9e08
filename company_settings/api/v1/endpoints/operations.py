from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from company_settings.api.deps import CompanyContext, get_company_context
from company_settings.core.exceptions import SettingsAppError, ValidationError
from company_settings.db.session import get_db
from company_settings.forms.validator import FieldError
from company_settings.operations.action_forms import action_config_fields, action_form_values
from company_settings.schemas.operation import ActionCreate, ActionFormOut, ActionOut, OperationOut, OperationUpdate
from company_settings.services import operation_service

router = APIRouter(prefix='/operations', tags=['operations'])


def _require(value, field_id: str, update_type: str):
    if value is None:
        raise ValidationError([FieldError(field_id, f'{field_id} is required for a {update_type} update')])
    return value


@router.get('', response_model=list[OperationOut])
def list_operations(
    db: Session = Depends(get_db),
    ctx: CompanyContext = Depends(get_company_context),
) -> list[OperationOut]:
    operations = operation_service.get_or_initialize_operations(db, company_id=ctx.company_id)
    db.commit()
    return [OperationOut.model_validate(operation) for operation in operations]


@router.get('/{operation_id}', response_model=OperationOut)
def get_operation(
    operation_id: int,
    db: Session = Depends(get_db),
    ctx: CompanyContext = Depends(get_company_context),
) -> OperationOut:
    operation = operation_service.get_operation(db, company_id=ctx.company_id, operation_id=operation_id)
    return OperationOut.model_validate(operation)


@router.patch('/{operation_id}', response_model=OperationOut)
def update_operation(
    operation_id: int,
    payload: OperationUpdate,
    db: Session = Depends(get_db),
    ctx: CompanyContext = Depends(get_company_context),
) -> OperationOut:
    if payload.update_type == 'toggle':
        operation = operation_service.toggle_operation(
            db,
            company_id=ctx.company_id,
            operation_id=operation_id,
            enabled=_require(payload.enabled, 'enabled', 'toggle'),
        )
    elif payload.update_type == 'config':
        operation = operation_service.update_operation_config(
            db,
            company_id=ctx.company_id,
            operation_id=operation_id,
            config=_require(payload.config, 'config', 'config'),
        )
    elif payload.update_type == 'details':
        operation = operation_service.update_operation(
            db,
            company_id=ctx.company_id,
            operation_id=operation_id,
            name=payload.name,
            description=payload.description,
            enabled=payload.enabled,
        )
    else:
        raise SettingsAppError('Invalid update type')

    db.commit()
    return OperationOut.model_validate(operation)


@router.post('/{operation_id}/actions', response_model=ActionOut, status_code=status.HTTP_201_CREATED)
def add_action(
    operation_id: int,
    payload: ActionCreate,
    db: Session = Depends(get_db),
    ctx: CompanyContext = Depends(get_company_context),
) -> ActionOut:
    action = operation_service.add_action(
        db,
        company_id=ctx.company_id,
        operation_id=operation_id,
        action_type=payload.type,
        enabled=payload.enabled,
        name=payload.name,
        description=payload.description,
        config=payload.config,
    )
    db.commit()
    return ActionOut.model_validate(action)


@router.get('/{operation_id}/action-form', response_model=ActionFormOut)
def get_action_form(
    operation_id: int,
    db: Session = Depends(get_db),
    ctx: CompanyContext = Depends(get_company_context),
) -> ActionFormOut:
    operation = operation_service.get_operation(db, company_id=ctx.company_id, operation_id=operation_id)
    return ActionFormOut(
        operation_type=operation.type,
        fields=[field.to_wire() for field in action_config_fields(operation.type)],
        defaults=action_form_values(operation.type, None),
    )
