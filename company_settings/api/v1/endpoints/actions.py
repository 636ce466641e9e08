from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from company_settings.api.deps import CompanyContext, get_company_context
from company_settings.core.exceptions import SettingsAppError, ValidationError
from company_settings.db.session import get_db
from company_settings.forms.validator import FieldError
from company_settings.operations.action_forms import action_config_fields, action_form_values, validate_action_config
from company_settings.schemas.common import FieldErrorOut
from company_settings.schemas.operation import ActionConfigFormOut, ActionOut, ActionUpdate
from company_settings.services import operation_service

router = APIRouter(prefix='/actions', tags=['actions'])


@router.get('/{action_id}/form', response_model=ActionConfigFormOut)
def get_action_config_form(
    action_id: int,
    db: Session = Depends(get_db),
    ctx: CompanyContext = Depends(get_company_context),
) -> ActionConfigFormOut:
    action = operation_service.get_action(db, company_id=ctx.company_id, action_id=action_id)
    operation_type = action.operation.type
    errors = validate_action_config(operation_type, action.config)
    return ActionConfigFormOut(
        action_id=action.id,
        operation_type=operation_type,
        fields=[field.to_wire() for field in action_config_fields(operation_type)],
        values=action_form_values(operation_type, action.config),
        valid=not errors,
        errors=[FieldErrorOut(field_id=error.field_id, message=error.message) for error in errors],
    )


@router.patch('/{action_id}', response_model=ActionOut)
def update_action(
    action_id: int,
    payload: ActionUpdate,
    db: Session = Depends(get_db),
    ctx: CompanyContext = Depends(get_company_context),
) -> ActionOut:
    if payload.update_type == 'toggle':
        if payload.enabled is None:
            raise ValidationError([FieldError('enabled', 'enabled is required for a toggle update')])
        action = operation_service.toggle_action(
            db, company_id=ctx.company_id, action_id=action_id, enabled=payload.enabled
        )
    elif payload.update_type == 'config':
        if payload.config is None:
            raise ValidationError([FieldError('config', 'config is required for a config update')])
        action = operation_service.update_action_config(
            db, company_id=ctx.company_id, action_id=action_id, config=payload.config
        )
    else:
        raise SettingsAppError('Invalid update type')

    db.commit()
    return ActionOut.model_validate(action)


@router.delete('/{action_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_action(
    action_id: int,
    db: Session = Depends(get_db),
    ctx: CompanyContext = Depends(get_company_context),
) -> Response:
    operation_service.remove_action(db, company_id=ctx.company_id, action_id=action_id)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
