import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from company_settings.core.exceptions import ConflictError, NotFoundError, ValidationError
from company_settings.forms.validator import FieldError
from company_settings.models.operation import Action, Operation
from company_settings.operations.action_forms import parse_action_config
from company_settings.operations.catalog import ACTION_TYPES, generate_default_operations, get_action_config_by_type


logger = logging.getLogger(__name__)


def get_company_operations(db: Session, *, company_id: int) -> list[Operation]:
    return list(
        db.scalars(
            select(Operation)
            .where(Operation.company_id == company_id)
            .options(selectinload(Operation.actions))
            .order_by(Operation.id)
        ).all()
    )


def initialize_company_operations(db: Session, *, company_id: int) -> list[Operation]:
    for seed in generate_default_operations():
        operation = Operation(
            company_id=company_id,
            type=seed['type'],
            name=seed['name'],
            description=seed['description'],
            enabled=seed['enabled'],
            config=seed['config'],
        )
        operation.actions = [
            Action(
                type=action['type'],
                name=action['name'],
                description=action['description'],
                enabled=action['enabled'],
                config=action['config'],
            )
            for action in seed['actions']
        ]
        db.add(operation)

    db.flush()
    logger.info('Seeded default operations for company %s', company_id)
    return get_company_operations(db, company_id=company_id)


def get_or_initialize_operations(db: Session, *, company_id: int) -> list[Operation]:
    operations = get_company_operations(db, company_id=company_id)
    if operations:
        return operations
    return initialize_company_operations(db, company_id=company_id)


def get_operation(db: Session, *, company_id: int, operation_id: int) -> Operation:
    operation = db.scalar(
        select(Operation)
        .where(Operation.id == operation_id, Operation.company_id == company_id)
        .options(selectinload(Operation.actions))
    )
    if not operation:
        raise NotFoundError('Operation', operation_id)
    return operation


def get_action(db: Session, *, company_id: int, action_id: int) -> Action:
    action = db.scalar(
        select(Action)
        .join(Operation, Action.operation_id == Operation.id)
        .where(Action.id == action_id, Operation.company_id == company_id)
    )
    if not action:
        raise NotFoundError('Action', action_id)
    return action


def check_action_config(operation_type: str, config: dict[str, Any]) -> None:
    """Reject configs whose keys have the wrong shape for the channel, e.g. a string where recipients expects a list."""
    try:
        parse_action_config(operation_type, config)
    except PydanticValidationError as exc:
        errors = [
            FieldError('.'.join(['config', *(str(part) for part in error['loc'][1:])]), error['msg'])
            for error in exc.errors()
        ]
        raise ValidationError(errors, 'Invalid action configuration') from exc


def toggle_operation(db: Session, *, company_id: int, operation_id: int, enabled: bool) -> Operation:
    operation = get_operation(db, company_id=company_id, operation_id=operation_id)
    operation.enabled = enabled
    db.flush()
    logger.info('Operation %s (%s) enabled=%s', operation.id, operation.type, enabled)
    return operation


def update_operation_config(
    db: Session,
    *,
    company_id: int,
    operation_id: int,
    config: dict[str, Any],
) -> Operation:
    operation = get_operation(db, company_id=company_id, operation_id=operation_id)
    operation.config = dict(config)
    db.flush()
    logger.info('Operation %s (%s) config replaced', operation.id, operation.type)
    return operation


def update_operation(
    db: Session,
    *,
    company_id: int,
    operation_id: int,
    name: str | None = None,
    description: str | None = None,
    enabled: bool | None = None,
) -> Operation:
    operation = get_operation(db, company_id=company_id, operation_id=operation_id)
    if name is not None:
        operation.name = name
    if description is not None:
        operation.description = description
    if enabled is not None:
        operation.enabled = enabled
    db.flush()
    logger.info('Operation %s (%s) details updated', operation.id, operation.type)
    return operation


def toggle_action(db: Session, *, company_id: int, action_id: int, enabled: bool) -> Action:
    action = get_action(db, company_id=company_id, action_id=action_id)
    action.enabled = enabled
    db.flush()
    logger.info('Action %s (%s) enabled=%s', action.id, action.type, enabled)
    return action


def update_action_config(db: Session, *, company_id: int, action_id: int, config: dict[str, Any]) -> Action:
    action = get_action(db, company_id=company_id, action_id=action_id)
    check_action_config(action.operation.type, config)
    action.config = dict(config)
    db.flush()
    logger.info('Action %s (%s) config replaced', action.id, action.type)
    return action


def add_action(
    db: Session,
    *,
    company_id: int,
    operation_id: int,
    action_type: str,
    enabled: bool = True,
    name: str | None = None,
    description: str | None = None,
    config: dict[str, Any] | None = None,
) -> Action:
    operation = get_operation(db, company_id=company_id, operation_id=operation_id)
    if action_type not in ACTION_TYPES:
        raise ValidationError([FieldError('type', f'Unknown action type: {action_type}')])
    if any(existing.type == action_type for existing in operation.actions):
        raise ConflictError(f'Operation {operation.id} already has a {action_type} action')
    if config is not None:
        check_action_config(operation.type, config)

    defaults = get_action_config_by_type(action_type)
    action = Action(
        type=action_type,
        name=name or defaults['name'],
        description=description if description is not None else defaults['description'],
        enabled=enabled,
        config=dict(config) if config is not None else defaults['config'],
    )
    operation.actions.append(action)
    db.flush()
    logger.info('Added %s action %s to operation %s', action_type, action.id, operation.id)
    return action


def remove_action(db: Session, *, company_id: int, action_id: int) -> None:
    action = get_action(db, company_id=company_id, action_id=action_id)
    operation = action.operation
    operation.actions.remove(action)
    db.flush()
    logger.info('Removed action %s (%s) from operation %s', action_id, action.type, operation.id)
