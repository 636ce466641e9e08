import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from company_settings.core.exceptions import ConflictError, NotFoundError, ValidationError
from company_settings.models.company import Company
from company_settings.models.operation import Action, Operation
from company_settings.services import operation_service


def _by_type(operations: list[Operation]) -> dict[str, Operation]:
    return {operation.type: operation for operation in operations}


def test_get_or_initialize_seeds_once(db_session: Session, company: Company) -> None:
    first = operation_service.get_or_initialize_operations(db_session, company_id=company.id)
    db_session.commit()
    second = operation_service.get_or_initialize_operations(db_session, company_id=company.id)

    assert len(first) == 8
    assert [operation.id for operation in first] == [operation.id for operation in second]
    assert db_session.scalar(select(func.count()).select_from(Operation)) == 8

    email = _by_type(second)['notification.email']
    assert email.enabled is True
    assert email.actions[-1].type == 'custom.event'
    assert email.actions[-1].enabled is False


def test_operations_are_scoped_to_the_company(
    db_session: Session, company: Company, other_company: Company
) -> None:
    operation_service.initialize_company_operations(db_session, company_id=company.id)
    db_session.commit()

    assert operation_service.get_company_operations(db_session, company_id=other_company.id) == []

    operation = operation_service.get_company_operations(db_session, company_id=company.id)[0]
    with pytest.raises(NotFoundError):
        operation_service.get_operation(db_session, company_id=other_company.id, operation_id=operation.id)
    with pytest.raises(NotFoundError):
        operation_service.get_action(
            db_session, company_id=other_company.id, action_id=operation.actions[0].id
        )


def test_toggle_operation_leaves_actions_alone(db_session: Session, company: Company) -> None:
    operations = operation_service.initialize_company_operations(db_session, company_id=company.id)
    email = _by_type(operations)['notification.email']
    before = [(action.type, action.enabled) for action in email.actions]

    operation_service.toggle_operation(db_session, company_id=company.id, operation_id=email.id, enabled=False)
    db_session.commit()
    db_session.expire_all()

    reloaded = operation_service.get_operation(db_session, company_id=company.id, operation_id=email.id)
    assert reloaded.enabled is False
    assert [(action.type, action.enabled) for action in reloaded.actions] == before


def test_config_updates_replace_the_whole_map(db_session: Session, company: Company) -> None:
    operations = operation_service.initialize_company_operations(db_session, company_id=company.id)
    webhook = _by_type(operations)['webhook.trigger']
    action = webhook.actions[0]

    operation_service.update_operation_config(
        db_session, company_id=company.id, operation_id=webhook.id, config={'url': 'https://hooks.acme.com'}
    )
    operation_service.update_action_config(
        db_session, company_id=company.id, action_id=action.id, config={'headers': {'X-Token': 'abc'}}
    )
    db_session.commit()
    db_session.expire_all()

    assert operation_service.get_operation(
        db_session, company_id=company.id, operation_id=webhook.id
    ).config == {'url': 'https://hooks.acme.com'}
    assert operation_service.get_action(
        db_session, company_id=company.id, action_id=action.id
    ).config == {'headers': {'X-Token': 'abc'}}


def test_update_operation_details(db_session: Session, company: Company) -> None:
    operation = operation_service.initialize_company_operations(db_session, company_id=company.id)[0]

    updated = operation_service.update_operation(
        db_session, company_id=company.id, operation_id=operation.id, name='Mail', description=''
    )

    assert updated.name == 'Mail'
    assert updated.description == ''
    assert updated.enabled is True


def test_add_action_uses_catalog_defaults(db_session: Session, company: Company) -> None:
    slack = _by_type(operation_service.initialize_company_operations(db_session, company_id=company.id))[
        'notification.slack'
    ]

    action = operation_service.add_action(
        db_session, company_id=company.id, operation_id=slack.id, action_type='payment.received'
    )
    db_session.commit()

    assert action.id is not None
    assert action.name == 'Payment Received'
    assert action.enabled is True
    assert action.config['template'] == 'payment-received'
    assert slack.actions[-1].id == action.id


def test_add_duplicate_action_conflicts(db_session: Session, company: Company) -> None:
    operation = operation_service.initialize_company_operations(db_session, company_id=company.id)[0]

    with pytest.raises(ConflictError):
        operation_service.add_action(
            db_session, company_id=company.id, operation_id=operation.id, action_type='custom.event'
        )


def test_add_unknown_action_type_is_invalid(db_session: Session, company: Company) -> None:
    operation = operation_service.initialize_company_operations(db_session, company_id=company.id)[0]

    with pytest.raises(ValidationError) as exc_info:
        operation_service.add_action(
            db_session, company_id=company.id, operation_id=operation.id, action_type='user.exploded'
        )

    assert exc_info.value.errors[0].field_id == 'type'


def test_action_configs_must_fit_the_channel_shape(db_session: Session, company: Company) -> None:
    sms = _by_type(operation_service.initialize_company_operations(db_session, company_id=company.id))[
        'notification.sms'
    ]
    action = sms.actions[0]
    original = dict(action.config)

    with pytest.raises(ValidationError) as update_info:
        operation_service.update_action_config(
            db_session, company_id=company.id, action_id=action.id, config={'recipients': '+1234567890'}
        )
    with pytest.raises(ValidationError) as add_info:
        operation_service.add_action(
            db_session,
            company_id=company.id,
            operation_id=sms.id,
            action_type='document.shared',
            config={'message': ['not', 'text']},
        )

    assert update_info.value.message == 'Invalid action configuration'
    assert [error.field_id for error in update_info.value.errors] == ['config.recipients']
    assert [error.field_id for error in add_info.value.errors] == ['config.message']
    assert action.config == original


def test_remove_action(db_session: Session, company: Company) -> None:
    operation = operation_service.initialize_company_operations(db_session, company_id=company.id)[0]
    action_id = operation.actions[0].id
    remaining = len(operation.actions) - 1

    operation_service.remove_action(db_session, company_id=company.id, action_id=action_id)
    db_session.commit()

    assert db_session.get(Action, action_id) is None
    assert len(operation.actions) == remaining
    with pytest.raises(NotFoundError):
        operation_service.remove_action(db_session, company_id=company.id, action_id=action_id)
