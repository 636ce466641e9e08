import pytest

from company_settings.operations.catalog import (
    ACTION_TYPES,
    CHANNEL_CONFIG_TEMPLATES,
    DEFAULT_ACTION_CONFIGS,
    DEFAULT_ACTION_MATRIX,
    DEFAULT_OPERATION_CONFIGS,
    OPERATION_TYPES,
    build_default_operation,
    create_action,
    default_actions_for,
    generate_default_operations,
    get_action_config_by_type,
)


def test_generates_one_operation_per_channel_in_catalog_order() -> None:
    operations = generate_default_operations()

    assert [operation['type'] for operation in operations] == list(OPERATION_TYPES)
    assert len(operations) == 8


def test_every_operation_ends_with_a_disabled_custom_event() -> None:
    for operation in generate_default_operations():
        last = operation['actions'][-1]
        assert last['type'] == 'custom.event'
        assert last['enabled'] is False


def test_seeded_enabled_flags() -> None:
    operations = {operation['type']: operation for operation in generate_default_operations()}

    assert operations['notification.email']['enabled'] is True
    assert operations['notification.sms']['enabled'] is False
    assert operations['log.activity']['enabled'] is True

    sms = {action['type']: action['enabled'] for action in operations['notification.sms']['actions']}
    assert sms == {
        'user.created': False,
        'user.updated': False,
        'user.deleted': False,
        'payment.received': True,
        'payment.refunded': True,
        'login.failed': False,
        'custom.event': False,
    }

    log = [action['type'] for action in operations['log.activity']['actions']]
    assert log == [
        'user.created',
        'user.updated',
        'user.deleted',
        'payment.received',
        'payment.refunded',
        'login.success',
        'login.failed',
        'custom.event',
    ]


def test_matrix_only_references_known_types() -> None:
    for operation_type, action_type in DEFAULT_ACTION_MATRIX:
        assert operation_type in OPERATION_TYPES
        assert action_type in ACTION_TYPES


def test_catalog_tables_cover_every_type() -> None:
    assert set(DEFAULT_OPERATION_CONFIGS) == set(OPERATION_TYPES)
    assert set(CHANNEL_CONFIG_TEMPLATES) == set(OPERATION_TYPES)
    assert set(DEFAULT_ACTION_CONFIGS) == set(ACTION_TYPES)
    assert all((operation_type, 'custom.event') in DEFAULT_ACTION_MATRIX for operation_type in OPERATION_TYPES)


def test_operation_carries_channel_config_template() -> None:
    webhook = build_default_operation('webhook.trigger')

    assert webhook['config']['method'] == 'POST'
    assert webhook['name'] == 'Webhook Triggers'


def test_catalog_lookups_return_copies() -> None:
    first = get_action_config_by_type('user.created')
    first['config']['template'] = 'changed'

    assert get_action_config_by_type('user.created')['config']['template'] == 'user-created'

    operation = build_default_operation('notification.email')
    operation['config']['recipients'].append('ops@acme.com')
    assert build_default_operation('notification.email')['config']['recipients'] == []


def test_create_action_sets_enabled() -> None:
    action = create_action('payment.received', enabled=False)

    assert action['enabled'] is False
    assert action['name'] == 'Payment Received'
    assert action['config']['sendReceipt'] is True


def test_unknown_types_raise_key_error() -> None:
    with pytest.raises(KeyError):
        get_action_config_by_type('user.exploded')
    with pytest.raises(KeyError):
        default_actions_for('notification.pigeon')
