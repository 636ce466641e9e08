from company_settings.operations.action_forms import (
    action_config_fields,
    parse_action_config,
    validate_action_config,
)
from company_settings.operations.catalog import (
    ACTION_TYPES,
    CHANNEL_CONFIG_TEMPLATES,
    DEFAULT_ACTION_CONFIGS,
    DEFAULT_ACTION_MATRIX,
    DEFAULT_OPERATION_CONFIGS,
    OPERATION_TYPES,
    create_action,
    default_actions_for,
    generate_default_operations,
    get_action_config_by_type,
)

__all__ = [
    'ACTION_TYPES',
    'CHANNEL_CONFIG_TEMPLATES',
    'DEFAULT_ACTION_CONFIGS',
    'DEFAULT_ACTION_MATRIX',
    'DEFAULT_OPERATION_CONFIGS',
    'OPERATION_TYPES',
    'action_config_fields',
    'create_action',
    'default_actions_for',
    'generate_default_operations',
    'get_action_config_by_type',
    'parse_action_config',
    'validate_action_config',
]
