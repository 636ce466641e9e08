"""Static catalog of operation (channel) and action (event) types.

The catalog is only used to seed a company's operations the first time they
are requested and to fill in defaults when an action is added later.
"""

from __future__ import annotations

import copy
from typing import Any, Literal, get_args


OperationType = Literal[
    'notification.email',
    'notification.whatsapp',
    'notification.sms',
    'notification.slack',
    'webhook.trigger',
    'log.activity',
    'analytics.track',
    'automation.workflow',
]

ActionType = Literal[
    'user.created',
    'user.updated',
    'user.deleted',
    'payment.received',
    'payment.refunded',
    'document.created',
    'document.shared',
    'login.success',
    'login.failed',
    'data.export',
    'data.import',
    'custom.event',
    'application.created',
    'application.submitted',
    'commission.bill.created',
]

OPERATION_TYPES: tuple[str, ...] = get_args(OperationType)
ACTION_TYPES: tuple[str, ...] = get_args(ActionType)


DEFAULT_OPERATION_CONFIGS: dict[str, dict[str, Any]] = {
    'notification.email': {
        'type': 'notification.email',
        'name': 'Email Notifications',
        'description': 'Send notifications via email',
        'enabled': True,
    },
    'notification.whatsapp': {
        'type': 'notification.whatsapp',
        'name': 'WhatsApp Notifications',
        'description': 'Send notifications via WhatsApp',
        'enabled': False,
    },
    'notification.sms': {
        'type': 'notification.sms',
        'name': 'SMS Notifications',
        'description': 'Send notifications via SMS',
        'enabled': False,
    },
    'notification.slack': {
        'type': 'notification.slack',
        'name': 'Slack Notifications',
        'description': 'Send notifications to Slack channels',
        'enabled': False,
    },
    'webhook.trigger': {
        'type': 'webhook.trigger',
        'name': 'Webhook Triggers',
        'description': 'Send data to external webhooks',
        'enabled': False,
    },
    'log.activity': {
        'type': 'log.activity',
        'name': 'Activity Logging',
        'description': 'Log activities in the system',
        'enabled': True,
    },
    'analytics.track': {
        'type': 'analytics.track',
        'name': 'Analytics Tracking',
        'description': 'Track events for analytics',
        'enabled': True,
    },
    'automation.workflow': {
        'type': 'automation.workflow',
        'name': 'Workflow Automation',
        'description': 'Trigger automated workflows',
        'enabled': False,
    },
}


def _action(action_type: str, name: str, description: str, **config: Any) -> dict[str, Any]:
    return {'type': action_type, 'name': name, 'description': description, 'config': config}


DEFAULT_ACTION_CONFIGS: dict[str, dict[str, Any]] = {
    'user.created': _action(
        'user.created',
        'User Created',
        'When a new user is created in the system',
        includeUserDetails=True,
        notifyAdmin=True,
        welcomeNewUser=True,
        template='user-created',
        subject='New User Created',
    ),
    'user.updated': _action(
        'user.updated',
        'User Updated',
        'When a user profile is updated',
        includeUserDetails=True,
        notifyAdmin=True,
        highlightChanges=True,
        template='user-updated',
        subject='User Profile Updated',
    ),
    'user.deleted': _action(
        'user.deleted',
        'User Deleted',
        'When a user is deleted from the system',
        includeUserDetails=True,
        notifyAdmin=True,
        requestFeedback=True,
        template='user-deleted',
        subject='User Account Deleted',
    ),
    'payment.received': _action(
        'payment.received',
        'Payment Received',
        'When a payment is successfully processed',
        includePaymentDetails=True,
        sendReceipt=True,
        template='payment-received',
        subject='Payment Received',
    ),
    'payment.refunded': _action(
        'payment.refunded',
        'Payment Refunded',
        'When a payment is refunded',
        includeRefundDetails=True,
        sendRefundConfirmation=True,
        template='payment-refunded',
        subject='Payment Refunded',
    ),
    'document.created': _action(
        'document.created',
        'Document Created',
        'When a new document is created',
        includeDocumentDetails=True,
        template='document-created',
        subject='New Document Created',
    ),
    'document.shared': _action(
        'document.shared',
        'Document Shared',
        'When a document is shared with others',
        includeDocumentDetails=True,
        includeShareDetails=True,
        template='document-shared',
        subject='Document Shared With You',
    ),
    'login.success': _action(
        'login.success',
        'Successful Login',
        'When a user successfully logs in',
        includeDeviceInfo=True,
        includeLocationInfo=True,
        template='login-success',
        subject='New Login to Your Account',
    ),
    'login.failed': _action(
        'login.failed',
        'Failed Login Attempt',
        'When a login attempt fails',
        includeAttemptDetails=True,
        includeLocationInfo=True,
        template='login-failed',
        subject='Failed Login Attempt',
    ),
    'data.export': _action(
        'data.export',
        'Data Exported',
        'When data is exported from the system',
        includeExportDetails=True,
        template='data-export',
        subject='Data Export Complete',
    ),
    'data.import': _action(
        'data.import',
        'Data Imported',
        'When data is imported into the system',
        includeImportDetails=True,
        template='data-import',
        subject='Data Import Complete',
    ),
    'custom.event': _action(
        'custom.event',
        'Custom Event',
        'A custom event defined by the user',
        customMessage='',
        template='custom',
        subject='Custom Notification',
    ),
    'application.created': _action(
        'application.created',
        'Application Created',
        'When a new application is created in the system',
        includeApplicationDetails=True,
        notifyAdmin=True,
        notifyApplicant=True,
        template='application-created',
        subject='New Application Created',
    ),
    'application.submitted': _action(
        'application.submitted',
        'Application Submitted',
        'When an application is submitted for review',
        includeApplicationDetails=True,
        notifyAdmin=True,
        notifyApplicant=True,
        sendConfirmation=True,
        template='application-submitted',
        subject='Application Submitted Successfully',
    ),
    'commission.bill.created': _action(
        'commission.bill.created',
        'Commission Bill Created',
        'When a new commission bill is generated',
        includeBillDetails=True,
        includeCommissionBreakdown=True,
        notifyAgent=True,
        notifyFinance=True,
        template='commission-bill-created',
        subject='New Commission Bill Generated',
    ),
}

CHANNEL_CONFIG_TEMPLATES: dict[str, dict[str, Any]] = {
    'notification.email': {
        'recipients': [],
        'ccRecipients': [],
        'bccRecipients': [],
        'fromName': 'System Notifications',
        'replyTo': '',
        'attachments': False,
    },
    'notification.whatsapp': {
        'phoneNumbers': [],
        'includeMedia': False,
        'priority': 'normal',
    },
    'notification.sms': {
        'phoneNumbers': [],
        'senderId': 'System',
        'priority': 'normal',
    },
    'notification.slack': {
        'channel': 'general',
        'mentionUsers': [],
        'useThreads': True,
        'includeAttachments': True,
    },
    'webhook.trigger': {
        'url': '',
        'method': 'POST',
        'headers': {},
        'includeFullPayload': True,
        'retryOnFailure': True,
    },
    'log.activity': {
        'level': 'info',
        'includeDetails': True,
        'retention': '90days',
        'alertOnError': False,
    },
    'analytics.track': {
        'eventPrefix': '',
        'includeUserData': True,
        'anonymizeIp': False,
        'customDimensions': {},
    },
    'automation.workflow': {
        'workflowId': '',
        'inputData': {},
        'runAsynchronously': True,
        'priority': 'normal',
    },
}

_USER_EVENTS = ('user.created', 'user.updated', 'user.deleted')

# (operation type, action type) -> enabled when seeded. Insertion order is the seeded order.
DEFAULT_ACTION_MATRIX: dict[tuple[str, str], bool] = {
    **{('notification.email', action): True for action in _USER_EVENTS},
    ('notification.email', 'payment.received'): True,
    ('notification.email', 'payment.refunded'): True,
    ('notification.email', 'login.failed'): True,
    ('notification.email', 'document.shared'): True,
    ('notification.email', 'custom.event'): False,
    **{('notification.whatsapp', action): False for action in _USER_EVENTS},
    ('notification.whatsapp', 'login.failed'): False,
    ('notification.whatsapp', 'document.shared'): False,
    ('notification.whatsapp', 'custom.event'): False,
    **{('notification.sms', action): False for action in _USER_EVENTS},
    ('notification.sms', 'payment.received'): True,
    ('notification.sms', 'payment.refunded'): True,
    ('notification.sms', 'login.failed'): False,
    ('notification.sms', 'custom.event'): False,
    **{('notification.slack', action): False for action in _USER_EVENTS},
    ('notification.slack', 'login.failed'): False,
    ('notification.slack', 'custom.event'): False,
    **{('webhook.trigger', action): False for action in _USER_EVENTS},
    ('webhook.trigger', 'custom.event'): False,
    **{('log.activity', action): True for action in _USER_EVENTS},
    ('log.activity', 'payment.received'): True,
    ('log.activity', 'payment.refunded'): True,
    ('log.activity', 'login.success'): True,
    ('log.activity', 'login.failed'): True,
    ('log.activity', 'custom.event'): False,
    **{('analytics.track', action): False for action in _USER_EVENTS},
    ('analytics.track', 'custom.event'): False,
    **{('automation.workflow', action): False for action in _USER_EVENTS},
    ('automation.workflow', 'custom.event'): False,
}


def _check_operation_type(operation_type: str) -> None:
    if operation_type not in DEFAULT_OPERATION_CONFIGS:
        raise KeyError(f'Unknown operation type: {operation_type}')


def get_action_config_by_type(action_type: str) -> dict[str, Any]:
    try:
        return copy.deepcopy(DEFAULT_ACTION_CONFIGS[action_type])
    except KeyError:
        raise KeyError(f'Unknown action type: {action_type}') from None


def create_action(action_type: str, enabled: bool = True) -> dict[str, Any]:
    action = get_action_config_by_type(action_type)
    action['enabled'] = enabled
    return action


def default_actions_for(operation_type: str) -> list[dict[str, Any]]:
    _check_operation_type(operation_type)
    return [
        create_action(action_type, enabled)
        for (op_type, action_type), enabled in DEFAULT_ACTION_MATRIX.items()
        if op_type == operation_type
    ]


def build_default_operation(operation_type: str) -> dict[str, Any]:
    _check_operation_type(operation_type)
    operation = copy.deepcopy(DEFAULT_OPERATION_CONFIGS[operation_type])
    operation['config'] = copy.deepcopy(CHANNEL_CONFIG_TEMPLATES[operation_type])
    operation['actions'] = default_actions_for(operation_type)
    return operation


def generate_default_operations() -> list[dict[str, Any]]:
    return [build_default_operation(operation_type) for operation_type in OPERATION_TYPES]

