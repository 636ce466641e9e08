"""Per-channel action configuration: config shape plus the fields used to edit it.

Every operation type maps to exactly one variant, so a channel never falls
through to "no configuration available".
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import ConfigDict, Field, TypeAdapter

from company_settings.forms.fields import FieldDescriptor, SchemaModel
from company_settings.forms.paths import extract_field_values
from company_settings.forms.validator import CompiledSchema, FieldError, compile_fields
from company_settings.operations.catalog import DEFAULT_ACTION_CONFIGS


BASE_TEMPLATE_OPTIONS = [
    {'label': 'Default Template', 'value': 'default'},
    {'label': 'Minimal', 'value': 'minimal'},
    {'label': 'Detailed', 'value': 'detailed'},
    {'label': 'Branded', 'value': 'branded'},
]

# Seeded actions name a per-event template; those must stay selectable.
TEMPLATE_OPTIONS = BASE_TEMPLATE_OPTIONS + [
    {'label': action['name'], 'value': action['config']['template']} for action in DEFAULT_ACTION_CONFIGS.values()
]


def _fields(*descriptors: dict[str, Any]) -> tuple[FieldDescriptor, ...]:
    return tuple(FieldDescriptor.model_validate(descriptor) for descriptor in descriptors)


def _include_details(label: str = 'Include event details') -> dict[str, Any]:
    return {'id': 'includeDetails', 'type': 'switch', 'label': label, 'defaultValue': False}


class ActionConfigModel(SchemaModel):
    # Seeded configs carry event-specific keys (template, notifyAdmin, ...) that the form does not edit.
    model_config = ConfigDict(extra='allow')

    form_fields: ClassVar[tuple[FieldDescriptor, ...]] = ()


class EmailActionConfig(ActionConfigModel):
    operation_type: Literal['notification.email'] = 'notification.email'
    template: str = 'default'
    subject: str = ''
    recipients: list[str] = Field(default_factory=list)
    include_details: bool = False

    form_fields = _fields(
        {'id': 'template', 'type': 'select', 'label': 'Email Template', 'options': TEMPLATE_OPTIONS, 'defaultValue': 'default'},
        {'id': 'subject', 'type': 'text', 'label': 'Subject', 'placeholder': 'Email subject', 'defaultValue': ''},
        {
            'id': 'recipients',
            'type': 'multiselect',
            'label': 'Additional Recipients',
            'placeholder': 'email@example.com, another@example.com',
        },
        _include_details(),
    )


class WhatsAppActionConfig(ActionConfigModel):
    operation_type: Literal['notification.whatsapp'] = 'notification.whatsapp'
    template: str = 'default'
    recipients: list[str] = Field(default_factory=list)
    include_details: bool = False

    form_fields = _fields(
        {'id': 'template', 'type': 'select', 'label': 'Message Template', 'options': TEMPLATE_OPTIONS, 'defaultValue': 'default'},
        {'id': 'recipients', 'type': 'multiselect', 'label': 'Recipients', 'placeholder': '+1234567890, +0987654321'},
        _include_details(),
    )


class SmsActionConfig(ActionConfigModel):
    operation_type: Literal['notification.sms'] = 'notification.sms'
    message: str = ''
    recipients: list[str] = Field(default_factory=list)

    form_fields = _fields(
        {
            'id': 'message',
            'type': 'textarea',
            'label': 'Message',
            'placeholder': 'Text message to send',
            'defaultValue': '',
            'validation': {'maxLength': 160},
        },
        {'id': 'recipients', 'type': 'multiselect', 'label': 'Recipients', 'placeholder': '+1234567890, +0987654321'},
    )


class SlackActionConfig(ActionConfigModel):
    operation_type: Literal['notification.slack'] = 'notification.slack'
    channel: str = ''
    message: str = ''
    mention_users: list[str] = Field(default_factory=list)
    include_details: bool = False

    form_fields = _fields(
        {'id': 'channel', 'type': 'text', 'label': 'Slack Channel', 'placeholder': '#general', 'defaultValue': ''},
        {'id': 'message', 'type': 'textarea', 'label': 'Message', 'placeholder': 'Message to send to Slack', 'defaultValue': ''},
        {'id': 'mentionUsers', 'type': 'multiselect', 'label': 'Mention Users', 'placeholder': '@user1, @user2'},
        _include_details(),
    )


class WebhookActionConfig(ActionConfigModel):
    operation_type: Literal['webhook.trigger'] = 'webhook.trigger'
    url: str = ''
    method: str = 'POST'
    include_full_payload: bool = True

    form_fields = _fields(
        {
            'id': 'url',
            'type': 'text',
            'label': 'Webhook URL',
            'placeholder': 'https://example.com/webhook',
            'defaultValue': '',
            'validation': {'pattern': r'^https?://'},
        },
        {
            'id': 'method',
            'type': 'select',
            'label': 'HTTP Method',
            'options': [{'label': method, 'value': method} for method in ('GET', 'POST', 'PUT', 'PATCH', 'DELETE')],
            'defaultValue': 'POST',
        },
        {'id': 'includeFullPayload', 'type': 'switch', 'label': 'Include full payload', 'defaultValue': True},
    )


class LogActionConfig(ActionConfigModel):
    operation_type: Literal['log.activity'] = 'log.activity'
    level: str = 'info'
    retention: str = '90days'
    include_details: bool = True

    form_fields = _fields(
        {
            'id': 'level',
            'type': 'select',
            'label': 'Log Level',
            'options': [
                {'label': 'Debug', 'value': 'debug'},
                {'label': 'Info', 'value': 'info'},
                {'label': 'Warning', 'value': 'warning'},
                {'label': 'Error', 'value': 'error'},
            ],
            'defaultValue': 'info',
        },
        {
            'id': 'retention',
            'type': 'select',
            'label': 'Retention Period',
            'options': [
                {'label': '30 Days', 'value': '30days'},
                {'label': '90 Days', 'value': '90days'},
                {'label': '1 Year', 'value': '1year'},
                {'label': 'Forever', 'value': 'forever'},
            ],
            'defaultValue': '90days',
        },
        {**_include_details(), 'defaultValue': True},
    )


class AnalyticsActionConfig(ActionConfigModel):
    operation_type: Literal['analytics.track'] = 'analytics.track'
    event_name: str = ''
    include_user_data: bool = True

    form_fields = _fields(
        {'id': 'eventName', 'type': 'text', 'label': 'Event Name', 'placeholder': 'event_name', 'defaultValue': ''},
        {'id': 'includeUserData', 'type': 'switch', 'label': 'Include user data', 'defaultValue': True},
    )


class WorkflowActionConfig(ActionConfigModel):
    operation_type: Literal['automation.workflow'] = 'automation.workflow'
    workflow_id: str = ''
    run_asynchronously: bool = True

    form_fields = _fields(
        {'id': 'workflowId', 'type': 'text', 'label': 'Workflow ID', 'placeholder': 'workflow_123', 'defaultValue': ''},
        {'id': 'runAsynchronously', 'type': 'switch', 'label': 'Run asynchronously', 'defaultValue': True},
    )


ActionConfigVariant = Annotated[
    Union[
        EmailActionConfig,
        WhatsAppActionConfig,
        SmsActionConfig,
        SlackActionConfig,
        WebhookActionConfig,
        LogActionConfig,
        AnalyticsActionConfig,
        WorkflowActionConfig,
    ],
    Field(discriminator='operation_type'),
]

_VARIANT_ADAPTER: TypeAdapter[ActionConfigVariant] = TypeAdapter(ActionConfigVariant)

ACTION_CONFIG_MODELS: dict[str, type[ActionConfigModel]] = {
    model.model_fields['operation_type'].default: model
    for model in (
        EmailActionConfig,
        WhatsAppActionConfig,
        SmsActionConfig,
        SlackActionConfig,
        WebhookActionConfig,
        LogActionConfig,
        AnalyticsActionConfig,
        WorkflowActionConfig,
    )
}


def action_config_model(operation_type: str) -> type[ActionConfigModel]:
    try:
        return ACTION_CONFIG_MODELS[operation_type]
    except KeyError:
        raise KeyError(f'Unknown operation type: {operation_type}') from None


def action_config_fields(operation_type: str) -> list[FieldDescriptor]:
    return list(action_config_model(operation_type).form_fields)


@lru_cache
def _compiled(operation_type: str) -> CompiledSchema:
    return compile_fields(action_config_model(operation_type).form_fields)


def parse_action_config(operation_type: str, config: dict[str, Any] | None) -> ActionConfigModel:
    """Load ``config`` into the variant for ``operation_type`` (raises pydantic's ValidationError)."""
    action_config_model(operation_type)
    payload = {key: value for key, value in (config or {}).items() if key != 'operationType'}
    return _VARIANT_ADAPTER.validate_python({**payload, 'operationType': operation_type})


def action_form_values(operation_type: str, config: dict[str, Any] | None) -> dict[str, Any]:
    compiled = _compiled(operation_type)
    values = compiled.defaults
    values.update(extract_field_values(values, config or {}))
    return values


def validate_action_config(operation_type: str, config: dict[str, Any] | None) -> list[FieldError]:
    return _compiled(operation_type).validate(action_form_values(operation_type, config))
