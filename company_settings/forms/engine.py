"""Stateful settings form: live edits, reactive visibility, validation and submit.

The engine holds no UI; ``render`` returns plain frozen dataclasses that any
front end (or a test) can walk. Values are resolved by dotted field id, so the
initial data can be the nested settings document or a flat ``id -> value`` map.
"""

from __future__ import annotations

import base64
import copy
import inspect
import logging
import mimetypes
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field as dataclass_field
from typing import Any, Literal

from company_settings.forms.fields import FieldDescriptor, SettingsSchema
from company_settings.forms.paths import extract_field_values
from company_settings.forms.validator import FieldError, compile_schema
from company_settings.forms.visibility import is_field_visible, unsatisfied_field_ids


logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = 'Your settings have been updated successfully.'
FAILURE_MESSAGE = 'Failed to update settings'
INVALID_MESSAGE = 'Please fix the highlighted fields'

SubmissionStatus = Literal['succeeded', 'invalid', 'failed']

CONTROL_KINDS: dict[str, str] = {
    'text': 'input',
    'textarea': 'textarea',
    'number': 'number-input',
    'email': 'email-input',
    'password': 'password-input',
    'select': 'select',
    'multiselect': 'multi-select',
    'checkbox': 'checkbox',
    'switch': 'switch',
    'radio': 'radio-group',
    'color': 'color-picker',
    'date': 'date-picker',
    'time': 'time-picker',
    'file': 'file-upload',
    'slider': 'slider',
}


@dataclass(frozen=True)
class RenderedControl:
    field_id: str
    kind: str
    label: str
    value: Any
    description: str | None = None
    placeholder: str | None = None
    required: bool = False
    disabled: bool = False
    error: str | None = None
    options: tuple[dict[str, Any], ...] = ()
    bounds: dict[str, Any] = dataclass_field(default_factory=dict)


@dataclass(frozen=True)
class RenderedSection:
    id: str
    title: str
    description: str | None
    controls: tuple[RenderedControl, ...]


@dataclass(frozen=True)
class RenderedTab:
    id: str
    title: str
    icon: str | None
    sections: tuple[RenderedSection, ...]


@dataclass(frozen=True)
class SubmissionResult:
    status: SubmissionStatus
    message: str
    values: dict[str, Any]
    errors: list[FieldError] = dataclass_field(default_factory=list)
    result: Any = None

    @property
    def ok(self) -> bool:
        return self.status == 'succeeded'


@dataclass(frozen=True)
class FileSelection:
    accepted: bool
    message: str | None = None
    data_url: str | None = None


def format_megabytes(size: int) -> str:
    return f'{size / (1024 * 1024):.2f}MB'


def matches_accept(accept: str | None, content_type: str | None, filename: str | None) -> bool:
    """``accept`` follows the HTML attribute: ``image/*``, ``image/png`` or ``.png`` tokens."""
    if not accept:
        return True
    content_type = (content_type or '').lower()
    filename = (filename or '').lower()
    for token in (part.strip().lower() for part in accept.split(',')):
        if not token:
            continue
        if token.startswith('.'):
            if filename.endswith(token):
                return True
        elif token.endswith('/*'):
            if content_type.startswith(token[:-1]):
                return True
        elif token == content_type:
            return True
    return False


class SettingsFormEngine:
    def __init__(self, schema: SettingsSchema, initial_data: Mapping[str, Any] | None = None) -> None:
        self.schema = schema
        self.compiled = compile_schema(schema)
        self.fields_by_id = schema.fields_by_id()
        self.initial_values = extract_field_values(self.fields_by_id, initial_data or {})
        self.edits: dict[str, Any] = {}
        self.errors: dict[str, str] = {}
        self.last_result: SubmissionResult | None = None

    def _field(self, field_id: str) -> FieldDescriptor:
        try:
            return self.fields_by_id[field_id]
        except KeyError:
            raise KeyError(f'Unknown field: {field_id}') from None

    def values(self) -> dict[str, Any]:
        merged = self.compiled.defaults
        merged.update(copy.deepcopy(self.initial_values))
        merged.update(copy.deepcopy(self.edits))
        return merged

    def get_value(self, field_id: str) -> Any:
        self._field(field_id)
        return self.values()[field_id]

    def set_value(self, field_id: str, value: Any) -> None:
        self._field(field_id)
        self.edits[field_id] = value
        self.errors.pop(field_id, None)

    def reset(self) -> None:
        self.edits.clear()
        self.errors.clear()
        self.last_result = None

    @property
    def is_dirty(self) -> bool:
        return bool(self.edits)

    def is_visible(self, field_id: str) -> bool:
        return is_field_visible(self._field(field_id), self.values(), self.fields_by_id)

    def visible_fields(self) -> list[FieldDescriptor]:
        state = self.values()
        return [
            field for field in self.schema.all_fields() if is_field_visible(field, state, self.fields_by_id)
        ]

    def inactive_field_ids(self) -> set[str]:
        return unsatisfied_field_ids(self.schema.all_fields(), self.values())

    def validate(self) -> list[FieldError]:
        errors = self.compiled.validate(self.values(), skip=self.inactive_field_ids())
        self.errors = {error.field_id: error.message for error in errors}
        return errors

    async def submit(self, on_submit: Callable[[dict[str, Any]], Any]) -> SubmissionResult:
        values = self.values()
        errors = self.validate()
        if errors:
            self.last_result = SubmissionResult('invalid', INVALID_MESSAGE, values, errors)
            return self.last_result

        try:
            outcome = on_submit(copy.deepcopy(values))
            if inspect.isawaitable(outcome):
                outcome = await outcome
        except Exception:  # noqa: BLE001
            logger.exception('Settings form %s submission failed', self.schema.id)
            self.last_result = SubmissionResult('failed', FAILURE_MESSAGE, values)
            return self.last_result

        # Saved values become the new baseline.
        self.initial_values = values
        self.edits.clear()
        self.last_result = SubmissionResult('succeeded', SUCCESS_MESSAGE, values, result=outcome)
        return self.last_result

    def select_file(
        self,
        field_id: str,
        content: bytes,
        content_type: str | None = None,
        filename: str | None = None,
    ) -> FileSelection:
        field = self._field(field_id)
        if field.type != 'file':
            raise ValueError(f'Field {field_id} is not a file field')

        if content_type is None and filename:
            content_type = mimetypes.guess_type(filename)[0]
        if field.max_size and len(content) > field.max_size:
            return FileSelection(False, f'Maximum file size is {format_megabytes(field.max_size)}')
        if not matches_accept(field.accept, content_type, filename):
            return FileSelection(False, f'{field.label} does not accept this file type')

        encoded = base64.b64encode(content).decode('ascii')
        data_url = f'data:{content_type or "application/octet-stream"};base64,{encoded}'
        self.set_value(field_id, data_url)
        return FileSelection(True, data_url=data_url)

    def clear_file(self, field_id: str) -> None:
        if self._field(field_id).type != 'file':
            raise ValueError(f'Field {field_id} is not a file field')
        self.set_value(field_id, None)

    def _render_control(self, field: FieldDescriptor, value: Any) -> RenderedControl:
        bounds = field.validation.model_dump(by_alias=True, exclude_none=True)
        for attr, key in (('step', 'step'), ('accept', 'accept'), ('max_size', 'maxSize')):
            extra = getattr(field, attr)
            if extra is not None:
                bounds[key] = extra
        return RenderedControl(
            field_id=field.id,
            kind=CONTROL_KINDS[field.type],
            label=field.label,
            value=value,
            description=field.description,
            placeholder=field.placeholder,
            required=field.required,
            disabled=field.disabled,
            error=self.errors.get(field.id),
            options=tuple(option.to_wire() for option in field.options),
            bounds=bounds,
        )

    def render(self) -> list[RenderedTab]:
        state = self.values()
        tabs: list[RenderedTab] = []
        for tab in self.schema.tabs:
            sections: list[RenderedSection] = []
            for section in tab.sections:
                controls = tuple(
                    self._render_control(field, state[field.id])
                    for field in section.fields
                    if is_field_visible(field, state, self.fields_by_id)
                )
                if controls:
                    sections.append(RenderedSection(section.id, section.title, section.description, controls))
            tabs.append(RenderedTab(tab.id, tab.title, tab.icon, tuple(sections)))
        return tabs
