"""Compile field descriptors into a structural validator and a defaults map."""

from __future__ import annotations

import copy
import math
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from company_settings.forms.fields import FieldDescriptor, check_field_graph, option_key


_EMAIL_ADAPTER: TypeAdapter[EmailStr] = TypeAdapter(EmailStr)

TEXT_TYPES = frozenset({'text', 'textarea', 'email', 'password', 'color', 'date', 'time'})
BOOLEAN_TYPES = frozenset({'checkbox', 'switch'})
NUMERIC_TYPES = frozenset({'number', 'slider'})


@dataclass(frozen=True)
class FieldError:
    field_id: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {'fieldId': self.field_id, 'message': self.message}


def _is_absent(value: Any) -> bool:
    return value is None


def _is_email(value: str) -> bool:
    try:
        _EMAIL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        return False
    return True


def _format_bound(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _check_text(field: FieldDescriptor, value: Any) -> str | None:
    if _is_absent(value) or value == '':
        return f'{field.label} is required' if field.required else None
    if not isinstance(value, str):
        return f'{field.label} must be text'

    rules = field.validation
    if field.type in ('text', 'textarea', 'password'):
        if rules.min_length is not None and len(value) < rules.min_length:
            return f'{field.label} must be at least {rules.min_length} characters'
        if rules.max_length is not None and len(value) > rules.max_length:
            return f'{field.label} must be at most {rules.max_length} characters'
    if field.type == 'email' and not _is_email(value):
        return 'Please enter a valid email address'
    if rules.pattern and field.type in ('text', 'textarea', 'email'):
        if not re.search(rules.pattern, value):
            return f'{field.label} has an invalid format'
    return None


def _check_number(field: FieldDescriptor, value: Any) -> str | None:
    if _is_absent(value) or value == '':
        return f'{field.label} is required' if field.required else None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return f'{field.label} must be a number'
    # Ints compare exactly against any bound; only floats can be inf or nan.
    if isinstance(value, float) and not math.isfinite(value):
        return f'{field.label} must be a finite number'

    rules = field.validation
    if rules.min is not None and value < rules.min:
        return f'{field.label} must be at least {_format_bound(rules.min)}'
    if rules.max is not None and value > rules.max:
        return f'{field.label} must be at most {_format_bound(rules.max)}'
    return None


def _check_choice(field: FieldDescriptor, value: Any) -> str | None:
    if _is_absent(value) or value == '':
        return f'{field.label} is required' if field.required else None
    if isinstance(value, (list, dict)) or option_key(value) not in field.option_keys():
        return f'Please select a valid option for {field.label}'
    return None


def _check_multiselect(field: FieldDescriptor, value: Any) -> str | None:
    if _is_absent(value):
        return f'{field.label} is required' if field.required else None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        return f'{field.label} must be a list of values'
    if field.required and not value:
        return f'{field.label} is required'
    return None


def _check_boolean(field: FieldDescriptor, value: Any) -> str | None:
    # An absent checkbox/switch reads as false.
    if _is_absent(value):
        return None
    if not isinstance(value, bool):
        return f'{field.label} must be true or false'
    return None


def _check_file(field: FieldDescriptor, value: Any) -> str | None:
    if _is_absent(value) or value == '':
        return f'{field.label} is required' if field.required else None
    if not isinstance(value, str):
        return f'{field.label} must be a file reference'
    return None


FieldCheck = Callable[[FieldDescriptor, Any], str | None]

CHECKS: dict[str, FieldCheck] = {
    'text': _check_text,
    'textarea': _check_text,
    'email': _check_text,
    'password': _check_text,
    'color': _check_text,
    'date': _check_text,
    'time': _check_text,
    'number': _check_number,
    'slider': _check_number,
    'select': _check_choice,
    'radio': _check_choice,
    'multiselect': _check_multiselect,
    'checkbox': _check_boolean,
    'switch': _check_boolean,
    'file': _check_file,
}


def zero_value(field: FieldDescriptor) -> Any:
    if field.type in NUMERIC_TYPES:
        return 0
    if field.type in BOOLEAN_TYPES:
        return False
    if field.type == 'multiselect':
        return []
    if field.type == 'file':
        return None
    if field.type in ('select', 'radio'):
        return field.options[0].value if field.options else ''
    return ''


def default_value(field: FieldDescriptor) -> Any:
    if field.has_default:
        return copy.deepcopy(field.default_value)
    return zero_value(field)


def get_default_values(fields: Iterable[FieldDescriptor]) -> dict[str, Any]:
    return {field.id: default_value(field) for field in fields}


def validate_field(field: FieldDescriptor, value: Any) -> FieldError | None:
    message = CHECKS[field.type](field, value)
    if message is None:
        return None
    return FieldError(field.id, message)


class CompiledSchema:
    """Validator plus defaults for an ordered list of fields.

    ``validate`` never raises; it returns at most one error per field, in
    field order. Fields whose id is in ``skip`` are not checked.
    """

    def __init__(self, fields: Iterable[FieldDescriptor]) -> None:
        self.fields = list(fields)
        check_field_graph(self.fields)
        self._defaults = get_default_values(self.fields)

    @property
    def defaults(self) -> dict[str, Any]:
        return copy.deepcopy(self._defaults)

    def validate(self, values: Mapping[str, Any], skip: Iterable[str] = ()) -> list[FieldError]:
        skipped = set(skip)
        errors: list[FieldError] = []
        for field in self.fields:
            if field.id in skipped:
                continue
            error = validate_field(field, values.get(field.id))
            if error is not None:
                errors.append(error)
        return errors


def compile_fields(fields: Iterable[FieldDescriptor]) -> CompiledSchema:
    return CompiledSchema(fields)


def compile_schema(schema) -> CompiledSchema:
    return CompiledSchema(schema.all_fields())
