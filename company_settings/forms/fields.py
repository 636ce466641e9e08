"""Declarative settings-form schema: fields, sections, tabs and whole schemas.

Descriptors are pydantic models so a schema can be declared in Python, loaded
from JSON and served back to a client unchanged (camelCase on the wire).
Structural invariants of a schema are checked once, when it is loaded:

* field ids are unique across the whole schema,
* every ``dependsOn.field`` names another field of the same schema,
* ``dependsOn`` chains contain no cycles,
* select/radio fields declare at least one option and option values are unique.
"""

from __future__ import annotations

import re
from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


FieldType = Literal[
    'text',
    'textarea',
    'number',
    'email',
    'password',
    'select',
    'multiselect',
    'checkbox',
    'switch',
    'radio',
    'color',
    'date',
    'time',
    'file',
    'slider',
]
DependencyOperator = Literal['equals', 'notEquals', 'contains', 'greaterThan', 'lessThan']

FIELD_TYPES: tuple[str, ...] = get_args(FieldType)
OPTION_FIELD_TYPES = frozenset({'select', 'multiselect', 'radio'})

# Bounds a descriptor may declare directly on the field instead of under `validation`.
_TOP_LEVEL_BOUNDS = {
    'min': 'min',
    'max': 'max',
    'minLength': 'minLength',
    'maxLength': 'maxLength',
    'min_length': 'minLength',
    'max_length': 'maxLength',
}


class SchemaModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)


def option_key(value: Any) -> str:
    """String form used to compare option values (``True`` -> ``'true'``, ``1.0`` -> ``'1'``)."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class FieldOption(SchemaModel):
    label: str
    value: str | int | float | bool
    description: str | None = None
    disabled: bool = False


class FieldValidation(SchemaModel):
    min: int | float | None = None
    max: int | float | None = None
    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)
    pattern: str | None = None

    @field_validator('pattern')
    @classmethod
    def validate_pattern(cls, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f'Invalid pattern {value!r}: {exc}') from exc
        return value


class DependsOn(SchemaModel):
    field: str = Field(min_length=1)
    value: Any = None
    operator: DependencyOperator = 'equals'


class SliderMark(SchemaModel):
    value: int | float
    label: str


class FieldDescriptor(SchemaModel):
    id: str = Field(min_length=1)
    type: FieldType
    label: str
    description: str | None = None
    placeholder: str | None = None
    default_value: Any = None
    required: bool = False
    disabled: bool = False
    hidden: bool = False
    validation: FieldValidation = Field(default_factory=FieldValidation)
    options: list[FieldOption] = Field(default_factory=list)
    depends_on: DependsOn | None = None

    step: int | float | None = None
    accept: str | None = None
    max_size: int | None = Field(default=None, gt=0)
    marks: list[SliderMark] = Field(default_factory=list)
    preset_colors: list[str] = Field(default_factory=list)

    @model_validator(mode='before')
    @classmethod
    def lift_top_level_bounds(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        lifted = {alias: data[key] for key, alias in _TOP_LEVEL_BOUNDS.items() if key in data}
        if not lifted:
            return data

        data = {key: value for key, value in data.items() if key not in _TOP_LEVEL_BOUNDS}
        validation = data.get('validation') or {}
        if isinstance(validation, FieldValidation):
            validation = validation.model_dump(by_alias=True, exclude_none=True)
        data['validation'] = {**lifted, **validation}
        return data

    @model_validator(mode='after')
    def check_options(self) -> FieldDescriptor:
        if self.type in ('select', 'radio') and not self.options:
            raise ValueError(f'Field {self.id} of type {self.type} must declare at least one option')
        seen: set[str] = set()
        for option in self.options:
            key = option_key(option.value)
            if key in seen:
                raise ValueError(f'Field {self.id} declares option value {key!r} more than once')
            seen.add(key)
        return self

    @property
    def has_default(self) -> bool:
        return 'default_value' in self.model_fields_set

    def option_keys(self) -> list[str]:
        return [option_key(option.value) for option in self.options]


class SectionDescriptor(SchemaModel):
    id: str
    title: str
    description: str | None = None
    icon: str | None = None
    fields: list[FieldDescriptor] = Field(default_factory=list)


class TabDescriptor(SchemaModel):
    id: str
    title: str
    description: str | None = None
    icon: str | None = None
    sections: list[SectionDescriptor] = Field(default_factory=list)


class SchemaDefinitionError(ValueError):
    pass


def dependency_cycle(fields_by_id: dict[str, FieldDescriptor]) -> list[str] | None:
    """Return the first ``dependsOn`` cycle as a list of ids (closing id repeated), if any."""
    cleared: set[str] = set()
    for start in fields_by_id:
        path: list[str] = []
        on_path: set[str] = set()
        current: str | None = start
        while current is not None and current not in cleared:
            if current in on_path:
                return path[path.index(current):] + [current]
            on_path.add(current)
            path.append(current)
            field = fields_by_id.get(current)
            current = field.depends_on.field if field is not None and field.depends_on else None
        cleared.update(path)
    return None


def check_field_graph(fields: list[FieldDescriptor]) -> None:
    fields_by_id: dict[str, FieldDescriptor] = {}
    for field in fields:
        if field.id in fields_by_id:
            raise SchemaDefinitionError(f'Duplicate field id {field.id!r}')
        fields_by_id[field.id] = field

    for field in fields:
        if field.depends_on is None:
            continue
        if field.depends_on.field not in fields_by_id:
            raise SchemaDefinitionError(
                f'Field {field.id!r} depends on unknown field {field.depends_on.field!r}'
            )

    cycle = dependency_cycle(fields_by_id)
    if cycle:
        raise SchemaDefinitionError(f'Cyclic dependsOn chain: {" -> ".join(cycle)}')


class SettingsSchema(SchemaModel):
    id: str
    title: str
    description: str | None = None
    tabs: list[TabDescriptor] = Field(default_factory=list)

    @model_validator(mode='before')
    @classmethod
    def normalize_flat_shape(cls, data: Any) -> Any:
        # Flat schemas (sections directly on the schema) become a single tab.
        if not isinstance(data, dict) or 'sections' not in data:
            return data
        data = dict(data)
        sections = data.pop('sections')
        if data.get('tabs'):
            raise ValueError('A schema declares either tabs or sections, not both')
        data['tabs'] = [
            {
                'id': data.get('id'),
                'title': data.get('title'),
                'description': data.get('description'),
                'sections': sections,
            }
        ]
        return data

    @model_validator(mode='after')
    def check_fields(self) -> SettingsSchema:
        check_field_graph(self.all_fields())
        return self

    def sections(self) -> list[SectionDescriptor]:
        return [section for tab in self.tabs for section in tab.sections]

    def all_fields(self) -> list[FieldDescriptor]:
        return [field for section in self.sections() for field in section.fields]

    def fields_by_id(self) -> dict[str, FieldDescriptor]:
        return {field.id: field for field in self.all_fields()}

    def get_field(self, field_id: str) -> FieldDescriptor:
        for field in self.all_fields():
            if field.id == field_id:
                return field
        raise KeyError(field_id)
