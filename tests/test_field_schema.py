import pytest
from pydantic import ValidationError

from company_settings.forms.fields import FieldDescriptor, SettingsSchema, check_field_graph, SchemaDefinitionError


def _schema(fields: list[dict]) -> dict:
    return {
        'id': 'demo',
        'title': 'Demo',
        'sections': [{'id': 'main', 'title': 'Main', 'fields': fields}],
    }


def test_flat_schema_is_normalized_into_a_single_tab() -> None:
    schema = SettingsSchema.model_validate(_schema([{'id': 'a', 'type': 'text', 'label': 'A'}]))

    assert len(schema.tabs) == 1
    assert schema.tabs[0].id == 'demo'
    assert schema.tabs[0].title == 'Demo'
    assert [field.id for field in schema.all_fields()] == ['a']


def test_schema_rejects_tabs_and_sections_together() -> None:
    payload = _schema([{'id': 'a', 'type': 'text', 'label': 'A'}])
    payload['tabs'] = [{'id': 't', 'title': 'T', 'sections': []}]

    with pytest.raises(ValidationError):
        SettingsSchema.model_validate(payload)


def test_top_level_bounds_are_lifted_into_validation() -> None:
    field = FieldDescriptor.model_validate(
        {'id': 'n', 'type': 'number', 'label': 'N', 'min': 1, 'max': 10, 'validation': {'max': 5}}
    )

    assert field.validation.min == 1
    assert field.validation.max == 5


def test_explicit_falsy_default_counts_as_set() -> None:
    explicit = FieldDescriptor.model_validate({'id': 'a', 'type': 'switch', 'label': 'A', 'defaultValue': False})
    implicit = FieldDescriptor.model_validate({'id': 'b', 'type': 'switch', 'label': 'B'})

    assert explicit.has_default is True
    assert implicit.has_default is False


def test_select_without_options_is_rejected() -> None:
    with pytest.raises(ValidationError):
        FieldDescriptor.model_validate({'id': 's', 'type': 'select', 'label': 'S'})


def test_duplicate_option_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        FieldDescriptor.model_validate(
            {
                'id': 's',
                'type': 'radio',
                'label': 'S',
                'options': [{'label': 'One', 'value': 1}, {'label': 'Also one', 'value': '1'}],
            }
        )


def test_invalid_pattern_is_rejected() -> None:
    with pytest.raises(ValidationError):
        FieldDescriptor.model_validate({'id': 't', 'type': 'text', 'label': 'T', 'validation': {'pattern': '('}})


def test_duplicate_field_ids_are_rejected() -> None:
    with pytest.raises(ValidationError, match='Duplicate field id'):
        SettingsSchema.model_validate(
            _schema([{'id': 'a', 'type': 'text', 'label': 'A'}, {'id': 'a', 'type': 'text', 'label': 'Again'}])
        )


def test_unknown_dependency_target_is_rejected() -> None:
    with pytest.raises(ValidationError, match='depends on unknown field'):
        SettingsSchema.model_validate(
            _schema([{'id': 'a', 'type': 'text', 'label': 'A', 'dependsOn': {'field': 'missing', 'value': True}}])
        )


def test_dependency_cycle_is_rejected() -> None:
    with pytest.raises(ValidationError, match='Cyclic dependsOn chain'):
        SettingsSchema.model_validate(
            _schema(
                [
                    {'id': 'a', 'type': 'switch', 'label': 'A', 'dependsOn': {'field': 'b', 'value': True}},
                    {'id': 'b', 'type': 'switch', 'label': 'B', 'dependsOn': {'field': 'a', 'value': True}},
                ]
            )
        )


def test_self_dependency_is_a_cycle() -> None:
    field = FieldDescriptor.model_validate(
        {'id': 'a', 'type': 'switch', 'label': 'A', 'dependsOn': {'field': 'a', 'value': True}}
    )

    with pytest.raises(SchemaDefinitionError, match='a -> a'):
        check_field_graph([field])


def test_schema_serializes_camel_case() -> None:
    schema = SettingsSchema.model_validate(
        _schema([{'id': 'a', 'type': 'text', 'label': 'A', 'defaultValue': 'x', 'validation': {'minLength': 2}}])
    )

    wire = schema.to_wire()
    field = wire['tabs'][0]['sections'][0]['fields'][0]
    assert field['defaultValue'] == 'x'
    assert field['validation'] == {'minLength': 2}
