import pytest

from company_settings.forms.fields import DependsOn, FieldDescriptor
from company_settings.forms.visibility import (
    evaluate_dependency,
    is_dependency_satisfied,
    is_field_visible,
    unsatisfied_field_ids,
)


def _rule(value, operator: str = 'equals') -> DependsOn:
    return DependsOn(field='other', value=value, operator=operator)


def _switch(field_id: str, depends_on: dict | None = None, **extra) -> FieldDescriptor:
    data = {'id': field_id, 'type': 'switch', 'label': field_id, **extra}
    if depends_on:
        data['dependsOn'] = depends_on
    return FieldDescriptor.model_validate(data)


def test_operator_defaults_to_equals() -> None:
    rule = DependsOn.model_validate({'field': 'other', 'value': True})

    assert rule.operator == 'equals'
    assert evaluate_dependency(rule, True) is True
    assert evaluate_dependency(rule, False) is False


@pytest.mark.parametrize(
    ('actual', 'expected'),
    [(True, True), (1, False), ('true', False), (None, False)],
)
def test_equals_is_strict(actual, expected: bool) -> None:
    assert evaluate_dependency(_rule(True), actual) is expected


def test_equals_compares_numbers_by_value() -> None:
    assert evaluate_dependency(_rule(5), 5.0) is True
    assert evaluate_dependency(_rule(5), '5') is False


def test_not_equals() -> None:
    rule = _rule('none', 'notEquals')

    assert evaluate_dependency(rule, 'salesforce') is True
    assert evaluate_dependency(rule, 'none') is False
    assert evaluate_dependency(rule, None) is True


def test_contains_requires_a_sequence() -> None:
    rule = _rule('sms', 'contains')

    assert evaluate_dependency(rule, ['email', 'sms']) is True
    assert evaluate_dependency(rule, ['email']) is False
    assert evaluate_dependency(rule, 'sms') is False
    assert evaluate_dependency(rule, None) is False


def test_ordering_operators() -> None:
    assert evaluate_dependency(_rule(10, 'greaterThan'), 11) is True
    assert evaluate_dependency(_rule(10, 'greaterThan'), 10) is False
    assert evaluate_dependency(_rule(10, 'lessThan'), 3) is True
    assert evaluate_dependency(_rule(10, 'lessThan'), None) is False
    assert evaluate_dependency(_rule(10, 'lessThan'), 'abc') is False


def test_hidden_field_is_never_visible() -> None:
    field = _switch('a', hidden=True)

    assert is_field_visible(field, {}) is False
    assert is_dependency_satisfied(field, {}) is True


def test_dependency_follows_the_chain() -> None:
    root = _switch('root')
    middle = _switch('middle', {'field': 'root', 'value': True})
    leaf = _switch('leaf', {'field': 'middle', 'value': False})
    fields_by_id = {field.id: field for field in (root, middle, leaf)}
    state = {'root': False, 'middle': False, 'leaf': False}

    # The direct rule holds, but `middle` itself is switched off.
    assert is_dependency_satisfied(leaf, state) is True
    assert is_dependency_satisfied(leaf, state, fields_by_id) is False

    state['root'] = True
    assert is_field_visible(leaf, state, fields_by_id) is True


def test_unsatisfied_field_ids() -> None:
    fields = [
        _switch('ipRestriction'),
        FieldDescriptor.model_validate(
            {
                'id': 'allowedIpAddresses',
                'type': 'textarea',
                'label': 'Allowed IP Addresses',
                'required': True,
                'dependsOn': {'field': 'ipRestriction', 'value': True},
            }
        ),
    ]

    assert unsatisfied_field_ids(fields, {'ipRestriction': False}) == {'allowedIpAddresses'}
    assert unsatisfied_field_ids(fields, {'ipRestriction': True}) == set()
