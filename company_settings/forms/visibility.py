from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from company_settings.forms.fields import DependsOn, FieldDescriptor


def _same_value(left: Any, right: Any) -> bool:
    # Strict equality: True must not equal 1 and "1" must not equal 1.
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right
    return type(left) is type(right) and left == right


def evaluate_dependency(depends_on: DependsOn, actual: Any) -> bool:
    target = depends_on.value
    operator = depends_on.operator

    if operator == 'equals':
        return _same_value(actual, target)
    if operator == 'notEquals':
        return not _same_value(actual, target)
    if operator == 'contains':
        return isinstance(actual, (list, tuple)) and any(_same_value(item, target) for item in actual)
    if operator in ('greaterThan', 'lessThan'):
        if actual is None or target is None:
            return False
        try:
            return actual > target if operator == 'greaterThan' else actual < target
        except TypeError:
            return False
    return True


def is_dependency_satisfied(
    field: FieldDescriptor,
    state: Mapping[str, Any],
    fields_by_id: Mapping[str, FieldDescriptor] | None = None,
) -> bool:
    """Whether ``field``'s ``dependsOn`` chain holds against the live form state.

    With ``fields_by_id`` the check is transitive: a field depending on a field
    that is itself switched off by its own dependency is switched off too.
    """
    seen: set[str] = set()
    current = field
    while current.depends_on is not None:
        if current.id in seen:
            return False
        seen.add(current.id)

        depends_on = current.depends_on
        if not evaluate_dependency(depends_on, state.get(depends_on.field)):
            return False
        if fields_by_id is None:
            return True
        target = fields_by_id.get(depends_on.field)
        if target is None:
            return True
        current = target
    return True


def is_field_visible(
    field: FieldDescriptor,
    state: Mapping[str, Any],
    fields_by_id: Mapping[str, FieldDescriptor] | None = None,
) -> bool:
    if field.hidden:
        return False
    return is_dependency_satisfied(field, state, fields_by_id)


def unsatisfied_field_ids(fields: Iterable[FieldDescriptor], state: Mapping[str, Any]) -> set[str]:
    fields = list(fields)
    fields_by_id = {field.id: field for field in fields}
    return {field.id for field in fields if not is_dependency_satisfied(field, state, fields_by_id)}
