"""Dotted-path helpers bridging flat form values and nested settings documents."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any


_MISSING = object()


def _split(path: str) -> list[str]:
    return [part for part in path.split('.') if part]


def get_path(document: Mapping[str, Any], path: str, default: Any = None) -> Any:
    current: Any = document
    for part in _split(path):
        if not isinstance(current, Mapping) or part not in current:
            return default
        current = current[part]
    return current


def set_path(document: dict[str, Any], path: str, value: Any) -> None:
    parts = _split(path)
    if not parts:
        raise ValueError('Empty path')
    current = document
    for part in parts[:-1]:
        child = current.get(part)
        if not isinstance(child, dict):
            child = {}
            current[part] = child
        current = child
    current[parts[-1]] = value


def extract_field_values(field_ids: Iterable[str], data: Mapping[str, Any]) -> dict[str, Any]:
    """Pick values for ``field_ids`` out of a flat map or a nested document.

    A literal flat key (``{"profile.name": ...}``) wins over the nested lookup.
    Ids with no value in ``data`` are left out so defaults can fill them in.
    """
    values: dict[str, Any] = {}
    for field_id in field_ids:
        if field_id in data:
            values[field_id] = copy.deepcopy(data[field_id])
            continue
        found = get_path(data, field_id, _MISSING)
        if found is not _MISSING:
            values[field_id] = copy.deepcopy(found)
    return values


def merge_values_into_document(document: Mapping[str, Any], values: Mapping[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(dict(document))
    for path, value in values.items():
        set_path(merged, path, copy.deepcopy(value))
    return merged
