from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from company_settings.api.deps import CompanyContext, get_company_context
from company_settings.core.exceptions import NotFoundError, ValidationError
from company_settings.db.session import get_db
from company_settings.forms.catalog import COMPANY_SETTINGS_SCHEMA, get_schema
from company_settings.forms.engine import SettingsFormEngine
from company_settings.forms.paths import merge_values_into_document
from company_settings.schemas.settings import SchemaValidationResult
from company_settings.services.company_service import sync_company_profile
from company_settings.services.settings_store import get_settings_store

router = APIRouter(prefix='/settings', tags=['settings'])


def _schema_or_404(schema_id: str):
    try:
        return get_schema(schema_id)
    except KeyError as exc:
        raise NotFoundError('Settings schema', schema_id) from exc


@router.get('')
def read_settings(
    db: Session = Depends(get_db),
    ctx: CompanyContext = Depends(get_company_context),
) -> dict[str, Any]:
    document = get_settings_store(db).get(ctx.company_id)
    db.commit()
    return document


@router.post('')
def replace_settings(
    payload: dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    ctx: CompanyContext = Depends(get_company_context),
) -> dict[str, Any]:
    form = SettingsFormEngine(COMPANY_SETTINGS_SCHEMA, initial_data=payload)
    errors = form.validate()
    if errors:
        raise ValidationError(errors)

    document = merge_values_into_document(payload, form.values())
    saved = get_settings_store(db).replace(ctx.company_id, document)
    sync_company_profile(db, ctx.company, saved.get('profile'))
    db.commit()
    return saved


@router.get('/schemas/{schema_id}')
def read_schema(schema_id: str) -> dict[str, Any]:
    return _schema_or_404(schema_id).to_wire()


@router.post('/schemas/{schema_id}/validate', response_model=SchemaValidationResult)
def validate_against_schema(
    schema_id: str,
    payload: dict[str, Any] = Body(...),
) -> SchemaValidationResult:
    form = SettingsFormEngine(_schema_or_404(schema_id), initial_data=payload)
    errors = form.validate()
    return SchemaValidationResult(
        schema_id=schema_id,
        valid=not errors,
        errors=[error.to_dict() for error in errors],
        values=form.values(),
    )
