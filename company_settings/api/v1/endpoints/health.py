from typing import Any

from fastapi import APIRouter

from company_settings.core.config import settings
from company_settings.forms.catalog import SCHEMAS
from company_settings.operations.catalog import OPERATION_TYPES


router = APIRouter(tags=['health'])


@router.get('/health')
def health() -> dict[str, Any]:
    return {
        'status': 'ok',
        'environment': settings.APP_ENV,
        'settingsBackend': settings.SETTINGS_BACKEND,
        'schemas': sorted(SCHEMAS),
        'operationTypes': len(OPERATION_TYPES),
    }
