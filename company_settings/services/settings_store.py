"""Persistence for the per-company settings document.

Both stores replace the document wholesale on write. A missing document reads
as the built-in defaults; a stored document that cannot be decoded raises
``SerializationError`` instead of being mistaken for a missing one.
"""

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from company_settings.core.config import settings
from company_settings.core.exceptions import SerializationError, StorageError
from company_settings.forms.catalog import default_company_settings
from company_settings.models.company import CompanySettingsRecord


logger = logging.getLogger(__name__)


class SettingsStore(Protocol):
    def get(self, company_id: int) -> dict[str, Any]: ...

    def replace(self, company_id: int, document: dict[str, Any]) -> dict[str, Any]: ...


class JsonFileSettingsStore:
    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)

    def path_for(self, company_id: int) -> Path:
        return self.data_dir / f'company-{company_id}-settings.json'

    def get(self, company_id: int) -> dict[str, Any]:
        path = self.path_for(company_id)
        try:
            raw = path.read_text(encoding='utf-8')
        except FileNotFoundError:
            return default_company_settings()
        except OSError as exc:
            logger.error('Failed to read settings file %s: %s', path, exc)
            raise StorageError('read', str(exc)) from exc

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.error('Settings file %s is not valid JSON: %s', path, exc)
            raise SerializationError(str(path), exc.msg) from exc
        if not isinstance(document, dict):
            logger.error('Settings file %s does not hold a JSON object', path)
            raise SerializationError(str(path), 'expected a JSON object')
        return document

    def replace(self, company_id: int, document: dict[str, Any]) -> dict[str, Any]:
        path = self.path_for(company_id)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            # Write to a sibling temp file, then rename over the target.
            fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=path.name, suffix='.tmp')
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as handle:
                    json.dump(document, handle, indent=2)
                os.replace(tmp_name, path)
            except Exception:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, TypeError, ValueError) as exc:
            logger.exception('Failed to write settings file %s', path)
            raise StorageError('write', str(exc)) from exc

        logger.info('Saved settings document for company %s to %s', company_id, path)
        return copy.deepcopy(document)


class DatabaseSettingsStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def _record(self, company_id: int) -> CompanySettingsRecord | None:
        return self.db.scalar(select(CompanySettingsRecord).where(CompanySettingsRecord.company_id == company_id))

    def get(self, company_id: int) -> dict[str, Any]:
        try:
            record = self._record(company_id)
            if record is None:
                record = CompanySettingsRecord(company_id=company_id, document=default_company_settings())
                self.db.add(record)
                self.db.flush()
                logger.info('Created default settings document for company %s', company_id)
        except SQLAlchemyError as exc:
            logger.exception('Failed to load settings document for company %s', company_id)
            raise StorageError('read', str(exc)) from exc
        if not isinstance(record.document, dict):
            raise SerializationError(f'company_settings:{company_id}', 'expected a JSON object')
        return copy.deepcopy(record.document)

    def replace(self, company_id: int, document: dict[str, Any]) -> dict[str, Any]:
        try:
            record = self._record(company_id)
            if record is None:
                record = CompanySettingsRecord(company_id=company_id, document=copy.deepcopy(document))
                self.db.add(record)
            else:
                record.document = copy.deepcopy(document)
            self.db.flush()
        except SQLAlchemyError as exc:
            logger.exception('Failed to save settings document for company %s', company_id)
            raise StorageError('write', str(exc)) from exc
        logger.info('Saved settings document for company %s', company_id)
        return copy.deepcopy(record.document)


def get_settings_store(db: Session) -> SettingsStore:
    if settings.SETTINGS_BACKEND == 'file':
        return JsonFileSettingsStore(settings.SETTINGS_DATA_DIR)
    return DatabaseSettingsStore(db)
