import json
from pathlib import Path

import pytest
from sqlalchemy.orm import Session

from company_settings.core.exceptions import SerializationError, StorageError
from company_settings.forms.catalog import DEFAULT_COMPANY_SETTINGS
from company_settings.models.company import Company, CompanySettingsRecord
from company_settings.services.settings_store import DatabaseSettingsStore, JsonFileSettingsStore


def test_file_store_returns_defaults_when_missing(tmp_path: Path) -> None:
    store = JsonFileSettingsStore(tmp_path / 'settings')

    document = store.get(1)

    assert document == DEFAULT_COMPANY_SETTINGS
    document['profile']['name'] = 'Changed'
    assert DEFAULT_COMPANY_SETTINGS['profile']['name'] == 'Acme Corporation'


def test_file_store_replaces_the_document(tmp_path: Path) -> None:
    store = JsonFileSettingsStore(tmp_path / 'settings')

    store.replace(7, {'profile': {'name': 'Globex'}})

    path = tmp_path / 'settings' / 'company-7-settings.json'
    assert json.loads(path.read_text(encoding='utf-8')) == {'profile': {'name': 'Globex'}}
    assert store.get(7) == {'profile': {'name': 'Globex'}}
    assert [item.name for item in path.parent.iterdir()] == ['company-7-settings.json']


@pytest.mark.parametrize('content', ['{not json', '[1, 2, 3]'])
def test_file_store_rejects_corrupt_documents(tmp_path: Path, content: str) -> None:
    store = JsonFileSettingsStore(tmp_path)
    store.path_for(1).write_text(content, encoding='utf-8')

    with pytest.raises(SerializationError):
        store.get(1)


def test_file_store_reports_unserializable_documents(tmp_path: Path) -> None:
    store = JsonFileSettingsStore(tmp_path)

    with pytest.raises(StorageError):
        store.replace(1, {'profile': {'logo': object()}})

    assert not store.path_for(1).exists()
    assert list(tmp_path.iterdir()) == []


def test_database_store_creates_defaults_lazily(db_session: Session, company: Company) -> None:
    store = DatabaseSettingsStore(db_session)
    assert db_session.query(CompanySettingsRecord).count() == 0

    document = store.get(company.id)
    db_session.commit()

    assert document == DEFAULT_COMPANY_SETTINGS
    assert db_session.query(CompanySettingsRecord).count() == 1


def test_database_store_replaces_the_document(db_session: Session, company: Company) -> None:
    store = DatabaseSettingsStore(db_session)
    store.get(company.id)

    store.replace(company.id, {'display': {'compactMode': True}})
    db_session.commit()
    db_session.expire_all()

    assert store.get(company.id) == {'display': {'compactMode': True}}


def test_database_store_wraps_read_failures(db_session: Session, company: Company) -> None:
    CompanySettingsRecord.__table__.drop(bind=db_session.get_bind())

    with pytest.raises(StorageError) as excinfo:
        DatabaseSettingsStore(db_session).get(company.id)

    assert excinfo.value.details['operation'] == 'read'
    assert excinfo.value.status_code == 500


def test_database_store_wraps_write_failures(db_session: Session, company: Company) -> None:
    CompanySettingsRecord.__table__.drop(bind=db_session.get_bind())

    with pytest.raises(StorageError) as excinfo:
        DatabaseSettingsStore(db_session).replace(company.id, {'display': {'compactMode': True}})

    assert excinfo.value.details['operation'] == 'write'
