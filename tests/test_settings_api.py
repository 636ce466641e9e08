from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from company_settings.core.config import settings
from company_settings.db.session import engine
from company_settings.forms.catalog import DEFAULT_COMPANY_SETTINGS, default_company_settings
from company_settings.models.company import Company, CompanySettingsRecord
from tests.conftest import company_headers


def test_health(client: TestClient) -> None:
    response = client.get('/api/v1/health')

    assert response.status_code == 200
    assert response.json() == {
        'status': 'ok',
        'environment': settings.APP_ENV,
        'settingsBackend': 'database',
        'schemas': ['company-settings', 'personal-settings'],
        'operationTypes': 8,
    }


def test_read_settings_returns_defaults(client: TestClient) -> None:
    response = client.get('/api/v1/settings', headers=company_headers(1))

    assert response.status_code == 200
    assert response.json() == DEFAULT_COMPANY_SETTINGS


def test_unknown_company_is_404(client: TestClient) -> None:
    response = client.get('/api/v1/settings', headers=company_headers(999))

    assert response.status_code == 404
    assert response.json() == {'error': 'Company not found: 999'}


def test_malformed_company_header_is_400(client: TestClient) -> None:
    response = client.get('/api/v1/settings', headers={'X-Company-Id': 'acme'})

    assert response.status_code == 400
    assert response.json() == {'error': 'Invalid X-Company-Id header'}


def test_save_requires_allowed_addresses_when_restricted(client: TestClient) -> None:
    document = default_company_settings()
    document['security']['ipRestriction'] = True

    response = client.post('/api/v1/settings', json=document)

    assert response.status_code == 422
    assert response.json() == {
        'error': 'Validation failed',
        'fields': [{'fieldId': 'security.allowedIpAddresses', 'message': 'Allowed IP Addresses is required'}],
    }
    assert client.get('/api/v1/settings').json()['security']['ipRestriction'] is False


def test_save_ignores_blank_addresses_without_restriction(client: TestClient, db_session: Session) -> None:
    document = default_company_settings()
    document['profile']['name'] = 'Initech'
    document['display']['compactMode'] = True

    response = client.post('/api/v1/settings', json=document)

    assert response.status_code == 200
    assert response.json()['display']['compactMode'] is True
    assert client.get('/api/v1/settings').json()['profile']['name'] == 'Initech'

    db_session.expire_all()
    assert db_session.get(Company, 1).name == 'Initech'


def test_save_fills_missing_fields_with_defaults(client: TestClient) -> None:
    response = client.post('/api/v1/settings', json={'profile': {'name': 'Hooli'}, 'custom': {'kept': True}})

    assert response.status_code == 200
    body = response.json()
    assert body['profile']['name'] == 'Hooli'
    assert body['security']['sessionTimeoutMinutes'] == 60
    assert body['custom'] == {'kept': True}


def test_settings_are_per_company(client: TestClient, other_company: Company) -> None:
    document = default_company_settings()
    document['profile']['name'] = 'Globex Corporation'

    saved = client.post('/api/v1/settings', json=document, headers=company_headers(other_company.id))

    assert saved.status_code == 200
    assert client.get('/api/v1/settings', headers=company_headers(1)).json()['profile']['name'] == 'Acme Corporation'
    assert (
        client.get('/api/v1/settings', headers=company_headers(other_company.id)).json()['profile']['name']
        == 'Globex Corporation'
    )


def test_corrupt_settings_file_is_a_storage_failure(
    client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(settings, 'SETTINGS_BACKEND', 'file')
    monkeypatch.setattr(settings, 'SETTINGS_DATA_DIR', str(tmp_path))
    (tmp_path / 'company-1-settings.json').write_text('{broken', encoding='utf-8')

    response = client.get('/api/v1/settings')

    assert response.status_code == 500
    assert response.json() == {'error': 'Failed to fetch company settings'}


def test_missing_settings_table_is_a_storage_failure(client: TestClient) -> None:
    CompanySettingsRecord.__table__.drop(bind=engine)

    read = client.get('/api/v1/settings')
    write = client.post('/api/v1/settings', json=default_company_settings())

    assert read.status_code == 500
    assert read.json() == {'error': 'Failed to fetch company settings'}
    assert write.status_code == 500
    assert write.json() == {'error': 'Failed to update company settings'}


def test_file_backend_round_trip(client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, 'SETTINGS_BACKEND', 'file')
    monkeypatch.setattr(settings, 'SETTINGS_DATA_DIR', str(tmp_path))
    document = default_company_settings()
    document['display']['defaultTheme'] = 'dark'

    assert client.post('/api/v1/settings', json=document).status_code == 200

    assert (tmp_path / 'company-1-settings.json').exists()
    assert client.get('/api/v1/settings').json()['display']['defaultTheme'] == 'dark'


def test_read_schema(client: TestClient) -> None:
    response = client.get('/api/v1/settings/schemas/company-settings')

    assert response.status_code == 200
    body = response.json()
    assert [tab['id'] for tab in body['tabs']] == ['profile', 'notifications', 'security', 'data', 'integrations', 'display']

    personal = client.get('/api/v1/settings/schemas/personal-settings').json()
    assert len(personal['tabs']) == 1
    assert client.get('/api/v1/settings/schemas/nope').status_code == 404


def test_validate_against_schema(client: TestClient) -> None:
    response = client.post(
        '/api/v1/settings/schemas/company-settings/validate',
        json={'security': {'sessionTimeoutMinutes': 2}},
    )

    assert response.status_code == 200
    body = response.json()
    assert body['schemaId'] == 'company-settings'
    assert body['valid'] is False
    assert body['errors'] == [
        {'fieldId': 'security.sessionTimeoutMinutes', 'message': 'Session Timeout (minutes) must be at least 5'}
    ]
    assert body['values']['profile.name'] == 'Acme Corporation'
