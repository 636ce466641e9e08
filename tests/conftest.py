import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

os.environ['DATABASE_URL'] = os.getenv('TEST_DATABASE_URL', 'sqlite+pysqlite:///:memory:')
os.environ.setdefault('APP_ENV', 'test')
os.environ.setdefault('CORS_ORIGINS', 'http://localhost:3001')
os.environ.setdefault('DEFAULT_COMPANY_ID', '1')
os.environ.setdefault('SETTINGS_BACKEND', 'database')
os.environ.setdefault('LOG_LEVEL', 'WARNING')

from company_settings.db.base import Base
from company_settings.db.session import SessionLocal, engine, get_db
from company_settings.main import app
from company_settings.models.company import Company


@pytest.fixture(autouse=True)
def setup_database() -> Generator[None, None, None]:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    yield

    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session() -> Generator[Session, None, None]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def company(db_session: Session) -> Company:
    row = Company(id=1, name='Acme Corporation')
    db_session.add(row)
    db_session.commit()
    return row


@pytest.fixture()
def other_company(db_session: Session) -> Company:
    row = Company(id=2, name='Globex')
    db_session.add(row)
    db_session.commit()
    return row


@pytest.fixture()
def client(db_session: Session) -> Generator[TestClient, None, None]:
    def _override_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        except Exception:
            db_session.rollback()
            raise

    app.dependency_overrides[get_db] = _override_db

    # Entering the client runs the lifespan, which creates the default company.
    with TestClient(app) as api_client:
        yield api_client

    app.dependency_overrides.clear()


def company_headers(company_id: int) -> dict[str, str]:
    return {'X-Company-Id': str(company_id)}
