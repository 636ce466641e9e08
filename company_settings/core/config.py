from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


SETTINGS_BACKENDS = ('database', 'file')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='forbid',
    )

    DATABASE_URL: str
    APP_ENV: str = 'development'
    CORS_ORIGINS: str = 'http://localhost:3000'
    LOG_LEVEL: str = 'INFO'

    # Company used when a request carries no X-Company-Id header (non-production only).
    DEFAULT_COMPANY_ID: int = 1
    DEFAULT_COMPANY_NAME: str = 'Acme Corporation'

    SETTINGS_BACKEND: str = 'database'
    SETTINGS_DATA_DIR: str = 'data'

    @field_validator('DATABASE_URL')
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        if value.startswith('postgresql://'):
            # psycopg 3 is the only PostgreSQL driver shipped with the project.
            return 'postgresql+psycopg://' + value[len('postgresql://'):]
        if not value.startswith(('postgresql', 'sqlite')):
            raise ValueError('DATABASE_URL must point to PostgreSQL or SQLite')
        return value

    @field_validator('SETTINGS_BACKEND')
    @classmethod
    def validate_settings_backend(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in SETTINGS_BACKENDS:
            raise ValueError(f'SETTINGS_BACKEND must be one of {", ".join(SETTINGS_BACKENDS)}')
        return normalized

    @field_validator('LOG_LEVEL')
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or 'INFO'

    @property
    def cors_origins(self) -> list[str]:
        return [item.strip() for item in self.CORS_ORIGINS.split(',') if item.strip()]

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == 'production'


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
