from company_settings.services import (
    bootstrap_service,
    company_service,
    operation_service,
    settings_store,
    user_settings_service,
)

__all__ = [
    'bootstrap_service',
    'company_service',
    'operation_service',
    'settings_store',
    'user_settings_service',
]
