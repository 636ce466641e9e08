from company_settings.models.company import Company, CompanySettingsRecord
from company_settings.models.operation import Action, Operation
from company_settings.models.user_settings import UserSettings

__all__ = [
    'Action',
    'Company',
    'CompanySettingsRecord',
    'Operation',
    'UserSettings',
]
