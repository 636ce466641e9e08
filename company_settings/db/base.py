from company_settings.db.base_class import Base
from company_settings.models.company import Company, CompanySettingsRecord
from company_settings.models.operation import Action, Operation
from company_settings.models.user_settings import UserSettings


__all__ = [
    'Action',
    'Base',
    'Company',
    'CompanySettingsRecord',
    'Operation',
    'UserSettings',
]
