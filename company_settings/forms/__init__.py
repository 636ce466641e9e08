from company_settings.forms.catalog import COMPANY_SETTINGS_SCHEMA, PERSONAL_SETTINGS_SCHEMA, get_schema
from company_settings.forms.engine import SettingsFormEngine, SubmissionResult
from company_settings.forms.fields import FieldDescriptor, SchemaDefinitionError, SettingsSchema
from company_settings.forms.validator import CompiledSchema, FieldError, compile_fields, compile_schema, get_default_values

__all__ = [
    'COMPANY_SETTINGS_SCHEMA',
    'CompiledSchema',
    'FieldDescriptor',
    'FieldError',
    'PERSONAL_SETTINGS_SCHEMA',
    'SchemaDefinitionError',
    'SettingsFormEngine',
    'SettingsSchema',
    'SubmissionResult',
    'compile_fields',
    'compile_schema',
    'get_default_values',
    'get_schema',
]
