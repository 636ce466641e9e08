from typing import Any


class SettingsAppError(Exception):
    """Base error for the settings API; carries the HTTP status it maps to."""

    code = 'SETTINGS_ERROR'
    status_code = 400

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(SettingsAppError):
    code = 'VALIDATION_ERROR'
    status_code = 422

    def __init__(self, errors: list[Any], message: str = 'Validation failed') -> None:
        self.errors = list(errors)
        super().__init__(message)


class NotFoundError(SettingsAppError):
    code = 'NOT_FOUND'
    status_code = 404

    def __init__(self, resource: str, resource_id: Any = None) -> None:
        message = f'{resource} not found'
        if resource_id is not None:
            message += f': {resource_id}'
        super().__init__(message, details={'resource': resource, 'resource_id': resource_id})


class ConflictError(SettingsAppError):
    code = 'CONFLICT'
    status_code = 409


class StorageError(SettingsAppError):
    """Reading or writing persisted settings failed."""

    code = 'STORAGE_ERROR'
    status_code = 500

    def __init__(self, operation: str, reason: str | None = None) -> None:
        message = f'Settings storage {operation} failed'
        if reason:
            message += f': {reason}'
        super().__init__(message, details={'operation': operation})


class SerializationError(StorageError):
    """A persisted settings document exists but cannot be decoded."""

    code = 'SERIALIZATION_ERROR'

    def __init__(self, location: str, reason: str | None = None) -> None:
        super().__init__('read', reason)
        self.message = f'Settings document at {location} is corrupt'
        if reason:
            self.message += f': {reason}'
        self.details['location'] = location
