from typing import Any

from pydantic import Field

from company_settings.schemas.common import CamelSchema


class SchemaValidationResult(CamelSchema):
    schema_id: str
    valid: bool
    errors: list[dict[str, str]] = Field(default_factory=list)
    values: dict[str, Any] = Field(default_factory=dict)
