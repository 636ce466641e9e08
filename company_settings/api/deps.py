from dataclasses import dataclass

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from company_settings.core.config import settings
from company_settings.db.session import get_db
from company_settings.models.company import Company
from company_settings.services.company_service import get_company


@dataclass(frozen=True)
class CompanyContext:
    company: Company

    @property
    def company_id(self) -> int:
        return self.company.id


def get_company_context(
    db: Session = Depends(get_db),
    x_company_id: str | None = Header(default=None, alias='X-Company-Id'),
) -> CompanyContext:
    raw = (x_company_id or '').strip()
    if raw:
        try:
            company_id = int(raw)
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Invalid X-Company-Id header') from exc
    elif not settings.is_production:
        # No auth layer: local/dev requests act on the default company.
        company_id = settings.DEFAULT_COMPANY_ID
    else:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Missing X-Company-Id header')

    return CompanyContext(company=get_company(db, company_id))
