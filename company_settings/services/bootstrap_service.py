import logging

from sqlalchemy.orm import Session

from company_settings.core.config import settings
from company_settings.forms.catalog import DEFAULT_COMPANY_SETTINGS
from company_settings.models.company import Company


logger = logging.getLogger(__name__)


def ensure_default_company(db: Session) -> Company:
    """Make sure the company used by header-less requests exists."""
    company = db.get(Company, settings.DEFAULT_COMPANY_ID)
    if company:
        return company

    profile = DEFAULT_COMPANY_SETTINGS['profile']
    company = Company(
        id=settings.DEFAULT_COMPANY_ID,
        name=settings.DEFAULT_COMPANY_NAME,
        description=profile['description'],
        industry=profile['industry'],
        founded_year=profile['foundedYear'],
        website=profile['website'],
        company_size=profile['companySize'],
        primary_color=profile['primaryColor'],
        secondary_color=profile['secondaryColor'],
    )
    db.add(company)
    db.flush()
    logger.info('Created default company %s (%s)', company.id, company.name)
    return company
