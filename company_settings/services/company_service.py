from typing import Any

from sqlalchemy.orm import Session

from company_settings.core.exceptions import NotFoundError
from company_settings.models.company import Company


# Settings document profile key -> Company column.
PROFILE_COLUMNS = {
    'name': 'name',
    'description': 'description',
    'industry': 'industry',
    'foundedYear': 'founded_year',
    'website': 'website',
    'companySize': 'company_size',
    'primaryColor': 'primary_color',
    'secondaryColor': 'secondary_color',
    'logo': 'logo',
}


def get_company(db: Session, company_id: int) -> Company:
    company = db.get(Company, company_id)
    if not company:
        raise NotFoundError('Company', company_id)
    return company


def sync_company_profile(db: Session, company: Company, profile: dict[str, Any] | None) -> Company:
    """Mirror the document's profile section onto the company row."""
    if not profile:
        return company
    for key, column in PROFILE_COLUMNS.items():
        if key not in profile:
            continue
        value = profile[key]
        if column == 'name' and not value:
            continue
        setattr(company, column, value if value is None else str(value))
    db.flush()
    return company
