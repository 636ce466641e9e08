#!/usr/bin/env python3
import argparse

from company_settings.db.session import SessionLocal
from company_settings.services import bootstrap_service, company_service, operation_service


def main() -> int:
    parser = argparse.ArgumentParser(description='Seed default operations and actions for a company.')
    parser.add_argument('--company-id', type=int, default=None, help='Defaults to DEFAULT_COMPANY_ID.')
    args = parser.parse_args()

    db = SessionLocal()
    try:
        if args.company_id is None:
            company = bootstrap_service.ensure_default_company(db)
        else:
            company = company_service.get_company(db, args.company_id)
        operations = operation_service.get_or_initialize_operations(db, company_id=company.id)
        db.commit()
    finally:
        db.close()

    actions = sum(len(operation.actions) for operation in operations)
    print(f'Company {company.id} has {len(operations)} operations and {actions} actions.')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
