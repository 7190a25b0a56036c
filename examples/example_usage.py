"""Example: drive the services directly, without Flask.

Controllers stay thin; the attendance and payroll rules live in the services.
"""

import importlib
from datetime import date

from dotenv import load_dotenv

from worksync.config import get_settings_module
from worksync.container import build_container
from worksync.core.enums import Role
from worksync.users.model import Actor


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    admin = Actor(user_id=1, role=Role.ADMIN)
    today = date.today()

    print(container.settings_provider.get_settings().to_dict())
    print(container.report_service.summary().to_dict())
    print(container.report_service.monthly_totals(2, today.month, today.year, actor=admin).to_dict())

    outcome = container.payroll_service.generate_salary(2, today.month, today.year)
    print("created" if outcome.created else "existing", outcome.record.to_dict())


if __name__ == "__main__":
    main()
