from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..core.enums import Role, SalaryType, UserStatus


@dataclass(frozen=True)
class User:
    """Domain entity: employee/user as seen by the policy engine.

    Plain data object; no database access.
    """

    user_id: int
    name: str
    email: str
    role: Role
    status: UserStatus = UserStatus.ACTIVE
    salary: Optional[Decimal] = None
    salary_type: SalaryType = SalaryType.MONTHLY
    designation: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE


@dataclass(frozen=True)
class Actor:
    """Authenticated caller identity supplied by the session layer."""

    user_id: int
    role: Role

    @property
    def is_privileged(self) -> bool:
        return self.role.is_privileged

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
