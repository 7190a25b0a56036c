from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Services depend on this interface, never on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def list_by_role(self, role: Role, *, active_only: bool = False) -> Sequence[User]:
        raise NotImplementedError

    def count_by_role(self, role: Role, *, active_only: bool = False) -> int:
        raise NotImplementedError
