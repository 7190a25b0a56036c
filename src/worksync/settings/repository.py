from __future__ import annotations

from typing import Optional, Protocol

from .model import CompanySettings


class SettingsRepository(Protocol):
    def get(self) -> Optional[CompanySettings]:
        raise NotImplementedError

    def create(self, settings: CompanySettings) -> None:
        """Insert the singleton; raises DuplicateRecordError if it exists."""

        raise NotImplementedError

    def save(self, settings: CompanySettings) -> None:
        raise NotImplementedError
