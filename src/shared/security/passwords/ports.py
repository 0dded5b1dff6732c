from __future__ import annotations
from abc import ABC, abstractmethod


class PasswordHasherPort(ABC):
    """Credential codec used by the identity workflows."""

    @abstractmethod
    def hash_password(self, plain: str) -> str:
        pass

    @abstractmethod
    def compare_password(self, plain: str, hashed: str) -> bool:
        pass
