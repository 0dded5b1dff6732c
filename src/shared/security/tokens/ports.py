from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Union
from uuid import UUID


class TokenIssuerPort(ABC):
    @abstractmethod
    def issue(self, user_id: Union[str, UUID]) -> str: pass

    @abstractmethod
    def decode(self, token: str) -> Dict[str, Any]: pass
