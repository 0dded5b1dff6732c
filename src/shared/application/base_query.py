"""
Base Query Contract for CQRS
All queries (read operations) inherit from this
"""
from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class BaseQuery:
    """
    Base class for all queries in the system.

    Queries represent read operations and never modify state.

    Example:
        @dataclass(frozen=True)
        class GetBuyerOrdersQuery(BaseQuery):
            buyer_id: UUID
    """

    requested_by: UUID | None = field(default=None, kw_only=True)
