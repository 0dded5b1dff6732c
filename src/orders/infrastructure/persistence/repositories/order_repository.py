"""
Order Repository Implementation
"""
from __future__ import annotations

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.catalog.infrastructure.persistence.models.product_model import ProductModel
from src.catalog.infrastructure.persistence.repositories.product_repository import (
    ProductRepository,
)
from src.identity.infrastructure.persistence.repositories.user_repository import UserRepository
from src.orders.domain.entities.order import Order, OrderStatus
from src.orders.infrastructure.persistence.models.order_model import OrderModel
from src.shared.exceptions import InternalServerError
from src.shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository
from src.shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


class OrderRepository(SQLAlchemyRepository[Order, OrderModel]):
    """
    Order repository implementation.

    Orders come back with their buyer and product rows expanded.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session=session, model_class=OrderModel)
        self._users = UserRepository(session)
        self._products = ProductRepository(session)

    def _to_entity(self, model: OrderModel) -> Order:
        return Order(
            id=model.id,
            buyer_id=model.buyer_id,
            status=model.status,
            buyer=self._users._to_entity(model.buyer) if model.buyer else None,
            products=[self._products._to_entity(p) for p in model.products],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def create(
        self,
        buyer_id: UUID,
        product_ids: Sequence[UUID],
        status: Optional[str] = None,
    ) -> Order:
        result = await self.session.execute(
            select(ProductModel).where(ProductModel.id.in_(list(product_ids)))
        )
        model = OrderModel(
            buyer_id=buyer_id,
            status=status or OrderStatus.NOT_PROCESSED,
            products=list(result.scalars().all()),
        )
        self.session.add(model)
        await self.session.commit()

        logger.info("Order placed", order_id=str(model.id), items=len(model.products))

        order = await self.get_by_id(model.id)
        if order is None:
            raise InternalServerError(f"order {model.id} missing after insert")
        return order
