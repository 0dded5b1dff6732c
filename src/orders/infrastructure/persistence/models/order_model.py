"""
Order ORM Model
Maps to the orders table and its order_products line items
"""
from uuid import UUID

from sqlalchemy import Column, ForeignKey, String, Table, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.catalog.infrastructure.persistence.models.product_model import ProductModel
from src.identity.infrastructure.persistence.models.user_model import UserModel
from src.shared.infrastructure.database.base_model import Base

order_products = Table(
    "order_products",
    Base.metadata,
    Column("order_id", Uuid(as_uuid=True), ForeignKey("orders.id", ondelete="CASCADE"), primary_key=True),
    Column("product_id", Uuid(as_uuid=True), ForeignKey("products.id"), primary_key=True),
)


class OrderModel(Base):
    """
    SQLAlchemy model for the orders table.

    Buyer and products are loaded with the order (selectin).
    """

    __tablename__ = "orders"

    buyer_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="Not Processed",
        server_default="Not Processed",
    )

    # Relationships
    buyer: Mapped[UserModel] = relationship("UserModel", lazy="selectin")
    products: Mapped[list[ProductModel]] = relationship(
        "ProductModel",
        secondary=order_products,
        lazy="selectin",
    )
