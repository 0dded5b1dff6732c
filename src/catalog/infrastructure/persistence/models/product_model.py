"""
Product ORM Model
"""
from uuid import UUID

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.catalog.infrastructure.persistence.models.category_model import CategoryModel
from src.shared.infrastructure.database.base_model import Base


class ProductModel(Base):
    """
    SQLAlchemy model for the products table.

    The category is always loaded alongside the product (selectin).
    """

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    shipping: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    category_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("categories.id"),
        nullable=False,
        index=True,
    )

    # Relationships
    category: Mapped[CategoryModel] = relationship("CategoryModel", lazy="selectin")
