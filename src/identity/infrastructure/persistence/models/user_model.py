"""
User ORM Model
Maps to the users table
"""
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.infrastructure.database.base_model import Base


class UserModel(Base):
    """
    SQLAlchemy model for the users table.

    Email uniqueness is enforced here, by the database, so two concurrent
    registrations for one email cannot both succeed.
    """

    __tablename__ = "users"

    # Core Fields
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(String(255), nullable=False)

    # 0 = buyer, anything else privileged
    role: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
