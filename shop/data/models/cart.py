#shop/data/models/cart.py
from sqlalchemy import Column, Integer, Float, ForeignKey, String, DateTime
from sqlalchemy.orm import relationship

from shop.data.database import Base
from shop.data.models._ids import utcnow


class CartModel(Base):
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True)
    user_id = Column("userId", String, ForeignKey("users.id"), nullable=False)

    status = Column(String, nullable=False, default="pending")
    # always computed server side, see CartService
    total = Column(Float, nullable=False, default=0)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, default=utcnow)

    products = relationship(
        "CartItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
    )
