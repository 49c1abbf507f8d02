from sqlalchemy import Column, Integer, ForeignKey, String
from sqlalchemy.orm import relationship

from shop.data.database import Base


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    cart_id = Column("cartId", Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False)
    # no FK: a line may reference a product that no longer exists
    product_id = Column("productId", String, nullable=False)

    quantity = Column(Integer, nullable=False, default=1)

    cart = relationship("CartModel", back_populates="products")
