from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from shop.data.database import Base
from shop.data.models._ids import utcnow


class FeaturedProductModel(Base):
    __tablename__ = "featured_products"

    id = Column(Integer, primary_key=True)
    product_id = Column("productId", String, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, default=utcnow)

    product = relationship("ProductModel")
