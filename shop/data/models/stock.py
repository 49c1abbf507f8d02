from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from shop.data.database import Base
from shop.data.models._ids import utcnow


class StockModel(Base):
    __tablename__ = "stock"

    id = Column(Integer, primary_key=True)
    product_id = Column("productId", String, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    location = Column(String, nullable=True)
    updated_at = Column("updatedAt", DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    product = relationship("ProductModel", back_populates="stock")
