from sqlalchemy import Column, String, Text, Float, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship

from shop.data.database import Base
from shop.data.models._ids import new_text_id, utcnow


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(String, primary_key=True, default=new_text_id)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Float, nullable=False, default=0)
    images = Column(JSON, nullable=False, default=list)
    category_id = Column("categoryId", String, ForeignKey("categories.id"), nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, default=utcnow)

    category = relationship("CategoryModel", back_populates="products")
    stock = relationship("StockModel", back_populates="product", cascade="all, delete-orphan")
    reviews = relationship("ReviewModel", back_populates="product")
