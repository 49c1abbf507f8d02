from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship

from shop.data.database import Base
from shop.data.models._ids import new_text_id, utcnow


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(String, primary_key=True, default=new_text_id)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    image = Column(String, nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, default=utcnow)

    products = relationship("ProductModel", back_populates="category")
