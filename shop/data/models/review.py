from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from shop.data.database import Base
from shop.data.models._ids import utcnow


class ReviewModel(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True)
    user_id = Column("userId", String, ForeignKey("users.id"), nullable=False)
    product_id = Column("productId", String, ForeignKey("products.id"), nullable=True)
    # id of the reviewed post or page, not constrained
    content_id = Column("contentId", Integer, nullable=True, index=True)
    rating = Column(Integer, nullable=False, default=5)
    comment = Column(Text, nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, default=utcnow)

    user = relationship("UserModel")
    product = relationship("ProductModel", back_populates="reviews")
