from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey

from shop.data.database import Base
from shop.data.models._ids import utcnow


class PaymentModel(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True)
    user_id = Column("userId", String, ForeignKey("users.id"), nullable=False)
    cart_id = Column("cartId", Integer, ForeignKey("carts.id"), nullable=True)

    amount = Column(Float, nullable=False)
    status = Column(String, nullable=False, default="pending")  # pending, paid, failed, refunded
    provider = Column(String, nullable=True)
    reference = Column(String, nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, default=utcnow)
