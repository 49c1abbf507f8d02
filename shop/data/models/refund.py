from sqlalchemy import Column, Integer, String, Float, Text, DateTime, ForeignKey

from shop.data.database import Base
from shop.data.models._ids import utcnow


class RefundModel(Base):
    __tablename__ = "refunds"

    id = Column(Integer, primary_key=True)
    payment_id = Column("paymentId", Integer, ForeignKey("payments.id"), nullable=False)

    amount = Column(Float, nullable=False)
    reason = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="requested")
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, default=utcnow)
