from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey

from shop.data.database import Base
from shop.data.models._ids import utcnow


class NotificationModel(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True)
    user_id = Column("userId", String, ForeignKey("users.id"), nullable=False)
    message = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, default=utcnow)
