from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from shop.data.database import Base
from shop.data.models._ids import utcnow


class PostModel(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True)
    user_id = Column("userId", String, ForeignKey("users.id"), nullable=False)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, default=utcnow)

    user = relationship("UserModel")
