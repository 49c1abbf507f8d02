from sqlalchemy import Column, String, DateTime

from shop.data.database import Base
from shop.data.models._ids import new_text_id, utcnow


class UserModel(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=new_text_id)
    email = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=True)
    username = Column(String, nullable=True)
    # bcrypt digest only, see shop.utils.security
    password = Column(String, nullable=True)
    contact = Column(String, nullable=True)
    role = Column(String, nullable=False, default="user")
    avatar_url = Column("avatarUrl", String, nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, default=utcnow)
