from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime

from shop.data.database import Base


class CouponModel(Base):
    __tablename__ = "coupons"

    id = Column(Integer, primary_key=True)
    code = Column(String, unique=True, nullable=False)
    discount = Column(Float, nullable=False, default=0)
    active = Column(Boolean, nullable=False, default=True)
    expires_at = Column("expiresAt", DateTime(timezone=True), nullable=True)
