from sqlalchemy import Column, Integer, String, ForeignKey

from shop.data.database import Base


class ShippingAddressModel(Base):
    __tablename__ = "shipping_addresses"

    id = Column(Integer, primary_key=True)
    user_id = Column("userId", String, ForeignKey("users.id"), nullable=False)

    full_name = Column("fullName", String, nullable=False)
    line1 = Column(String, nullable=False)
    line2 = Column(String, nullable=True)
    city = Column(String, nullable=False)
    state = Column(String, nullable=True)
    postal_code = Column("postalCode", String, nullable=True)
    country = Column(String, nullable=False)
    phone = Column(String, nullable=True)
