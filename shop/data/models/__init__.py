# every model is imported here so Base.metadata knows all tables before create_all

from shop.data.models.user import UserModel
from shop.data.models.category import CategoryModel
from shop.data.models.product import ProductModel
from shop.data.models.stock import StockModel
from shop.data.models.review import ReviewModel
from shop.data.models.post import PostModel
from shop.data.models.featured_product import FeaturedProductModel
from shop.data.models.cart import CartModel
from shop.data.models.cart_item import CartItemModel
from shop.data.models.coupon import CouponModel
from shop.data.models.notification import NotificationModel
from shop.data.models.payment import PaymentModel
from shop.data.models.refund import RefundModel
from shop.data.models.shipping_address import ShippingAddressModel

__all__ = [
    "UserModel",
    "CategoryModel",
    "ProductModel",
    "StockModel",
    "ReviewModel",
    "PostModel",
    "FeaturedProductModel",
    "CartModel",
    "CartItemModel",
    "CouponModel",
    "NotificationModel",
    "PaymentModel",
    "RefundModel",
    "ShippingAddressModel",
]
