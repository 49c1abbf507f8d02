# shop/domain/registry.py
"""
Closed registry of the models reachable through the generic gateway.

Every model name maps to a ModelPolicy describing how the dispatcher treats
it: identifier kind, which upload (if any) feeds which field, how collection
reads are enriched, and which hooks run before persistence.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Union

from shop.data.models import (
    CartItemModel,
    CartModel,
    CategoryModel,
    CouponModel,
    FeaturedProductModel,
    NotificationModel,
    PaymentModel,
    PostModel,
    ProductModel,
    RefundModel,
    ReviewModel,
    ShippingAddressModel,
    StockModel,
    UserModel,
)
from shop.domain.errors import InvalidModelError
from shop.domain.hooks import (
    drop_cart_total,
    hash_password_field,
    normalize_email,
    product_create_defaults,
    product_update_price,
)

Hook = Callable[[Dict[str, Any]], Dict[str, Any]]
Identifier = Union[str, int]


class ModelName(str, Enum):
    CART = "cart"
    CART_ITEM = "cartItem"
    CATEGORY = "category"
    COUPON = "coupon"
    FEATURED_PRODUCT = "featuredProduct"
    NOTIFICATION = "notification"
    PAYMENT = "payment"
    POST = "post"
    PRODUCT = "product"
    REFUND = "refund"
    REVIEW = "review"
    SHIPPING_ADDRESS = "shippingAddress"
    STOCK = "stock"
    USER = "user"


class IdKind(Enum):
    TEXT = "text"
    NUMERIC = "numeric"


class UploadArity(Enum):
    NONE = 0
    SINGLE = 1
    MANY = 2


# public author fields joined onto reviews and posts
AUTHOR_FIELDS = ("id", "email", "name", "avatarUrl")


@dataclass(frozen=True)
class ModelPolicy:
    name: ModelName
    model: type
    id_kind: IdKind = IdKind.NUMERIC
    upload_arity: UploadArity = UploadArity.NONE
    upload_field: Optional[str] = None
    # relationships eagerly loaded and embedded on collection reads
    list_include: Optional[Dict[str, Any]] = None
    # read-by-id returns every row whose field equals the id
    lookup_field: Optional[str] = None
    before_create: Tuple[Hook, ...] = ()
    before_update: Tuple[Hook, ...] = ()
    # create goes through the cart pricing rule instead of a raw insert
    priced_create: bool = False
    hidden_fields: Tuple[str, ...] = ()

    def parse_id(self, raw: Any) -> Optional[Identifier]:
        """
        Returns None when no identifier was given.
        Raises ValueError when a numeric model gets a non-integer id.
        """
        if raw is None:
            return None
        if isinstance(raw, int) and not isinstance(raw, bool):
            return str(raw) if self.id_kind is IdKind.TEXT else raw

        text = str(raw).strip()
        if not text:
            return None
        if self.id_kind is IdKind.TEXT:
            return text
        return int(text)


_POLICIES = (
    ModelPolicy(
        ModelName.CART,
        CartModel,
        before_update=(drop_cart_total,),
        priced_create=True,
    ),
    ModelPolicy(ModelName.CART_ITEM, CartItemModel),
    ModelPolicy(
        ModelName.CATEGORY,
        CategoryModel,
        id_kind=IdKind.TEXT,
        upload_arity=UploadArity.SINGLE,
        upload_field="image",
    ),
    ModelPolicy(ModelName.COUPON, CouponModel),
    ModelPolicy(
        ModelName.FEATURED_PRODUCT,
        FeaturedProductModel,
        list_include={"product": {"category": True, "stock": True, "reviews": True}},
    ),
    ModelPolicy(ModelName.NOTIFICATION, NotificationModel),
    ModelPolicy(ModelName.PAYMENT, PaymentModel),
    ModelPolicy(
        ModelName.POST,
        PostModel,
        list_include={"user": AUTHOR_FIELDS},
    ),
    ModelPolicy(
        ModelName.PRODUCT,
        ProductModel,
        id_kind=IdKind.TEXT,
        upload_arity=UploadArity.MANY,
        upload_field="images",
        before_create=(product_create_defaults,),
        before_update=(product_update_price,),
    ),
    ModelPolicy(ModelName.REFUND, RefundModel),
    ModelPolicy(
        ModelName.REVIEW,
        ReviewModel,
        list_include={"user": AUTHOR_FIELDS},
        lookup_field="contentId",
    ),
    ModelPolicy(ModelName.SHIPPING_ADDRESS, ShippingAddressModel),
    ModelPolicy(ModelName.STOCK, StockModel),
    ModelPolicy(
        ModelName.USER,
        UserModel,
        id_kind=IdKind.TEXT,
        upload_arity=UploadArity.SINGLE,
        upload_field="avatarUrl",
        before_create=(normalize_email, hash_password_field),
        before_update=(normalize_email, hash_password_field),
        hidden_fields=("password",),
    ),
)

REGISTRY: Dict[ModelName, ModelPolicy] = {p.name: p for p in _POLICIES}


def get_policy(name: Optional[str]) -> ModelPolicy:
    try:
        return REGISTRY[ModelName(name)]
    except ValueError:
        raise InvalidModelError() from None
