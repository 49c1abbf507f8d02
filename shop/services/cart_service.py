# shop/services/cart_service.py
from typing import Any, Dict

from sqlalchemy.orm import Session

from shop.domain.schemas import CartIn
from shop.repos.cart_repo import CartRepo
from shop.utils.logging import get_logger
from shop.utils.serialize import to_dict

logger = get_logger(__name__)

DEFAULT_STATUS = "pending"


class CartService:
    """
    Cart creation with a server computed total.

    total = sum(quantity * current price) over lines whose product exists,
    unknown products add nothing but still get their line row. Price lookup and
    insert are two separate statements, a price change in between is accepted.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)

    def price_lines(self, payload: CartIn) -> float:
        prices = self.repo.get_prices(line.product_id for line in payload.products)

        total = 0.0
        for line in payload.products:
            price = prices.get(line.product_id)
            if price is not None:
                total += price * line.quantity
        return total

    def create_cart(self, payload: CartIn) -> Dict[str, Any]:
        total = self.price_lines(payload)

        cart = self.repo.create_cart(
            user_id=payload.user_id,
            total=total,
            status=payload.status or DEFAULT_STATUS,
            lines=[(line.product_id, line.quantity) for line in payload.products],
        )

        logger.info(
            f"Created cart {cart.id} for user {payload.user_id}: "
            f"{len(cart.products)} lines, total {total}"
        )
        return to_dict(cart, include={"products": True})
