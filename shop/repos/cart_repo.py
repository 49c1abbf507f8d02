# shop/repos/cart_repo.py
from typing import Dict, Iterable, List, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from shop.data.models.cart import CartModel
from shop.data.models.cart_item import CartItemModel
from shop.data.models.product import ProductModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_prices(self, product_ids: Iterable[str]) -> Dict[str, float]:
        ids = list(set(product_ids))
        if not ids:
            return {}
        rows = self.db.execute(
            select(ProductModel.id, ProductModel.price).where(ProductModel.id.in_(ids))
        ).all()
        return {row.id: row.price for row in rows}

    def create_cart(
        self,
        user_id: str,
        total: float,
        status: str,
        lines: List[Tuple[str, int]],
    ) -> CartModel:
        cart = CartModel(
            user_id=user_id,
            total=total,
            status=status,
            products=[
                CartItemModel(product_id=product_id, quantity=quantity)
                for product_id, quantity in lines
            ],
        )
        self.db.add(cart)
        self.db.commit()
        return self.get_cart(cart.id)

    def get_cart(self, cart_id: int) -> CartModel | None:
        return self.db.execute(
            select(CartModel)
            .where(CartModel.id == cart_id)
            .options(selectinload(CartModel.products))
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()

    def rollback(self):
        self.db.rollback()
