# shop/domain/hooks.py
"""Per-model payload hooks run before create/update persistence."""
from typing import Any, Dict

from shop.utils.security import hash_password


def parse_price(value: Any) -> float:
    if value is None or value == "":
        return 0.0
    try:
        price = float(value)
    except (TypeError, ValueError):
        return 0.0
    # NaN and infinities are not prices
    if price != price or price in (float("inf"), float("-inf")):
        return 0.0
    return price


def hash_password_field(data: Dict[str, Any]) -> Dict[str, Any]:
    if data.get("password"):
        data["password"] = hash_password(str(data["password"]))
    else:
        # an empty form field must not wipe the stored digest
        data.pop("password", None)
    return data


def clean_email(email: str) -> str:
    return email.strip().lower()


def normalize_email(data: Dict[str, Any]) -> Dict[str, Any]:
    if isinstance(data.get("email"), str):
        data["email"] = clean_email(data["email"])
    return data


def drop_cart_total(data: Dict[str, Any]) -> Dict[str, Any]:
    # the total is only ever computed by CartService
    data.pop("total", None)
    return data


def product_create_defaults(data: Dict[str, Any]) -> Dict[str, Any]:
    data["name"] = str(data.get("name") or "").strip() or "Unnamed Product"
    data["description"] = str(data.get("description") or "")
    data["price"] = parse_price(data.get("price"))
    data["categoryId"] = str(data.get("categoryId") or "") or None
    data.setdefault("images", [])
    return data


def product_update_price(data: Dict[str, Any]) -> Dict[str, Any]:
    if "price" in data:
        data["price"] = parse_price(data["price"])
    return data
