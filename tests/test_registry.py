import pytest

from shop.domain.errors import InvalidModelError
from shop.domain.registry import REGISTRY, IdKind, ModelName, UploadArity, get_policy

ALL_MODELS = [
    "cart", "cartItem", "category", "coupon", "featuredProduct", "notification", "payment",
    "post", "product", "refund", "review", "shippingAddress", "stock", "user",
]


def test_registry_is_closed_set_of_fourteen():
    assert sorted(m.value for m in REGISTRY) == sorted(ALL_MODELS)


@pytest.mark.parametrize("name", ALL_MODELS)
def test_every_model_resolves(name):
    assert get_policy(name).name == ModelName(name)


@pytest.mark.parametrize("name", [None, "", "order", "Product", "users"])
def test_unknown_model_is_rejected(name):
    with pytest.raises(InvalidModelError):
        get_policy(name)


@pytest.mark.parametrize("name", ["user", "category", "product"])
def test_textual_ids_are_kept_as_strings(name):
    policy = get_policy(name)
    assert policy.id_kind is IdKind.TEXT
    assert policy.parse_id("42") == "42"
    assert policy.parse_id("abc-def") == "abc-def"


def test_numeric_ids_are_parsed_as_integers():
    policy = get_policy("coupon")
    assert policy.parse_id("42") == 42
    assert policy.parse_id(" 7 ") == 7
    with pytest.raises(ValueError):
        policy.parse_id("abc")
    with pytest.raises(ValueError):
        policy.parse_id("1.5")


def test_blank_id_means_no_id():
    assert get_policy("coupon").parse_id(None) is None
    assert get_policy("coupon").parse_id("") is None
    assert get_policy("user").parse_id("  ") is None


def test_upload_policies():
    assert get_policy("product").upload_arity is UploadArity.MANY
    assert get_policy("product").upload_field == "images"
    assert get_policy("user").upload_field == "avatarUrl"
    assert get_policy("category").upload_field == "image"
    assert get_policy("cart").upload_arity is UploadArity.NONE
