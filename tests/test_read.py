from shop.data.models import (
    CouponModel,
    FeaturedProductModel,
    PostModel,
    ReviewModel,
    StockModel,
)

URL = "/api/dbhandler"


def test_missing_or_unknown_model_is_400(client):
    assert client.get(URL).status_code == 400
    resp = client.get(URL, params={"model": "order", "id": "1"})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Invalid model"}


def test_list_returns_whole_collection(client, catalog):
    resp = client.get(URL, params={"model": "product"})
    assert resp.status_code == 200
    assert {p["id"] for p in resp.json()} == {"prod-a", "prod-b"}
    assert resp.json()[0]["categoryId"] == "cat-1"


def test_read_by_text_id(client, catalog):
    resp = client.get(URL, params={"model": "product", "id": "prod-b"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Zinc"
    assert resp.json()["price"] == 5.0


def test_read_by_text_id_not_found(client, catalog):
    resp = client.get(URL, params={"model": "product", "id": "123"})
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Document not found"}


def test_read_by_numeric_id(client, db):
    db.add(CouponModel(code="SAVE10", discount=10))
    db.commit()
    resp = client.get(URL, params={"model": "coupon", "id": "1"})
    assert resp.status_code == 200
    assert resp.json()["code"] == "SAVE10"


def test_non_numeric_id_for_numeric_model_finds_nothing(client, db):
    db.add(CouponModel(code="SAVE10", discount=10))
    db.commit()
    resp = client.get(URL, params={"model": "coupon", "id": "abc"})
    assert resp.status_code == 404


def test_user_reads_never_expose_password(client, user):
    one = client.get(URL, params={"model": "user", "id": "user-1"}).json()
    assert one["email"] == "ada@example.com"
    assert "password" not in one
    for row in client.get(URL, params={"model": "user"}).json():
        assert "password" not in row


def test_featured_products_are_joined_three_levels(client, db, catalog):
    db.add(FeaturedProductModel(product_id="prod-a"))
    db.add(FeaturedProductModel(product_id="prod-b"))
    db.add(StockModel(product_id="prod-b", quantity=12))
    db.commit()

    resp = client.get(URL, params={"model": "featuredProduct"})
    assert resp.status_code == 200
    items = {i["productId"]: i for i in resp.json()}

    a = items["prod-a"]["product"]
    assert a["name"] == "Vitamin C"
    assert a["category"]["name"] == "Vitamins"
    assert a["stock"] == []
    assert a["reviews"] == []

    b = items["prod-b"]["product"]
    assert [s["quantity"] for s in b["stock"]] == [12]


def test_review_and_post_lists_carry_public_author_only(client, db, user, catalog):
    db.add(ReviewModel(user_id="user-1", product_id="prod-a", content_id=7, rating=4))
    db.add(PostModel(user_id="user-1", title="Hello"))
    db.commit()

    for model in ("review", "post"):
        rows = client.get(URL, params={"model": model}).json()
        assert len(rows) == 1
        assert rows[0]["user"] == {
            "id": "user-1",
            "email": "ada@example.com",
            "name": "Ada",
            "avatarUrl": "https://media.test/ada.png",
        }


def test_review_id_is_a_content_id(client, db, user):
    db.add_all([
        ReviewModel(user_id="user-1", content_id=7, rating=5),
        ReviewModel(user_id="user-1", content_id=7, rating=3),
        ReviewModel(user_id="user-1", content_id=8, rating=1),
    ])
    db.commit()

    resp = client.get(URL, params={"model": "review", "id": "7"})
    assert resp.status_code == 200
    assert sorted(r["rating"] for r in resp.json()) == [3, 5]

    resp = client.get(URL, params={"model": "review", "id": "99"})
    assert resp.status_code == 200
    assert resp.json() == []
