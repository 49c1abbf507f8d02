import os

# must be set before shop.* is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SALT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shop.api import create_app
from shop.api.routers.dbhandler import get_media_client
from shop.data.database import Base, get_db, make_engine
from shop.data.models import CategoryModel, ProductModel, UserModel
from shop.domain.schemas import Asset
from shop.services.media_client import UploadedFile
from shop.utils.security import hash_password


class StubMediaClient:
    """Returns a deterministic URL per upload and remembers what it got."""

    def __init__(self):
        self.uploads = []

    def upload(self, file):
        self.uploads.append(file)
        name = file.filename if isinstance(file, UploadedFile) else "remote"
        return Asset(url=f"https://media.test/{len(self.uploads)}/{name}")


@pytest.fixture()
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    import shop.data.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def media():
    return StubMediaClient()


@pytest.fixture()
def app(session_factory, media):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_media_client] = lambda: media
    return app


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def user(db):
    u = UserModel(
        id="user-1",
        email="ada@example.com",
        name="Ada",
        password=hash_password("s3cret"),
        avatar_url="https://media.test/ada.png",
    )
    db.add(u)
    db.commit()
    return u


@pytest.fixture()
def catalog(db):
    cat = CategoryModel(id="cat-1", name="Vitamins")
    a = ProductModel(id="prod-a", name="Vitamin C", price=10.0, category_id="cat-1", images=[])
    b = ProductModel(id="prod-b", name="Zinc", price=5.0, category_id="cat-1", images=[])
    db.add_all([cat, a, b])
    db.commit()
    return {"category": cat, "a": a, "b": b}
