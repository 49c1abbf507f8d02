# shop/api/__init__.py
from contextlib import asynccontextmanager

from fastapi import FastAPI

from shop.api.routers import dbhandler, health, users
from shop.data.init_db import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Shop Gateway",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(dbhandler.router)

    return app
