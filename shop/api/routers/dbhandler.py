# shop/api/routers/dbhandler.py
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from shop.api.forms import read_body
from shop.data.database import get_db
from shop.domain.errors import GatewayError
from shop.domain.registry import ModelPolicy, get_policy
from shop.services.gateway_service import GatewayService
from shop.services.media_client import MediaClient

router = APIRouter(prefix="/api/dbhandler", tags=["dbhandler"])


def get_media_client() -> MediaClient:
    return MediaClient()


def get_service(db: Session, media_client: MediaClient | None = None):
    return GatewayService(db=db, media_client=media_client)


def resolve_model(model: str | None) -> ModelPolicy:
    # always the first check, before id or body parsing
    try:
        return get_policy(model)
    except GatewayError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("")
def read_items(
    model: str | None = Query(None),
    id: str | None = Query(None),
    db: Session = Depends(get_db),
):
    policy = resolve_model(model)
    svc = get_service(db)
    try:
        return svc.read(policy, id)
    except GatewayError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("")
async def create_item(
    request: Request,
    model: str | None = Query(None),
    db: Session = Depends(get_db),
    media_client: MediaClient = Depends(get_media_client),
):
    policy = resolve_model(model)
    fields, files = await read_body(request)

    svc = get_service(db, media_client)
    try:
        return await run_in_threadpool(svc.create, policy, fields, files)
    except GatewayError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("")
async def update_item(
    request: Request,
    model: str | None = Query(None),
    id: str | None = Query(None),
    db: Session = Depends(get_db),
    media_client: MediaClient = Depends(get_media_client),
):
    """
    The id comes from the body; the query string ``id`` is only a fallback.
    """
    policy = resolve_model(model)
    fields, files = await read_body(request)

    svc = get_service(db, media_client)
    try:
        return await run_in_threadpool(svc.update, policy, fields, files, id)
    except GatewayError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("")
def delete_item(
    model: str | None = Query(None),
    id: str | None = Query(None),
    db: Session = Depends(get_db),
):
    policy = resolve_model(model)
    svc = get_service(db)
    try:
        return svc.delete(policy, id)
    except GatewayError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
