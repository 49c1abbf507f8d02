from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shop.data.database import get_db
from shop.domain.schemas import LoginIn, UserCreate, UserRead
from shop.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", response_model=UserRead)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.register(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/login", response_model=UserRead)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.authenticate(payload)
    except PermissionError as e:
        raise HTTPException(status_code=401, detail=str(e))
