# shop/domain/schemas.py
import json
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class CartLineIn(BaseModel):
    """Single cart line as submitted by the client."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="productId", min_length=1)
    quantity: int

    @field_validator("product_id", mode="before")
    @classmethod
    def _stringify_id(cls, v):
        # product ids are textual, JSON clients sometimes send numbers
        return str(v) if isinstance(v, int) else v


class CartIn(BaseModel):
    """Cart creation payload. Any client supplied total is ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_id: str = Field(..., alias="userId", min_length=1)
    products: List[CartLineIn] = Field(default_factory=list)
    status: Optional[str] = None

    @field_validator("products", mode="before")
    @classmethod
    def _decode_products(cls, v):
        # form posts carry the line list as a JSON string
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return json.loads(v)
        return v


class Asset(BaseModel):
    """What the media host hands back for an upload."""

    url: str
    secure_url: Optional[str] = None
    public_id: Optional[str] = None
    resource_type: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class UserCreate(BaseModel):
    """Schema for registering a user with credentials."""

    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)
    name: Optional[str] = Field(None, max_length=200)


class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserRead(BaseModel):
    """Public user profile, never carries the password digest."""

    id: str
    email: str
    name: Optional[str] = None
    username: Optional[str] = None
    contact: Optional[str] = None
    role: str
    avatarUrl: Optional[str] = Field(None, validation_alias="avatar_url")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class HealthOut(BaseModel):
    status: str
