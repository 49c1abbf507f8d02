# shop/services/media_client.py
import base64
from dataclasses import dataclass
from typing import Union

import cloudinary.uploader

from shop.domain.schemas import Asset
from shop.utils.settings import (
    CLOUDINARY_API_KEY,
    CLOUDINARY_API_SECRET,
    CLOUDINARY_CLOUD_NAME,
)
from shop.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class UploadedFile:
    """A multipart file part, already read into memory."""

    content: bytes
    content_type: str = "application/octet-stream"
    filename: str = ""

    def to_data_uri(self) -> str:
        b64 = base64.b64encode(self.content).decode("ascii")
        return f"data:{self.content_type};base64,{b64}"


Uploadable = Union[UploadedFile, str]


class MediaClient:
    """
    Hosts uploaded images on Cloudinary.
    A plain string (remote URL or data URI) is handed to the host unchanged.
    """

    def __init__(
        self,
        cloud_name: str | None = None,
        api_key: str | None = None,
        api_secret: str | None = None,
    ):
        self.cloud_name = cloud_name or CLOUDINARY_CLOUD_NAME
        self.api_key = api_key or CLOUDINARY_API_KEY
        self.api_secret = api_secret or CLOUDINARY_API_SECRET

    def upload(self, file: Uploadable) -> Asset:
        if isinstance(file, UploadedFile):
            source = file.to_data_uri()
            label = file.filename or file.content_type
        else:
            source = file
            label = "passthrough"

        logger.info(f"MediaClient upload {label} to cloud {self.cloud_name}")
        res = cloudinary.uploader.upload(
            source,
            resource_type="auto",
            cloud_name=self.cloud_name,
            api_key=self.api_key,
            api_secret=self.api_secret,
        )
        return Asset.model_validate(res)
