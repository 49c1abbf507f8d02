# shop/api/forms.py
from typing import Any, Dict, List, Tuple

from fastapi import Request
from starlette.datastructures import UploadFile

from shop.services.media_client import Uploadable, UploadedFile

FILE_FIELD = "file"


async def read_body(request: Request) -> Tuple[Dict[str, Any], List[Uploadable]]:
    """
    Splits a request body into plain fields and uploads.

    Multipart and urlencoded forms are the normal case; every ``file`` part is
    an upload, all other text keys are fields (last value wins). A JSON object body
    is accepted too, its ``file`` key may hold a URL or a list of URLs.
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}
        raw_files = payload.pop(FILE_FIELD, None) or []
        if isinstance(raw_files, str):
            raw_files = [raw_files]
        return payload, [f for f in raw_files if isinstance(f, str) and f]

    form = await request.form()
    fields: Dict[str, Any] = {}
    files: List[Uploadable] = []

    for key, value in form.multi_items():
        if key != FILE_FIELD:
            # only the file key carries uploads, stray file parts are ignored
            if isinstance(value, str):
                fields[key] = value
            continue

        if isinstance(value, UploadFile):
            content = await value.read()
            # browsers send an empty part when no file was picked
            if not content and not value.filename:
                continue
            files.append(
                UploadedFile(
                    content=content,
                    content_type=value.content_type or "application/octet-stream",
                    filename=value.filename or "",
                )
            )
        elif value:
            files.append(value)

    return fields, files
