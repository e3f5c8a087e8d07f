# app/api/files.py

import logging
import os

from fastapi import APIRouter, File, Response, UploadFile

from app.config import DOWNLOAD_FILENAME, STATIC_DIR
from app.models.users import UploadOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["files"])


@router.get("/download")
def download() -> Response:
    """
    Send the bundled static/abc.txt as an attachment.

    Any failure opening or reading the file is logged and answered with an
    empty 500.
    """
    try:
        with open(STATIC_DIR / DOWNLOAD_FILENAME, "rb") as f:
            # single read of whatever the file reports as available
            available = os.fstat(f.fileno()).st_size
            body = f.read(available)
    except Exception:
        logger.exception("Failed to read %s", DOWNLOAD_FILENAME)
        return Response(status_code=500)

    return Response(
        content=body,
        media_type="application/octet-stream",
        headers={"Content-Disposition": f"attachment;filename={DOWNLOAD_FILENAME}"},
    )


@router.post("/upload/file", response_model=UploadOut)
async def upload_file(file: UploadFile = File(...)) -> UploadOut:
    logger.info("fileName: %s", file.filename)
    return UploadOut(ok=True)
