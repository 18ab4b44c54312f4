# artisan_hub/api/v1/routers/images.py

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from starlette.concurrency import run_in_threadpool
from typing import List, Optional
import time

from artisan_hub.core.config import Settings, get_settings
from artisan_hub.core.errors import upstream_failure
from artisan_hub.domain.models.images import IncomingImage
from artisan_hub.domain.services.image_svc import ImageRejected, process_batch, validate_batch

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/images", tags=["images"])


async def _read_uploads(files: List[UploadFile], max_bytes: int) -> List[IncomingImage]:
    out: List[IncomingImage] = []
    for f in files:
        # read one byte past the limit so oversize files are detected without buffering them whole
        data = await f.read(max_bytes + 1)
        out.append(IncomingImage(
            filename=f.filename or "",
            content_type=f.content_type or "",
            data=data,
        ))
    return out


@router.post("/upload")
async def upload_images(
    images: Optional[List[UploadFile]] = File(None, description="Up to 10 images, 5MB each"),
    settings: Settings = Depends(get_settings),
):
    """
    Validate the whole batch first (nothing is written if any file is refused),
    then store each original and an optimized JPEG copy.
    """
    files = images or []
    logger.info(f"Request: upload_images files={len(files)}")
    start = time.perf_counter()

    if len(files) > settings.upload_max_files:
        raise HTTPException(
            status_code=400,
            detail=f"Too many files: at most {settings.upload_max_files} images per upload",
        )

    incoming = await _read_uploads(files, settings.upload_max_bytes)
    try:
        validate_batch(incoming, max_files=settings.upload_max_files, max_bytes=settings.upload_max_bytes)
    except ImageRejected as e:
        logger.info(f"Rejected upload: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    try:
        processed = await run_in_threadpool(
            process_batch,
            incoming,
            settings.UPLOAD_DIR,
            max_size=(settings.image_max_width, settings.image_max_height),
            quality=settings.image_quality,
        )
    except Exception as e:
        logger.error(f"Image upload error: {e}")
        raise upstream_failure("Failed to upload images", e)

    logger.info(f"Response: upload_images count={len(processed)} time_ms={(time.perf_counter() - start) * 1000:.1f}")
    return {
        "success": True,
        "message": f"{len(processed)} images uploaded successfully",
        "images": [p.model_dump(mode="json", by_alias=True) for p in processed],
    }
