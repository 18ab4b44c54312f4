# artisan_hub/domain/services/image_svc.py

from __future__ import annotations
from datetime import datetime, timezone
from io import BytesIO
from pathlib import Path
from typing import List, Sequence, Tuple
import uuid
import warnings
import logging

from PIL import Image, ImageOps, UnidentifiedImageError

from artisan_hub.domain.models.images import IncomingImage, ProcessedImage

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif", ".webp"}
ALLOWED_MIME_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}

OPTIMIZED_PREFIX = "optimized_"
PUBLIC_PREFIX = "/uploads"


class ImageRejected(ValueError):
    """Upload refused before anything touched the disk."""


def _unique_name(suffix: str) -> str:
    return f"{uuid.uuid4().hex}{suffix}"


def validate_batch(images: Sequence[IncomingImage], *, max_files: int, max_bytes: int) -> None:
    """
    Check count, size, extension, MIME type and decodability of every file.
    Raises ImageRejected on the first problem; the whole batch is refused.
    """
    if not images:
        raise ImageRejected("No images uploaded")
    if len(images) > max_files:
        raise ImageRejected(f"Too many files: at most {max_files} images per upload")

    for img in images:
        ext = Path(img.filename or "").suffix.lower()
        if ext not in ALLOWED_EXTENSIONS or (img.content_type or "").lower() not in ALLOWED_MIME_TYPES:
            raise ImageRejected(f"Only image files are allowed ({img.filename})")
        if img.size == 0:
            raise ImageRejected(f"Empty file: {img.filename}")
        if img.size > max_bytes:
            raise ImageRejected(
                f"File too large: {img.filename} is {img.size} bytes (limit {max_bytes} bytes)"
            )
        try:
            with warnings.catch_warnings():
                # oversized pixel counts are refused, not just warned about
                warnings.simplefilter("error", Image.DecompressionBombWarning)
                with Image.open(BytesIO(img.data)) as candidate:
                    candidate.verify()
        except (Image.DecompressionBombError, Image.DecompressionBombWarning) as e:
            raise ImageRejected(f"Image dimensions too large: {img.filename}") from e
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise ImageRejected(f"Not a valid image: {img.filename}") from e


def _optimize(data: bytes, out_path: Path, *, max_size: Tuple[int, int], quality: int) -> Tuple[int, int]:
    """Aspect-preserving downscale (never enlarges) and JPEG re-encode. Returns final (w, h)."""
    with Image.open(BytesIO(data)) as img:
        img = ImageOps.exif_transpose(img)
        img.thumbnail(max_size)
        img = img.convert("RGB")
        img.save(out_path, "JPEG", quality=quality, optimize=True)
        return img.size


def process_batch(
    images: Sequence[IncomingImage],
    upload_dir: str | Path,
    *,
    max_size: Tuple[int, int] = (800, 600),
    quality: int = 85,
) -> List[ProcessedImage]:
    """
    Write each original under a unique name plus an optimized JPEG copy beside it.
    Blocking (Pillow + disk): run it in a threadpool from async code.
    Files written before a failure stay on disk.
    """
    target = Path(upload_dir)
    target.mkdir(parents=True, exist_ok=True)

    processed: List[ProcessedImage] = []
    for img in images:
        ext = Path(img.filename).suffix.lower()
        filename = _unique_name(ext)
        optimized_filename = f"{OPTIMIZED_PREFIX}{Path(filename).stem}.jpg"

        (target / filename).write_bytes(img.data)
        width, height = _optimize(img.data, target / optimized_filename, max_size=max_size, quality=quality)

        processed.append(ProcessedImage(
            id=str(uuid.uuid4()),
            original_name=img.filename,
            filename=filename,
            optimized_filename=optimized_filename,
            size=img.size,
            mimetype=img.content_type,
            path=f"{PUBLIC_PREFIX}/{filename}",
            optimized_path=f"{PUBLIC_PREFIX}/{optimized_filename}",
            width=width,
            height=height,
            uploaded_at=datetime.now(timezone.utc),
        ))
        logger.debug(f"Stored image {img.filename} -> {filename} ({width}x{height})")

    return processed
