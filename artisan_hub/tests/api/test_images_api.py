from io import BytesIO

import pytest
from PIL import Image

from artisan_hub.core.config import Settings, get_settings
from artisan_hub.main import app


@pytest.fixture
def upload_dir(tmp_path):
    target = tmp_path / "uploads"
    app.dependency_overrides[get_settings] = lambda: Settings(UPLOAD_DIR=str(target))
    return target


def _jpeg(size=(1200, 1200)) -> bytes:
    buf = BytesIO()
    Image.new("RGB", size, (30, 60, 120)).save(buf, "JPEG")
    return buf.getvalue()


def test_upload_stores_original_and_optimized(client, upload_dir):
    res = client.post(
        "/api/images/upload",
        files=[("images", ("vase.jpg", _jpeg(), "image/jpeg"))],
    )

    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "1 images uploaded successfully"
    img = body["images"][0]
    assert img["originalName"] == "vase.jpg"
    assert img["optimizedFilename"].startswith("optimized_")
    assert (img["width"], img["height"]) == (600, 600)
    assert (upload_dir / img["filename"]).exists()
    assert (upload_dir / img["optimizedFilename"]).exists()


def test_upload_rejects_non_images_before_writing(client, upload_dir):
    res = client.post(
        "/api/images/upload",
        files=[
            ("images", ("vase.jpg", _jpeg(), "image/jpeg")),
            ("images", ("notes.txt", b"just text", "text/plain")),
        ],
    )

    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "Only image files are allowed (notes.txt)"}
    assert not upload_dir.exists()


def test_upload_without_files(client, upload_dir):
    res = client.post("/api/images/upload")
    assert res.status_code == 400
    assert res.json()["error"] == "No images uploaded"


def test_upload_too_many_files(client, upload_dir):
    files = [("images", (f"p{i}.jpg", b"x", "image/jpeg")) for i in range(11)]
    res = client.post("/api/images/upload", files=files)
    assert res.status_code == 400
    assert "Too many files" in res.json()["error"]
    assert not upload_dir.exists()


def test_upload_rejects_oversize_file(client, tmp_path):
    target = tmp_path / "uploads"
    app.dependency_overrides[get_settings] = lambda: Settings(UPLOAD_DIR=str(target), upload_max_bytes=1000)

    res = client.post(
        "/api/images/upload",
        files=[("images", ("big.jpg", b"0" * 1001, "image/jpeg"))],
    )

    assert res.status_code == 400
    assert res.json()["error"].startswith("File too large: big.jpg")
    assert not target.exists()


def test_upload_rejects_huge_pixel_count(client, upload_dir, monkeypatch):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10_000)

    res = client.post("/api/images/upload", files=[("images", ("vase.jpg", _jpeg(), "image/jpeg"))])

    assert res.status_code == 400
    assert res.json()["error"] == "Image dimensions too large: vase.jpg"
    assert not upload_dir.exists()
