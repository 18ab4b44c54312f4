import base64
import json
from unittest.mock import AsyncMock, MagicMock

from artisan_hub.api import deps
from artisan_hub.main import app


def test_content_requires_identity(client):
    res = client.post("/api/ai/content", json={"contentType": "title", "productData": {}})
    assert res.status_code == 401
    assert res.json() == {"success": False, "error": "Must be authenticated"}


def test_content_from_model(client, fake_llm, auth_headers):
    fake_llm.complete.return_value = '{"title": "Bagru Indigo Saree"}'

    res = client.post(
        "/api/ai/content",
        json={"contentType": "title", "productData": {"category": "Textiles"}},
        headers=auth_headers,
    )

    assert res.status_code == 200
    body = res.json()
    assert body["contentType"] == "title"
    assert body["content"] == {"title": "Bagru Indigo Saree"}
    assert body["source"] == "model"


def test_content_fallback_is_tagged(client, fake_llm, auth_headers):
    fake_llm.complete.return_value = "I am not able to produce JSON today."

    body = client.post(
        "/api/ai/content",
        json={"contentType": "story", "productData": {}},
        headers=auth_headers,
    ).json()

    assert body["success"] is True
    assert body["source"] == "fallback"
    assert body["content"]["title"]


def test_content_type_is_validated(client, auth_headers):
    res = client.post("/api/ai/content", json={"contentType": "poem"}, headers=auth_headers)
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Invalid request"
    assert body["details"]


def test_content_upstream_failure(client, fake_llm, auth_headers):
    fake_llm.complete.side_effect = RuntimeError("connection reset")
    res = client.post("/api/ai/content", json={"contentType": "title"}, headers=auth_headers)
    assert res.status_code == 500
    assert res.json()["error"] == "Failed to generate content"


def test_translate_anonymous(client, fake_llm):
    fake_llm.complete.return_value = json.dumps({"translatedText": "Clay pitcher", "detectedLanguage": "gu"})

    res = client.post("/api/ai/translate", json={"text": "માટીનો ઘડો", "targetLanguage": "en"})

    assert res.status_code == 200
    assert res.json() == {
        "success": True,
        "translatedText": "Clay pitcher",
        "detectedLanguage": "gu",
        "cached": False,
    }


def test_speech_rejects_bad_audio(client, auth_headers):
    res = client.post("/api/ai/speech-to-text", json={"audioContent": "%%%"}, headers=auth_headers)
    assert res.status_code == 400
    assert "base64" in res.json()["error"]


def test_speech_to_text(client, fake_llm, auth_headers):
    fake_llm.transcribe.return_value = "I make pottery"
    audio = base64.b64encode(b"fake-webm").decode()

    res = client.post(
        "/api/ai/speech-to-text",
        json={"audioContent": audio, "languageCode": "en-IN"},
        headers=auth_headers,
    )

    assert res.json() == {"success": True, "transcription": "I make pottery"}


def test_analyze_image(client, fake_llm, auth_headers):
    fake_llm.complete.return_value = json.dumps({"labels": [{"description": "pottery", "score": 0.97}]})
    body = client.post(
        "/api/ai/analyze-image", json={"imageUrl": "https://img.test/pot.jpg"}, headers=auth_headers,
    ).json()
    assert body["labels"] == [{"description": "pottery", "score": 0.97}]
    assert body["safeSearch"] == {}


def test_analytics_for_someone_elses_artisan(client, make_db, auth_headers):
    artisans = MagicMock()
    artisans.find_one = AsyncMock(return_value={"id": "a1", "userId": "other"})
    app.dependency_overrides[deps.mongo_db] = lambda: make_db(artisans=artisans)

    res = client.post("/api/ai/analytics", json={"artisanId": "a1"}, headers=auth_headers)

    assert res.status_code == 403
    assert res.json()["error"] == "Access denied"
