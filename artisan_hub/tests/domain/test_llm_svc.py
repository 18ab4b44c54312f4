import base64
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from artisan_hub.core.config import Settings
from artisan_hub.domain.services.content_svc import generate_product_content
from artisan_hub.domain.services.llm_svc import LLMService
from artisan_hub.domain.services.marketing_svc import generate_listing_description
from artisan_hub.domain.services.speech_svc import decode_audio, transcribe
from artisan_hub.domain.services.translation_svc import translate_text
from artisan_hub.domain.services.vision_svc import MAX_ANNOTATIONS, analyze_image


def _openai_client(reply: str):
    # Mock response object mapping the OpenAI API response structure
    mock_message = MagicMock()
    mock_message.content = reply

    mock_choice = MagicMock()
    mock_choice.message = mock_message

    mock_response = MagicMock()
    mock_response.choices = [mock_choice]

    mock_client = MagicMock()
    mock_client.chat.completions.create = AsyncMock(return_value=mock_response)
    mock_client.audio.transcriptions.create = AsyncMock(return_value=MagicMock(text=" namaste "))
    return mock_client


@pytest.mark.asyncio
async def test_complete_json_mode():
    client = _openai_client('{"title": "Pot"}')
    llm = LLMService(Settings(), client=client)

    out = await llm.complete("Write a title", system="sys", json_mode=True)

    assert out == '{"title": "Pot"}'
    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["response_format"] == {"type": "json_object"}
    assert kwargs["messages"][0] == {"role": "system", "content": "sys"}
    assert kwargs["model"] == Settings().OPENAI_TEXT_MODEL


@pytest.mark.asyncio
async def test_complete_with_image_uses_vision_message():
    client = _openai_client("ok")
    llm = LLMService(Settings(OPENAI_VISION_MODEL="vision-test"), client=client)

    await llm.complete("Describe", image_url="https://img.test/a.jpg")

    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "vision-test"
    assert "response_format" not in kwargs
    parts = kwargs["messages"][-1]["content"]
    assert parts[1] == {"type": "image_url", "image_url": {"url": "https://img.test/a.jpg"}}


def test_decode_audio_accepts_data_urls():
    raw = b"\x1aE\xdf\xa3webm"
    encoded = base64.b64encode(raw).decode()
    assert decode_audio(encoded) == raw
    assert decode_audio(f"data:audio/webm;base64,{encoded}") == raw


@pytest.mark.parametrize("value", ["", "not base64!!", "===="])
def test_decode_audio_rejects_garbage(value):
    with pytest.raises(ValueError):
        decode_audio(value)


@pytest.mark.asyncio
async def test_transcribe_passes_language_prefix():
    client = _openai_client("")
    llm = LLMService(Settings(), client=client)

    text = await transcribe(llm, audio=b"abc", language_code="hi-IN")

    assert text == "namaste"
    kwargs = client.audio.transcriptions.create.call_args.kwargs
    assert kwargs["language"] == "hi"
    assert kwargs["file"] == ("audio.webm", b"abc")


@pytest.mark.asyncio
async def test_analyze_image_truncates_annotations(fake_llm):
    fake_llm.complete.return_value = json.dumps({
        "labels": [{"description": f"label {i}", "score": 0.9} for i in range(15)],
        "objects": [{"name": "vase", "score": 0.8}],
        "safeSearch": {"adult": "VERY_UNLIKELY"},
        "dominantColors": ["#aa5533"],
    })

    analysis = await analyze_image(fake_llm, image_url="https://img.test/a.jpg")

    assert len(analysis.labels) == MAX_ANNOTATIONS
    assert analysis.objects[0].name == "vase"
    assert analysis.model_dump(by_alias=True)["safeSearch"] == {"adult": "VERY_UNLIKELY"}
    assert fake_llm.complete.call_args.kwargs["image_url"] == "https://img.test/a.jpg"


VISION_REPLY = json.dumps({"labels": [{"description": "vase", "score": 0.9}]})


async def _run_vision(llm):
    await analyze_image(llm, image_url="https://img.test/a.jpg")


async def _run_story(llm):
    await generate_product_content(llm, content_type="story", product_data={"title": "Saree"})


async def _run_translation(llm):
    await translate_text(llm, None, Settings(), text="नमस्ते", target_language="en")


async def _run_listing(llm):
    await generate_listing_description(llm, basic_info={"category": "Pottery"})


@pytest.mark.asyncio
@pytest.mark.parametrize("call", [_run_vision, _run_story, _run_translation, _run_listing])
async def test_json_mode_requests_mention_json(call):
    # the API refuses response_format=json_object unless a message says "JSON"
    client = _openai_client(VISION_REPLY)
    llm = LLMService(Settings(), client=client)

    try:
        await call(llm)
    except ValueError:
        pass  # reply shape does not matter here, only the request

    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["response_format"] == {"type": "json_object"}
    assert "json" in str(kwargs["messages"]).lower()
