import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from artisan_hub.core.config import Settings
from artisan_hub.domain.services.translation_svc import (
    TranslationResult,
    record_translation,
    translate_best_effort,
    translate_text,
)


@pytest.fixture
def settings():
    return Settings()


@pytest.mark.asyncio
async def test_translate_without_cache(fake_llm, settings):
    fake_llm.complete.return_value = '{"translatedText": "Hand printed saree", "detectedLanguage": "hi"}'

    result = await translate_text(fake_llm, None, settings, text="हाथ से छपी साड़ी", target_language="en")

    assert result.translated_text == "Hand printed saree"
    assert result.detected_language == "hi"
    assert result.cached is False


@pytest.mark.asyncio
async def test_translate_cache_hit_skips_model(fake_llm, settings):
    redis = MagicMock()
    redis.get = AsyncMock(return_value=json.dumps({"translatedText": "Pitcher", "detectedLanguage": "gu"}))

    result = await translate_text(fake_llm, redis, settings, text="ઘડો", target_language="en")

    assert result.cached is True
    assert result.translated_text == "Pitcher"
    fake_llm.complete.assert_not_awaited()


@pytest.mark.asyncio
async def test_translate_stores_result_in_cache(fake_llm, settings):
    fake_llm.complete.return_value = '{"translatedText": "Vase"}'
    redis = MagicMock()
    redis.get = AsyncMock(return_value=None)
    redis.set = AsyncMock()

    result = await translate_text(fake_llm, redis, settings, text="फूलदान", target_language="en",
                                  source_language="hi")

    # no detected language in the reply: the given source is kept
    assert result.detected_language == "hi"
    key, payload = redis.set.call_args.args
    assert key.startswith("tr:")
    assert json.loads(payload) == {"translatedText": "Vase", "detectedLanguage": "hi"}


@pytest.mark.asyncio
async def test_translate_bad_reply_raises(fake_llm, settings):
    fake_llm.complete.return_value = "I can't translate this"
    with pytest.raises(ValueError):
        await translate_text(fake_llm, None, settings, text="x", target_language="en")


@pytest.mark.asyncio
async def test_best_effort_keeps_original_on_failure(fake_llm, settings):
    fake_llm.complete.side_effect = RuntimeError("quota")
    out = await translate_best_effort(fake_llm, None, settings, text="मेरी कला", source_language="Hindi")
    assert out == "मेरी कला"


@pytest.mark.asyncio
async def test_best_effort_skips_english(fake_llm, settings):
    out = await translate_best_effort(fake_llm, None, settings, text="My craft", source_language="English")
    assert out == "My craft"
    fake_llm.complete.assert_not_awaited()


@pytest.mark.asyncio
async def test_record_translation(make_db):
    translations = MagicMock()
    translations.insert_one = AsyncMock()
    db = make_db(translations=translations)
    result = TranslationResult(translated_text="Hello", detected_language="hi")

    await record_translation(db, user_id="u1", text="नमस्ते", target_language="en", result=result)

    doc = translations.insert_one.call_args.args[0]
    assert doc["userId"] == "u1"
    assert doc["translatedText"] == "Hello"
    assert doc["sourceLanguage"] == "hi"
