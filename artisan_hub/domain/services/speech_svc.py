# artisan_hub/domain/services/speech_svc.py

from __future__ import annotations
import base64
import binascii
import logging

from artisan_hub.domain.services.llm_svc import LLMService

logger = logging.getLogger(__name__)


def decode_audio(audio_content: str) -> bytes:
    """Base64 audio from the browser recorder. Raises ValueError if not decodable."""
    if not audio_content:
        raise ValueError("audioContent is required")
    # data URLs ("data:audio/webm;base64,....") are accepted as well
    if audio_content.startswith("data:") and "," in audio_content:
        audio_content = audio_content.split(",", 1)[1]
    try:
        data = base64.b64decode(audio_content, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError("audioContent must be base64 encoded") from e
    if not data:
        raise ValueError("audioContent is empty")
    return data


async def transcribe(llm: LLMService, *, audio: bytes, language_code: str = "en-US") -> str:
    # Whisper wants ISO-639-1 ("en"), browsers send BCP-47 ("en-US")
    language = (language_code or "").split("-")[0].lower() or None
    text = await llm.transcribe(audio, filename="audio.webm", language=language)
    logger.info("transcription done bytes=%s chars=%s", len(audio), len(text))
    return text.strip()
