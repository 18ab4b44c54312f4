# artisan_hub/domain/services/llm_svc.py

from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging
from time import monotonic as _now

from openai import AsyncOpenAI

from artisan_hub.core.config import Settings

logger = logging.getLogger(__name__)

# Completion token caps
DEFAULT_MAX_TOKENS = 1024
JSON_MAX_TOKENS = 1536


class LLMService:
    """
    Thin wrapper around the OpenAI client for the three upstream calls we make:
    chat completion (text or image input) and audio transcription.
    No retries: an upstream failure propagates to the caller once.
    """

    def __init__(self, settings: Settings, client: Optional[AsyncOpenAI] = None):
        self.settings = settings
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        # Lazy so that routes which never call the model work without a key.
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.settings.OPENAI_API_KEY,
                timeout=self.settings.openai_timeout_s,
            )
        return self._client

    async def complete(
        self,
        prompt: str,
        *,
        system: Optional[str] = None,
        json_mode: bool = False,
        image_url: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: float = 0.7,
    ) -> str:
        """
        Send one user prompt (optionally with an image) and return the raw text reply.
        """
        model = model or (self.settings.OPENAI_VISION_MODEL if image_url else self.settings.OPENAI_TEXT_MODEL)

        messages: List[Dict[str, Any]] = []
        if system:
            messages.append({"role": "system", "content": system})
        if image_url:
            messages.append({
                "role": "user",
                "content": [
                    {"type": "text", "text": prompt},
                    {"type": "image_url", "image_url": {"url": image_url}},
                ],
            })
        else:
            messages.append({"role": "user", "content": prompt})

        kwargs: Dict[str, Any] = dict(
            model=model,
            messages=messages,
            max_tokens=max_tokens or (JSON_MAX_TOKENS if json_mode else DEFAULT_MAX_TOKENS),
            temperature=temperature,
            timeout=self.settings.openai_timeout_s,
        )
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        t0 = _now()
        resp = await self.client.chat.completions.create(**kwargs)
        dt = _now() - t0
        # Best-effort usage logging
        try:
            u = getattr(resp, "usage", None)
            p = getattr(u, "prompt_tokens", None) if u else None
            c = getattr(u, "completion_tokens", None) if u else None
            logger.info(
                f"LLM call model={getattr(resp, 'model', model)} duration={dt:.3f}s "
                f"tokens(prompt={p}, completion={c})"
            )
        except Exception:
            logger.info(f"LLM call model={model} duration={dt:.3f}s (usage unavailable)")
        return resp.choices[0].message.content or ""

    async def transcribe(self, audio: bytes, *, filename: str = "audio.webm", language: Optional[str] = None) -> str:
        """Speech-to-text for voice onboarding. `language` is an ISO-639-1 hint."""
        kwargs: Dict[str, Any] = dict(
            model=self.settings.OPENAI_TRANSCRIBE_MODEL,
            file=(filename, audio),
            timeout=self.settings.openai_timeout_s,
        )
        if language:
            kwargs["language"] = language
        t0 = _now()
        resp = await self.client.audio.transcriptions.create(**kwargs)
        logger.info(f"Transcription model={kwargs['model']} bytes={len(audio)} duration={_now() - t0:.3f}s")
        return getattr(resp, "text", "") or ""
