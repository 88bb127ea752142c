"""
Gemini backend client for lookups, illustrations, scans, stories, tutor chat
and speech.

Every operation is a coroutine with a single eventual outcome. The SDK client
is synchronous, so each request runs in a worker thread, and every call builds
its own client handle through the configured factory.
"""

import asyncio
import base64
import binascii
import json
import logging
import re
from typing import Any, Callable, List, Optional, Sequence, Union

from google import genai
from google.genai import types
from pydantic import TypeAdapter, ValidationError

from lingopop.config.settings import GeminiSettings, get_settings
from lingopop.core.exceptions import (
    BackendError,
    EmptyResponseError,
    InvalidInputError,
    ResponseParseError,
)
from lingopop.core.metrics import record_latency
from lingopop.models.language import Language
from lingopop.schemas.chat import ChatTurn
from lingopop.schemas.scan import ScanResult
from lingopop.schemas.story import StoryResult
from lingopop.schemas.word import WordEntry, WordLookupPayload
from lingopop.services.audio_player import AudioPlayer, NullAudioPlayer
from lingopop.services.prompts import (
    LOOKUP_RESPONSE_SCHEMA,
    SCAN_RESPONSE_SCHEMA,
    STORY_RESPONSE_SCHEMA,
    build_image_prompt,
    build_lookup_prompt,
    build_scan_prompt,
    build_story_prompt,
    build_tutor_instruction,
)

ClientFactory = Callable[[], Any]

_DATA_URI_PREFIX = re.compile(r"^data:image/(png|jpeg|jpg|webp);base64,")
_SCAN_RESULTS = TypeAdapter(List[ScanResult])
_OPENING_FENCE = re.compile(r"^```[A-Za-z0-9_-]*")
_CLOSING_FENCE = re.compile(r"```\s*$")


def is_not_found_error(exc: BaseException) -> bool:
    """True when a failed call means the model does not exist (HTTP 404)."""
    if getattr(exc, "code", None) == 404:
        return True
    message = str(exc)
    return "404" in message or "not found" in message.lower()


def strip_data_uri(base64_image: str) -> str:
    return _DATA_URI_PREFIX.sub("", base64_image or "")


def _encode_inline(data: Union[bytes, str]) -> str:
    if isinstance(data, (bytes, bytearray)):
        return base64.b64encode(data).decode("ascii")
    return data


def _first_parts(response) -> list:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    return list(getattr(content, "parts", None) or [])


def _parse_json(text: str, operation: str) -> Any:
    content = text.strip()
    # Models without a strict schema sometimes wrap JSON in markdown fences
    if content.startswith("```"):
        content = _OPENING_FENCE.sub("", content)
        content = _CLOSING_FENCE.sub("", content)
    try:
        return json.loads(content.strip())
    except json.JSONDecodeError as e:
        raise ResponseParseError(
            f"Gemini returned invalid JSON for {operation}: {e}",
            details={"operation": operation},
        ) from e


class GeminiBackendClient:
    """
    Request/response contract with the generative backend.

    Decorative operations (illustration, speech) degrade to ``None`` instead of
    raising; lookup is the only operation with a fallback path.
    """

    def __init__(
        self,
        gemini_settings: Optional[GeminiSettings] = None,
        client_factory: Optional[ClientFactory] = None,
        audio_player: Optional[AudioPlayer] = None,
    ):
        self.logger = logging.getLogger(__name__)
        self.settings = gemini_settings or get_settings().gemini
        self._client_factory = client_factory or self._default_client
        self.audio_player = audio_player or NullAudioPlayer()

    def _default_client(self) -> genai.Client:
        return genai.Client(api_key=self.settings.api_key)

    def _open_client(self):
        try:
            return self._client_factory()
        except Exception as e:
            self.logger.error(f"Gemini client could not be created: {e}")
            raise BackendError(f"Gemini client unavailable: {e}") from e

    async def lookup_word(
        self,
        user_input: str,
        native_lang: Language,
        target_lang: Language,
    ) -> WordLookupPayload:
        """
        Analyze a word, phrase or intent into pragmatic variants.

        Raises:
            EmptyResponseError: primary model returned no text
            BackendError: the service call failed (other than a missing model)
            ResponseParseError: reply is not JSON or not lookup-shaped
        """
        prompt = build_lookup_prompt(user_input, native_lang, target_lang)
        client = self._open_client()

        with record_latency("lookup_word"):
            try:
                response = await asyncio.to_thread(
                    client.models.generate_content,
                    model=self.settings.lookup_model,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        response_mime_type="application/json",
                        response_schema=LOOKUP_RESPONSE_SCHEMA,
                    ),
                )
            except Exception as e:
                self.logger.error(f"Gemini lookup_word error: {e}")
                if not is_not_found_error(e):
                    raise BackendError(
                        str(e), details={"model": self.settings.lookup_model}
                    ) from e
                text = await self._lookup_fallback(client, prompt)
            else:
                text = response.text
                if not text:
                    raise EmptyResponseError("lookup_word", self.settings.lookup_model)

        data = _parse_json(text, "lookup_word")
        try:
            payload = WordLookupPayload.model_validate(data)
        except ValidationError as e:
            raise ResponseParseError(
                f"Gemini lookup reply has an unexpected shape: {e.error_count()} validation errors",
                details={"errors": e.errors(include_url=False, include_context=False, include_input=False)},
            ) from e

        self.logger.info(
            f"Lookup resolved {user_input!r} to {payload.term!r} with {len(payload.variants)} variants"
        )
        return payload

    async def _lookup_fallback(self, client, prompt: str) -> str:
        model = self.settings.lookup_fallback_model
        self.logger.warning(f"Lookup model unavailable, retrying once with {model}")
        try:
            response = await asyncio.to_thread(
                client.models.generate_content,
                model=model,
                contents=prompt,
                config=types.GenerateContentConfig(response_mime_type="application/json"),
            )
        except Exception as e:
            self.logger.error(f"Gemini lookup fallback error: {e}")
            raise BackendError(str(e), details={"model": model}) from e
        return response.text or "{}"

    async def generate_word_image(self, term: str) -> Optional[str]:
        """Illustrate a term as a PNG data URI. Never raises; ``None`` means no image."""
        try:
            client = self._client_factory()
            with record_latency("generate_word_image"):
                response = await asyncio.to_thread(
                    client.models.generate_content,
                    model=self.settings.image_model,
                    contents=build_image_prompt(term),
                )
            for part in _first_parts(response):
                inline = getattr(part, "inline_data", None)
                if inline is not None and inline.data:
                    return f"data:image/png;base64,{_encode_inline(inline.data)}"
            self.logger.info(f"No image returned for {term!r}")
            return None
        except Exception as e:
            self.logger.warning(f"Image generation failed for {term!r}: {e}")
            return None

    async def scan_and_translate_image(
        self,
        base64_image: str,
        native_lang: Language,
        target_lang: Language,
    ) -> List[ScanResult]:
        """Detect text regions in an image and translate them into the native language."""
        # Line-wrapped payloads are accepted; any other non-alphabet character is an error
        clean_base64 = "".join(strip_data_uri(base64_image).split())
        try:
            image_bytes = base64.b64decode(clean_base64, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidInputError(f"Image payload is not valid base64: {e}") from e

        client = self._open_client()
        with record_latency("scan_and_translate_image"):
            try:
                response = await asyncio.to_thread(
                    client.models.generate_content,
                    model=self.settings.vision_model,
                    contents=[
                        types.Part.from_bytes(data=image_bytes, mime_type="image/jpeg"),
                        build_scan_prompt(native_lang),
                    ],
                    config=types.GenerateContentConfig(
                        response_mime_type="application/json",
                        response_schema=SCAN_RESPONSE_SCHEMA,
                    ),
                )
            except Exception as e:
                self.logger.error(f"Gemini scan error: {e}")
                raise BackendError(str(e), details={"model": self.settings.vision_model}) from e

        data = _parse_json(response.text or "[]", "scan_and_translate_image")
        try:
            results = _SCAN_RESULTS.validate_python(data)
        except ValidationError as e:
            raise ResponseParseError(
                "Gemini scan reply is not a list of text regions",
                details={"errors": e.errors(include_url=False, include_context=False, include_input=False)},
            ) from e

        self.logger.info(f"Scan detected {len(results)} text regions")
        return results

    async def generate_story(
        self,
        words: Sequence[WordEntry],
        native_lang: Language,
        target_lang: Language,
    ) -> StoryResult:
        """Write a short humorous story using the saved terms, plus its translation."""
        if not words:
            raise InvalidInputError("At least one word is required to write a story")

        prompt = build_story_prompt((w.term for w in words), native_lang, target_lang)
        client = self._open_client()
        with record_latency("generate_story"):
            try:
                response = await asyncio.to_thread(
                    client.models.generate_content,
                    model=self.settings.story_model,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        response_mime_type="application/json",
                        response_schema=STORY_RESPONSE_SCHEMA,
                    ),
                )
            except Exception as e:
                self.logger.error(f"Gemini story error: {e}")
                raise BackendError(str(e), details={"model": self.settings.story_model}) from e

        data = _parse_json(response.text or "{}", "generate_story")
        try:
            return StoryResult.model_validate(data)
        except ValidationError as e:
            raise ResponseParseError(
                "Gemini story reply has an unexpected shape",
                details={"errors": e.errors(include_url=False, include_context=False, include_input=False)},
            ) from e

    async def chat_with_ai(
        self,
        history: Sequence[Union[ChatTurn, dict]],
        message: str,
        context_word: str,
        target_lang: Language,
    ) -> str:
        """Continue a tutor conversation seeded with ``history`` and return the reply text."""
        turns = [t if isinstance(t, ChatTurn) else ChatTurn.model_validate(t) for t in history]
        seeded = [
            types.Content(role=turn.role, parts=[types.Part(text=turn.text)])
            for turn in turns
        ]
        self.logger.debug(
            f"Chat with {len(seeded)} prior turns",
            extra={"context_word": context_word},
        )

        client = self._open_client()

        def _send():
            chat = client.chats.create(
                model=self.settings.chat_model,
                config=types.GenerateContentConfig(
                    system_instruction=build_tutor_instruction(target_lang),
                ),
                history=seeded,
            )
            return chat.send_message(message)

        with record_latency("chat_with_ai"):
            try:
                response = await asyncio.to_thread(_send)
            except Exception as e:
                self.logger.error(f"Gemini chat error: {e}")
                raise BackendError(str(e), details={"model": self.settings.chat_model}) from e

        return response.text or ""

    async def synthesize_speech(self, text: str) -> Optional[str]:
        """Return base64 PCM audio for ``text``, or ``None`` if synthesis failed."""
        try:
            client = self._client_factory()
            with record_latency("synthesize_speech"):
                response = await asyncio.to_thread(
                    client.models.generate_content,
                    model=self.settings.tts_model,
                    contents=[types.Content(parts=[types.Part(text=text)])],
                    config=types.GenerateContentConfig(
                        response_modalities=["AUDIO"],
                        speech_config=types.SpeechConfig(
                            voice_config=types.VoiceConfig(
                                prebuilt_voice_config=types.PrebuiltVoiceConfig(
                                    voice_name=self.settings.tts_voice,
                                )
                            )
                        ),
                    ),
                )
            parts = _first_parts(response)
            inline = getattr(parts[0], "inline_data", None) if parts else None
            if inline is None or not inline.data:
                return None
            return _encode_inline(inline.data)
        except Exception as e:
            self.logger.error(f"TTS error: {e}")
            return None

    async def speak_text(self, text: str) -> None:
        """Synthesize ``text`` and hand it to the audio player. Failures are logged only."""
        audio = await self.synthesize_speech(text)
        if not audio:
            return
        try:
            await self.audio_player.play(audio)
        except Exception as e:
            self.logger.error(f"Audio playback failed: {e}")
