"""Text-to-speech endpoints. Synthesis failures never surface as errors."""
from fastapi import APIRouter, BackgroundTasks, Depends, status

from lingopop.core.dependencies import get_backend_client
from lingopop.schemas.base import Envelope, Message
from lingopop.schemas.speech import SpeechRequest, SpeechResponse
from lingopop.services.gemini_client import GeminiBackendClient

router = APIRouter(prefix="/speech", tags=["speech"])


@router.post("", response_model=Envelope[SpeechResponse])
async def synthesize(
    request: SpeechRequest,
    backend: GeminiBackendClient = Depends(get_backend_client),
):
    """Return base64 PCM audio for the text; `audio` is null when synthesis failed."""
    audio = await backend.synthesize_speech(request.text)
    return Envelope(status="ok", data=SpeechResponse(audio=audio))


@router.post(
    "/play",
    response_model=Envelope[Message],
    status_code=status.HTTP_202_ACCEPTED,
)
async def play(
    request: SpeechRequest,
    background_tasks: BackgroundTasks,
    backend: GeminiBackendClient = Depends(get_backend_client),
):
    """Fire-and-forget playback through the configured audio player."""
    background_tasks.add_task(backend.speak_text, request.text)
    return Envelope(status="ok", data=Message(message="queued"))
