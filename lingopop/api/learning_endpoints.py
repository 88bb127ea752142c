"""Story mode and tutor chat endpoints."""
import logging

from fastapi import APIRouter, Depends

from lingopop.core.dependencies import ServiceContainer, get_service_container
from lingopop.schemas.base import Envelope
from lingopop.schemas.chat import ChatReply, ChatRequest
from lingopop.schemas.story import StoryRequest, StoryResult

logger = logging.getLogger(__name__)

router = APIRouter(tags=["learning"])


@router.post("/story", response_model=Envelope[StoryResult])
async def generate_story(
    request: StoryRequest,
    container: ServiceContainer = Depends(get_service_container),
):
    """Write a short funny story in the target language using the given words."""
    state = container.get_app_state()
    story = await container.get_backend().generate_story(
        request.words,
        request.native_lang or state.native_lang,
        request.target_lang or state.target_lang,
    )
    return Envelope(status="ok", data=story)


@router.post("/chat", response_model=Envelope[ChatReply])
async def chat_with_tutor(
    request: ChatRequest,
    container: ServiceContainer = Depends(get_service_container),
):
    state = container.get_app_state()
    reply = await container.get_backend().chat_with_ai(
        request.history,
        request.message,
        request.context_word,
        request.target_lang or state.target_lang,
    )
    return Envelope(status="ok", data=ChatReply(reply=reply))
