"""Lookup endpoints: search box, illustration and the currently displayed result."""
from typing import Optional
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from lingopop.core.dependencies import ServiceContainer, get_backend_client, get_service_container
from lingopop.models.language import Language
from lingopop.schemas.base import Envelope
from lingopop.schemas.word import (
    EntryLabels,
    ImageRequest,
    ImageResponse,
    LookupRequest,
    VariantBadges,
    WordEntry,
)
from lingopop.services.gemini_client import GeminiBackendClient
from lingopop.services.locale_table import is_meme_term, posture_label, scenario_label

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lookup", tags=["lookup"])


@router.post("", response_model=Envelope[WordEntry])
async def lookup_word(
    request: LookupRequest,
    container: ServiceContainer = Depends(get_service_container),
):
    """
    Look up a word, phrase or intent and illustrate it.

    Failures are reported with the localized "oops" prefix followed by the raw
    error text, in the user's native language.
    """
    state = container.get_app_state()
    service = container.get_lookup_service()
    try:
        entry = await service.search(
            request.input,
            state,
            native_lang=request.native_lang,
            target_lang=request.target_lang,
            session=container.get_lookup_session(),
        )
    except Exception as e:
        logger.exception("Lookup failed")
        native = request.native_lang or state.native_lang
        return JSONResponse(
            status_code=getattr(e, "status_code", 502),
            content={
                "status": "error",
                "data": None,
                "error": service.failure_message(e, native),
            },
        )
    return Envelope(status="ok", data=entry)


@router.get("/current", response_model=Envelope[Optional[WordEntry]])
async def current_result(container: ServiceContainer = Depends(get_service_container)):
    """Result of the most recently started search, if it has completed."""
    return Envelope(status="ok", data=container.get_lookup_session().current)


@router.get("/current/labels", response_model=Envelope[Optional[EntryLabels]])
async def current_labels(
    lang: Optional[Language] = None,
    container: ServiceContainer = Depends(get_service_container),
):
    """Scenario/posture badges and the meme warning for the current result."""
    entry = container.get_lookup_session().current
    if entry is None:
        return Envelope(status="ok", data=None)
    language = lang or container.get_app_state().native_lang
    labels = EntryLabels(
        term=entry.term,
        meme_warning=is_meme_term(entry),
        variants=[
            VariantBadges(
                expression=v.expression,
                scenario_label=scenario_label(v.scenario, language),
                posture_label=posture_label(v.posture, language),
            )
            for v in entry.variants
        ],
    )
    return Envelope(status="ok", data=labels)


@router.post("/image", response_model=Envelope[ImageResponse])
async def illustrate_term(
    request: ImageRequest,
    backend: GeminiBackendClient = Depends(get_backend_client),
):
    image_url = await backend.generate_word_image(request.term)
    return Envelope(status="ok", data=ImageResponse(image_url=image_url))
