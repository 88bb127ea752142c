"""App state and UI label endpoints."""
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from lingopop.core.dependencies import ServiceContainer, get_service_container
from lingopop.models.language import Language
from lingopop.schemas.app_state import AppState
from lingopop.schemas.base import Envelope
from lingopop.services.locale_table import get_translation

router = APIRouter(tags=["config"])


class LocaleEntry(BaseModel):
    key: str
    value: str


@router.get("/config", response_model=Envelope[AppState])
async def read_config(container: ServiceContainer = Depends(get_service_container)):
    return Envelope(status="ok", data=container.get_app_state())


@router.put("/config", response_model=Envelope[AppState])
async def write_config(
    state: AppState,
    container: ServiceContainer = Depends(get_service_container),
):
    """Replace the app state; it is persisted before the response is sent."""
    return Envelope(status="ok", data=container.update_app_state(state))


@router.get("/locale/{key}", response_model=Envelope[LocaleEntry])
async def read_label(
    key: str,
    lang: Optional[Language] = None,
    container: ServiceContainer = Depends(get_service_container),
):
    """UI label in `lang` (defaults to the native language), with the usual fallbacks."""
    language = lang or container.get_app_state().native_lang
    return Envelope(status="ok", data=LocaleEntry(key=key, value=get_translation(language, key)))
