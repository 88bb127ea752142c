"""Visual scan endpoint: text regions in an image, translated."""
from typing import List
import logging

from fastapi import APIRouter, Depends

from lingopop.core.dependencies import ServiceContainer, get_service_container
from lingopop.schemas.base import Envelope
from lingopop.schemas.scan import ScanRequest, ScanResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scan", tags=["scan"])


@router.post("", response_model=Envelope[List[ScanResult]])
async def scan_image(
    request: ScanRequest,
    container: ServiceContainer = Depends(get_service_container),
):
    """
    Detect and translate text in a base64 image.

    - **image**: base64 payload, a `data:image/...;base64,` header is accepted
    - **nativeLang** / **targetLang**: default to the stored app state
    """
    state = container.get_app_state()
    results = await container.get_backend().scan_and_translate_image(
        request.image,
        request.native_lang or state.native_lang,
        request.target_lang or state.target_lang,
    )
    return Envelope(status="ok", data=results)
