from typing import Optional

from lingopop.models.language import Language
from lingopop.schemas.base import CamelModel


class ScanResult(CamelModel):
    """One detected text region; identity is its position in the scan."""

    original: str = ""
    phonetic: str = ""
    translation: str = ""


class ScanRequest(CamelModel):
    # base64 payload, optionally prefixed with a data-URI header
    image: str
    native_lang: Optional[Language] = None
    target_lang: Optional[Language] = None
