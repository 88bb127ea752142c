from typing import Optional

from pydantic import Field

from lingopop.schemas.base import CamelModel


class SpeechRequest(CamelModel):
    text: str = Field(min_length=1)


class SpeechResponse(CamelModel):
    # base64 PCM, None when synthesis produced nothing
    audio: Optional[str] = None
