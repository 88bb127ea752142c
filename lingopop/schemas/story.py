from typing import List, Optional

from pydantic import Field

from lingopop.models.language import Language
from lingopop.schemas.base import CamelModel
from lingopop.schemas.word import WordEntry


class StoryResult(CamelModel):
    story: Optional[str] = None
    translation: Optional[str] = None


class StoryRequest(CamelModel):
    words: List[WordEntry] = Field(min_length=1)
    native_lang: Optional[Language] = None
    target_lang: Optional[Language] = None
