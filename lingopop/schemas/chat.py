from typing import List, Optional

from pydantic import Field

from lingopop.models.language import Language
from lingopop.schemas.base import CamelModel


class ChatTurn(CamelModel):
    """One prior conversation turn; the role label is passed to the backend verbatim."""

    role: str
    text: str


class ChatRequest(CamelModel):
    history: List[ChatTurn] = Field(default_factory=list)
    message: str = Field(min_length=1)
    context_word: str = ""
    target_lang: Optional[Language] = None


class ChatReply(CamelModel):
    reply: str
