from .base import CamelModel, Envelope, Message
from .app_state import AppState
from .word import (
    PragmaticVariant,
    WordLookupPayload,
    WordEntry,
    LookupRequest,
    ImageRequest,
    ImageResponse,
    VariantBadges,
    EntryLabels,
)
from .scan import ScanResult, ScanRequest
from .story import StoryResult, StoryRequest
from .chat import ChatTurn, ChatRequest, ChatReply
from .speech import SpeechRequest, SpeechResponse

__all__ = [
    "CamelModel",
    "Envelope",
    "Message",
    "AppState",
    "PragmaticVariant",
    "WordLookupPayload",
    "WordEntry",
    "LookupRequest",
    "ImageRequest",
    "ImageResponse",
    "VariantBadges",
    "EntryLabels",
    "ScanResult",
    "ScanRequest",
    "StoryResult",
    "StoryRequest",
    "ChatTurn",
    "ChatRequest",
    "ChatReply",
    "SpeechRequest",
    "SpeechResponse",
]
