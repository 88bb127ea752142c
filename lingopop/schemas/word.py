"""
Lookup result shapes.

The backend is asked for strict labels, but replies are validated here rather
than trusted: scenario/posture values are reduced to their first token and
unknown labels are coerced to the neutral member of their closed set.
"""

import logging
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Type

from pydantic import ConfigDict, Field, field_validator

from lingopop.models.language import Language, Posture, Scenario, first_label_token
from lingopop.schemas.base import CamelModel

logger = logging.getLogger(__name__)


def _coerce_label(value, enum_cls: Type[Enum], default: Enum) -> Enum:
    if isinstance(value, enum_cls):
        return value
    token = first_label_token(str(value or ""))
    for member in enum_cls:
        if member.value.lower() == token.lower():
            return member
    logger.warning(
        f"Unexpected {enum_cls.__name__.lower()} label {value!r}, using {default.value}",
        extra={"label": value, "fallback": default.value},
    )
    return default


class PragmaticVariant(CamelModel):
    """One contextual rendering of a concept"""

    expression: str
    scenario: Scenario
    posture: Posture
    pragmatic_note: str

    @field_validator("scenario", mode="before")
    @classmethod
    def normalize_scenario(cls, v):
        return _coerce_label(v, Scenario, Scenario.DAILY)

    @field_validator("posture", mode="before")
    @classmethod
    def normalize_posture(cls, v):
        return _coerce_label(v, Posture, Posture.NEUTRAL)


class WordLookupPayload(CamelModel):
    """What the backend returns for a lookup (no id, timestamp or image)."""

    term: str = Field(min_length=1)
    native_definition: str
    # Order is the backend's relevance order and is never re-sorted
    variants: List[PragmaticVariant] = Field(min_length=1)
    usage_note: str
    synonyms: List[str] = Field(default_factory=list)

    @field_validator("term", mode="before")
    @classmethod
    def strip_term(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("synonyms", mode="before")
    @classmethod
    def default_synonyms(cls, v):
        return [] if v is None else v


class WordEntry(WordLookupPayload):
    """A completed lookup. Never mutated after construction."""

    model_config = ConfigDict(frozen=True)

    id: str
    image_url: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_payload(cls, payload: WordLookupPayload, image_url: Optional[str] = None) -> "WordEntry":
        return cls(
            **payload.model_dump(),
            id=str(uuid.uuid4()),
            image_url=image_url,
            created_at=datetime.now(timezone.utc),
        )


class LookupRequest(CamelModel):
    input: str = Field(min_length=1, description="A word, a phrase or a described intent")
    native_lang: Optional[Language] = None
    target_lang: Optional[Language] = None


class ImageRequest(CamelModel):
    term: str = Field(min_length=1)


class ImageResponse(CamelModel):
    image_url: Optional[str] = None


class VariantBadges(CamelModel):
    expression: str
    scenario_label: Optional[str] = None
    posture_label: Optional[str] = None


class EntryLabels(CamelModel):
    """Display labels for a WordEntry in one UI language"""

    term: str
    meme_warning: bool = False
    variants: List[VariantBadges] = Field(default_factory=list)
