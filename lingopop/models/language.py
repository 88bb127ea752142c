"""
Closed set of languages offered for learning.

The enum value is both the display label and the language name embedded in
prompts sent to the generative backend.
"""

from enum import Enum


class Language(str, Enum):
    """Supported native/target languages"""
    ENGLISH = "English"
    CHINESE = "Chinese (Simplified)"
    SPANISH = "Spanish"
    FRENCH = "French"
    GERMAN = "German"
    ITALIAN = "Italian"
    JAPANESE = "Japanese"
    KOREAN = "Korean"
    RUSSIAN = "Russian"
    PORTUGUESE = "Portuguese"
    ARABIC = "Arabic"

    def __str__(self) -> str:
        return self.value


class Scenario(str, Enum):
    """Social context label of a pragmatic variant"""
    ACADEMIC = "Academic"
    FORMAL = "Formal"
    SOCIAL = "Social"
    MEME = "Meme"
    DAILY = "Daily"


class Posture(str, Enum):
    """Interpersonal tone label of a pragmatic variant"""
    NEUTRAL = "Neutral"
    FRIENDLY = "Friendly"
    IRONIC = "Ironic"
    RESERVED = "Reserved"
    DIRECT = "Direct"
    CONFIDENT = "Confident"


def first_label_token(value: str) -> str:
    """Reduce a backend label such as "Academic explanation" or "Meme/Slang" to its first token."""
    stripped = (value or "").strip()
    for index, char in enumerate(stripped):
        if char in (" ", "/"):
            return stripped[:index]
    return stripped
