"""
Prompt text and structured-output schemas for the Gemini requests.
"""

from typing import Iterable

from google.genai import types

from lingopop.models.language import Language, Posture, Scenario

SCENARIO_LABELS = ", ".join(s.value for s in Scenario)
POSTURE_LABELS = ", ".join(p.value for p in Posture)


def build_lookup_prompt(user_input: str, native_lang: Language, target_lang: Language) -> str:
    native = Language(native_lang).value
    target = Language(target_lang).value
    return f"""
You are a world-class sociolinguist and a "cool" language coach.
Analyze the input: "{user_input}".
The user's native language is "{native}" and they are learning "{target}".

The input could be a single word, a phrase, or a description of an INTENT.

CRITICAL RULES:
1. "scenario" MUST be EXACTLY ONE OF: {SCENARIO_LABELS}. DO NOT add explanations here.
2. "posture" MUST be EXACTLY ONE OF: {POSTURE_LABELS}. DO NOT add explanations here.
3. "pragmaticNote" (Cultural Logic) is MANDATORY. Explain the hidden social vibration in {native}. Why choose THIS expression?
4. "usageNote" is your "Coach's Private Talk". Write it in {native}.

Output JSON format:
{{
  "term": "The most appropriate primary term in {target}",
  "nativeDefinition": "Concise summary in {native}",
  "variants": [
    {{
      "expression": "Full phrase in {target}",
      "scenario": "Meme",
      "posture": "Confident",
      "pragmaticNote": "Explain the cultural vibe in {native}"
    }}
  ],
  "usageNote": "Detailed tip in {native}",
  "synonyms": ["concept1", "concept2"]
}}
"""


def build_image_prompt(term: str) -> str:
    return f"High-quality, vibrant vector art illustration related to: {term}"


def build_scan_prompt(native_lang: Language) -> str:
    return f"Analyze text in image. Target: {Language(native_lang).value}."


def build_story_prompt(terms: Iterable[str], native_lang: Language, target_lang: Language) -> str:
    word_list = ", ".join(terms)
    return (
        f"Funny story in {Language(target_lang).value} using: {word_list}. "
        f"Translate: {Language(native_lang).value}."
    )


def build_tutor_instruction(target_lang: Language) -> str:
    return f"Expert language tutor for {Language(target_lang).value}. Focus on slang and culture."


LOOKUP_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "term": types.Schema(type=types.Type.STRING),
        "nativeDefinition": types.Schema(type=types.Type.STRING),
        "variants": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "expression": types.Schema(type=types.Type.STRING),
                    "scenario": types.Schema(
                        type=types.Type.STRING,
                        description=f"Strictly one of: {SCENARIO_LABELS}",
                    ),
                    "posture": types.Schema(
                        type=types.Type.STRING,
                        description=f"Strictly one of: {POSTURE_LABELS}",
                    ),
                    "pragmaticNote": types.Schema(type=types.Type.STRING),
                },
                required=["expression", "scenario", "posture", "pragmaticNote"],
            ),
        ),
        "usageNote": types.Schema(type=types.Type.STRING),
        "synonyms": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
        ),
    },
    required=["term", "nativeDefinition", "variants", "usageNote"],
)

SCAN_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            "original": types.Schema(type=types.Type.STRING),
            "phonetic": types.Schema(type=types.Type.STRING),
            "translation": types.Schema(type=types.Type.STRING),
        },
    ),
)

STORY_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "story": types.Schema(type=types.Type.STRING),
        "translation": types.Schema(type=types.Type.STRING),
    },
)
