import pytest
from pydantic import ValidationError

from lingopop.models.language import Language, Posture, Scenario, first_label_token
from lingopop.schemas.app_state import AppState
from lingopop.schemas.word import PragmaticVariant, WordEntry, WordLookupPayload


def _variant(**overrides):
    data = {
        "expression": "No cap",
        "scenario": "Meme",
        "posture": "Confident",
        "pragmaticNote": "Gen Z sincerity marker",
    }
    data.update(overrides)
    return data


@pytest.mark.parametrize("raw,expected", [
    ("Academic explanation", "Academic"),
    ("Meme/Slang", "Meme"),
    ("  Daily  ", "Daily"),
    ("", ""),
])
def test_first_label_token(raw, expected):
    assert first_label_token(raw) == expected


def test_variant_labels_are_case_insensitive():
    variant = PragmaticVariant.model_validate(_variant(scenario="formal", posture="DIRECT"))
    assert variant.scenario is Scenario.FORMAL
    assert variant.posture is Posture.DIRECT


def test_unknown_labels_fall_back():
    variant = PragmaticVariant.model_validate(_variant(scenario="Poetic", posture=None))
    assert variant.scenario is Scenario.DAILY
    assert variant.posture is Posture.NEUTRAL


def test_payload_requires_term_and_variants():
    with pytest.raises(ValidationError):
        WordLookupPayload.model_validate({
            "term": "   ",
            "nativeDefinition": "d",
            "usageNote": "u",
            "variants": [_variant()],
        })
    with pytest.raises(ValidationError):
        WordLookupPayload.model_validate({
            "term": "x",
            "nativeDefinition": "d",
            "usageNote": "u",
            "variants": [],
        })


def test_payload_null_synonyms_become_empty():
    payload = WordLookupPayload.model_validate({
        "term": "no cap",
        "nativeDefinition": "不骗你",
        "usageNote": "u",
        "variants": [_variant()],
        "synonyms": None,
    })
    assert payload.synonyms == []


def test_entry_from_payload_assigns_identity():
    payload = WordLookupPayload.model_validate({
        "term": "no cap",
        "nativeDefinition": "不骗你",
        "usageNote": "u",
        "variants": [_variant(), _variant(expression="For real", scenario="Daily")],
    })
    first = WordEntry.from_payload(payload, image_url="data:image/png;base64,AAAA")
    second = WordEntry.from_payload(payload)

    assert first.id != second.id
    assert first.created_at.tzinfo is not None
    assert first.image_url == "data:image/png;base64,AAAA"
    assert second.image_url is None
    assert [v.expression for v in first.variants] == ["No cap", "For real"]


def test_entry_is_immutable(make_entry):
    entry = make_entry()
    with pytest.raises(ValidationError):
        entry.term = "changed"


def test_entry_serializes_camel_case(make_entry):
    data = make_entry().model_dump(mode="json", by_alias=True)
    assert {"id", "term", "nativeDefinition", "usageNote", "imageUrl", "createdAt"} <= set(data)
    assert data["variants"][0]["pragmaticNote"] == "note"
    assert data["variants"][0]["scenario"] == "Meme"


def test_app_state_defaults():
    state = AppState()
    assert state.native_lang is Language.CHINESE
    assert state.target_lang is Language.ENGLISH
    assert state.has_onboarded is False


def test_app_state_accepts_wire_names():
    state = AppState.model_validate({"nativeLang": "Japanese", "targetLang": "French", "hasOnboarded": True})
    assert state.native_lang is Language.JAPANESE
    assert state.target_lang is Language.FRENCH
    assert state.has_onboarded is True


def test_app_state_rejects_unknown_language():
    with pytest.raises(ValidationError):
        AppState.model_validate({"nativeLang": "Klingon"})
