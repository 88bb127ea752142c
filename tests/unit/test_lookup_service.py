import asyncio

import pytest

from lingopop.core.exceptions import BackendError, InvalidInputError
from lingopop.models.language import Language
from lingopop.schemas.app_state import AppState
from lingopop.schemas.word import WordLookupPayload
from lingopop.services.lookup_service import LookupService, LookupSession


def _payload(term):
    return WordLookupPayload.model_validate({
        "term": term,
        "nativeDefinition": "d",
        "usageNote": "u",
        "variants": [{"expression": term, "scenario": "Daily", "posture": "Neutral", "pragmaticNote": "n"}],
    })


class StubBackend:
    """Records calls; lookups can be held until released."""

    def __init__(self, image="data:image/png;base64,AAAA", error=None):
        self.image = image
        self.error = error
        self.lookups = []
        self.images = []
        self.gates = {}

    async def lookup_word(self, user_input, native_lang, target_lang):
        self.lookups.append((user_input, native_lang, target_lang))
        if self.error:
            raise self.error
        gate = self.gates.get(user_input)
        if gate is not None:
            await gate.wait()
        return _payload(user_input)

    async def generate_word_image(self, term):
        self.images.append(term)
        return self.image


@pytest.mark.asyncio
async def test_search_builds_entry_with_image():
    backend = StubBackend()
    service = LookupService(backend)
    entry = await service.search("  slay  ", AppState())

    assert entry.term == "slay"
    assert entry.image_url == "data:image/png;base64,AAAA"
    assert backend.lookups == [("slay", Language.CHINESE, Language.ENGLISH)]
    assert backend.images == ["slay"]


@pytest.mark.asyncio
async def test_search_language_overrides():
    backend = StubBackend()
    await LookupService(backend).search(
        "hola", AppState(), native_lang=Language.ENGLISH, target_lang=Language.SPANISH
    )
    assert backend.lookups[0][1:] == (Language.ENGLISH, Language.SPANISH)


@pytest.mark.asyncio
async def test_search_without_image():
    entry = await LookupService(StubBackend(image=None)).search("slay", AppState())
    assert entry.image_url is None


@pytest.mark.asyncio
async def test_blank_input_is_rejected_without_backend_call():
    backend = StubBackend()
    with pytest.raises(InvalidInputError):
        await LookupService(backend).search("   ", AppState())
    assert backend.lookups == []


@pytest.mark.asyncio
async def test_lookup_failure_skips_image():
    backend = StubBackend(error=BackendError("quota exhausted"))
    with pytest.raises(BackendError):
        await LookupService(backend).search("slay", AppState())
    assert backend.images == []


@pytest.mark.asyncio
async def test_session_keeps_latest_search_only():
    backend = StubBackend()
    backend.gates["first"] = asyncio.Event()
    service = LookupService(backend)
    session = LookupSession()

    slow = asyncio.create_task(service.search("first", AppState(), session=session))
    await asyncio.sleep(0)
    latest = await service.search("second", AppState(), session=session)
    backend.gates["first"].set()
    stale = await slow

    assert stale.term == "first"
    assert session.current == latest


def test_session_begin_clears_current(make_entry):
    session = LookupSession()
    seq = session.begin()
    assert session.complete(seq, make_entry())
    assert session.current is not None

    newer = session.begin()
    assert session.current is None
    assert not session.is_current(seq)
    assert session.is_current(newer)


def test_failure_message_localized():
    message = LookupService.failure_message(BackendError("boom"), Language.CHINESE)
    assert message == "哎呀，出了点问题: boom"
