"""
Shared fixtures: an in-memory stand-in for the google-genai client so that no
test touches the network.
"""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from lingopop.config.settings import GeminiSettings
from lingopop.models.language import Posture, Scenario
from lingopop.schemas.word import PragmaticVariant, WordEntry
from lingopop.services.gemini_client import GeminiBackendClient


class FakeModels:
    """Replays queued outcomes for ``generate_content`` and records each call."""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def generate_content(self, *, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if not self.outcomes:
            raise AssertionError(f"Unexpected generate_content call for {model}")
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class FakeChat:
    def __init__(self, owner, reply):
        self.owner = owner
        self.reply = reply

    def send_message(self, message):
        self.owner.sent.append(message)
        if isinstance(self.reply, BaseException):
            raise self.reply
        return SimpleNamespace(text=self.reply)


class FakeChats:
    def __init__(self, reply):
        self.reply = reply
        self.created = []
        self.sent = []

    def create(self, *, model, config=None, history=None):
        self.created.append({"model": model, "config": config, "history": history})
        return FakeChat(self, self.reply)


class FakeGenaiClient:
    def __init__(self, outcomes=(), chat_reply="ok"):
        self.models = FakeModels(outcomes)
        self.chats = FakeChats(chat_reply)


class CountingFactory:
    """Client factory that hands out the same fake and counts handle creations."""

    def __init__(self, client):
        self.client = client
        self.created = 0

    def __call__(self):
        self.created += 1
        return self.client


def _text_response(text):
    return SimpleNamespace(text=text, candidates=[])


def _inline_response(*datas, text=None):
    parts = [SimpleNamespace(text=text, inline_data=None)] if text else []
    parts += [
        SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type="image/png"))
        for data in datas
    ]
    return SimpleNamespace(
        text=text,
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))],
    )


def _make_entry(term="slay", scenario=Scenario.MEME, posture=Posture.CONFIDENT):
    return WordEntry(
        id=f"id-{term}",
        term=term,
        native_definition="definition",
        variants=[
            PragmaticVariant(
                expression=f"{term} expression",
                scenario=scenario,
                posture=posture,
                pragmatic_note="note",
            )
        ],
        usage_note="usage",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


LOOKUP_JSON = """
{
  "term": "break a leg",
  "nativeDefinition": "祝你好运",
  "variants": [
    {"expression": "Break a leg!", "scenario": "Daily", "posture": "Friendly", "pragmaticNote": "剧场习语"},
    {"expression": "Best of luck", "scenario": "Formal", "posture": "Reserved", "pragmaticNote": "正式场合"}
  ],
  "usageNote": "别对迷信的人说",
  "synonyms": ["good luck"]
}
"""


@pytest.fixture
def gemini_settings():
    return GeminiSettings(GEMINI_API_KEY="test-key")


@pytest.fixture
def text_response():
    return _text_response


@pytest.fixture
def inline_response():
    return _inline_response


@pytest.fixture
def make_entry():
    return _make_entry


@pytest.fixture
def lookup_json():
    return LOOKUP_JSON


@pytest.fixture
def fake_client():
    def _build(outcomes=(), chat_reply="ok"):
        return FakeGenaiClient(outcomes, chat_reply)
    return _build


@pytest.fixture
def make_backend(gemini_settings):
    """Build a backend client around a fake; returns (backend, fake, factory)."""

    def _build(outcomes=(), chat_reply="ok", audio_player=None):
        fake = FakeGenaiClient(outcomes, chat_reply)
        factory = CountingFactory(fake)
        backend = GeminiBackendClient(
            gemini_settings=gemini_settings,
            client_factory=factory,
            audio_player=audio_player,
        )
        return backend, fake, factory

    return _build


@pytest.fixture
def make_container(tmp_path):
    """Service container wired to a fake client and a temporary config store."""
    from lingopop.config.settings import Settings, StorageSettings
    from lingopop.core.dependencies import ServiceContainer
    from lingopop.services.audio_player import NullAudioPlayer
    from lingopop.services.config_store import AppStateStore

    def _build(outcomes=(), chat_reply="ok"):
        fake = FakeGenaiClient(outcomes, chat_reply)
        settings = Settings(
            _env_file=None,
            gemini=GeminiSettings(GEMINI_API_KEY="test-key"),
            storage=StorageSettings(
                config_path=str(tmp_path / "lingopop_config.json"),
                audio_output_dir=str(tmp_path / "audio"),
            ),
        )
        container = ServiceContainer(
            settings=settings,
            client_factory=CountingFactory(fake),
            audio_player=NullAudioPlayer(),
            state_store=AppStateStore(settings.get_config_path()),
        )
        return container, fake

    return _build
