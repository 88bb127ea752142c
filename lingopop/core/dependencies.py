"""
Dependency injection setup for FastAPI.
Provides the service container and per-request dependency providers.
"""

from fastapi import Depends, Request
from typing import Optional
import logging
import threading

from lingopop.config.settings import Settings, get_settings
from lingopop.schemas.app_state import AppState
from lingopop.services.audio_player import AudioPlayer, WavFileAudioPlayer
from lingopop.services.config_store import AppStateStore
from lingopop.services.gemini_client import ClientFactory, GeminiBackendClient
from lingopop.services.lookup_service import LookupService, LookupSession


logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for the application's services and its explicit config object.

    The AppState is read once from the store and every update is written
    through before it becomes visible to other requests.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: Optional[ClientFactory] = None,
        audio_player: Optional[AudioPlayer] = None,
        state_store: Optional[AppStateStore] = None,
    ):
        self._settings = settings
        self._client_factory = client_factory
        self._audio_player = audio_player
        self._state_store = state_store
        self._backend: Optional[GeminiBackendClient] = None
        self._lookup_service: Optional[LookupService] = None
        self._lookup_session: Optional[LookupSession] = None
        self._app_state: Optional[AppState] = None
        self._initialized = False
        self._lock = threading.RLock()

    def _initialize(self) -> None:
        with self._lock:
            if self._initialized:
                return

            logger.info("Initializing service container")
            settings = self._settings or get_settings()
            self._settings = settings

            if self._state_store is None:
                self._state_store = AppStateStore(
                    settings.get_config_path(), key=settings.storage.config_key
                )
            self._app_state = self._state_store.load()

            if self._audio_player is None:
                self._audio_player = WavFileAudioPlayer(
                    settings.get_audio_output_dir(),
                    sample_rate=settings.gemini.tts_sample_rate,
                )

            self._backend = GeminiBackendClient(
                gemini_settings=settings.gemini,
                client_factory=self._client_factory,
                audio_player=self._audio_player,
            )
            self._lookup_service = LookupService(self._backend)
            self._lookup_session = LookupSession()
            self._initialized = True

            if not settings.gemini.api_key and self._client_factory is None:
                logger.warning("No Gemini API key configured; backend calls will fail")
            logger.info("Service container initialized")

    async def initialize_services(self) -> None:
        self._initialize()

    async def cleanup_services(self) -> None:
        with self._lock:
            self._backend = None
            self._lookup_service = None
            self._lookup_session = None
            self._initialized = False
        logger.info("Service container cleaned up")

    def get_settings(self) -> Settings:
        self._initialize()
        return self._settings

    def get_backend(self) -> GeminiBackendClient:
        self._initialize()
        return self._backend

    def get_lookup_service(self) -> LookupService:
        self._initialize()
        return self._lookup_service

    def get_lookup_session(self) -> LookupSession:
        self._initialize()
        return self._lookup_session

    def get_app_state(self) -> AppState:
        self._initialize()
        return self._app_state

    def update_app_state(self, state: AppState) -> AppState:
        self._initialize()
        with self._lock:
            saved = self._state_store.save(state)
            self._app_state = saved
        return saved


# Global service container instance
service_container = ServiceContainer()


def get_service_container(request: Request) -> ServiceContainer:
    return getattr(request.app.state, "service_container", None) or service_container


def get_backend_client(
    container: ServiceContainer = Depends(get_service_container),
) -> GeminiBackendClient:
    return container.get_backend()
