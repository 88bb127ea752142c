# Business logic services

from .gemini_client import GeminiBackendClient, is_not_found_error, strip_data_uri
from .audio_player import AudioPlayer, NullAudioPlayer, WavFileAudioPlayer
from .config_store import AppStateStore
from .lookup_service import LookupService, LookupSession
from .locale_table import (
    TRANSLATIONS,
    get_translation,
    scenario_label,
    posture_label,
    is_meme_term,
    oops_message,
)

__all__ = [
    'GeminiBackendClient',
    'is_not_found_error',
    'strip_data_uri',
    'AudioPlayer',
    'NullAudioPlayer',
    'WavFileAudioPlayer',
    'AppStateStore',
    'LookupService',
    'LookupSession',
    'TRANSLATIONS',
    'get_translation',
    'scenario_label',
    'posture_label',
    'is_meme_term',
    'oops_message',
]
