"""
Search flow: lookup, then illustration, then a completed WordEntry.
"""

import logging
import threading
from typing import Optional

from lingopop.core.exceptions import InvalidInputError
from lingopop.models.language import Language
from lingopop.schemas.app_state import AppState
from lingopop.schemas.word import WordEntry
from lingopop.services.gemini_client import GeminiBackendClient
from lingopop.services.locale_table import oops_message


class LookupSession:
    """
    Tracks the displayed search result for one user.

    Overlapping searches are not cancelled; each gets a sequence number and
    only the most recently started one may replace the current result.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._latest = 0
        self.current: Optional[WordEntry] = None

    def begin(self) -> int:
        with self._lock:
            self._latest += 1
            self.current = None
            return self._latest

    def is_current(self, sequence: int) -> bool:
        with self._lock:
            return sequence == self._latest

    def complete(self, sequence: int, entry: WordEntry) -> bool:
        """Store ``entry`` unless a newer search has started. Returns whether it was kept."""
        with self._lock:
            if sequence != self._latest:
                return False
            self.current = entry
            return True


class LookupService:
    """Runs a full lookup for the search box"""

    def __init__(self, backend: GeminiBackendClient):
        self.backend = backend
        self.logger = logging.getLogger(__name__)

    async def search(
        self,
        user_input: str,
        state: AppState,
        native_lang: Optional[Language] = None,
        target_lang: Optional[Language] = None,
        session: Optional[LookupSession] = None,
    ) -> WordEntry:
        """
        Look up ``user_input`` and illustrate the resulting term.

        Language overrides default to the stored app state. The illustration
        never fails the search; a missing image leaves ``image_url`` unset.

        Raises:
            InvalidInputError: blank input
            LingoPopException: lookup failures from the backend client
        """
        text = (user_input or "").strip()
        if not text:
            raise InvalidInputError("Search input must not be blank")

        native = native_lang or state.native_lang
        target = target_lang or state.target_lang
        sequence = session.begin() if session else None

        payload = await self.backend.lookup_word(text, native, target)
        image_url = await self.backend.generate_word_image(payload.term)
        entry = WordEntry.from_payload(payload, image_url=image_url)

        if session is not None and not session.complete(sequence, entry):
            self.logger.info(
                f"Discarding stale lookup result for {text!r}",
                extra={"sequence": sequence},
            )
        return entry

    @staticmethod
    def failure_message(error: BaseException, lang: Language) -> str:
        return oops_message(lang, error)
