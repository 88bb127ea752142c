"""
Persistent key-value store for the serialized AppState.

The state is loaded once at startup and written through on every change. The
backing file is a JSON object so other keys written next to the config
survive a save.
"""

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from lingopop.core.exceptions import ConfigStoreError
from lingopop.schemas.app_state import AppState

logger = logging.getLogger(__name__)


class AppStateStore:
    """JSON-file backed store holding one AppState under a fixed key"""

    def __init__(self, path: Union[str, Path], key: str = "lingopop_config"):
        self.path = Path(path)
        self.key = key

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Config store {self.path} unreadable, ignoring it: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> AppState:
        """Return the stored state, or defaults when nothing valid is stored."""
        raw = self._read_all().get(self.key)
        if raw is None:
            return AppState()
        try:
            # Values are stored serialized, the way a browser key-value store keeps them
            payload = json.loads(raw) if isinstance(raw, str) else raw
            return AppState.model_validate(payload)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Stored app state under {self.key!r} is invalid, using defaults: {e}")
            return AppState()

    def save(self, state: AppState) -> AppState:
        data = self._read_all()
        data[self.key] = state.model_dump_json(by_alias=True)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".lingopop_", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise ConfigStoreError(f"Could not write app state to {self.path}: {e}") from e
        logger.info(
            "App state saved",
            extra={"native_lang": state.native_lang.value, "target_lang": state.target_lang.value},
        )
        return state
