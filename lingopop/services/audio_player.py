"""
Audio playback collaborators for synthesized speech.

Gemini TTS returns raw 16-bit mono PCM, base64-encoded. Players accept that
payload and are fire-and-forget from the caller's point of view.
"""

import asyncio
import base64
import logging
import uuid
import wave
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union


class AudioPlayer(ABC):
    """Abstract base class for audio playback"""

    @abstractmethod
    async def play(self, base64_audio: str) -> None:
        """Decode and play a base64 PCM payload"""
        pass


class NullAudioPlayer(AudioPlayer):
    """Discards audio; used when no output device is configured"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.played = 0

    async def play(self, base64_audio: str) -> None:
        self.played += 1
        self.logger.debug(f"Discarding {len(base64_audio)} bytes of base64 audio")


class WavFileAudioPlayer(AudioPlayer):
    """Writes each utterance to a WAV file in an output directory"""

    def __init__(
        self,
        output_dir: Union[str, Path],
        sample_rate: int = 24000,
        channels: int = 1,
        sample_width: int = 2,
    ):
        self.logger = logging.getLogger(__name__)
        self.output_dir = Path(output_dir)
        self.sample_rate = sample_rate
        self.channels = channels
        self.sample_width = sample_width
        self.last_path: Optional[Path] = None

    async def play(self, base64_audio: str) -> None:
        pcm = base64.b64decode(base64_audio)
        path = self.output_dir / f"speech_{uuid.uuid4().hex}.wav"
        await asyncio.to_thread(self._write_wav, path, pcm)
        self.last_path = path
        self.logger.info(f"Wrote {len(pcm)} bytes of speech to {path}")

    def _write_wav(self, path: Path, pcm: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with wave.open(str(path), "wb") as wav:
            wav.setnchannels(self.channels)
            wav.setsampwidth(self.sample_width)
            wav.setframerate(self.sample_rate)
            wav.writeframes(pcm)
