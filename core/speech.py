"""
Speech output.

speak() is fire-and-forget and interrupts whatever is still being said.
Pyttsx3Speaker runs the engine on its own daemon thread so the caller (the
Qt main thread) never blocks on synthesis.
"""
from __future__ import annotations
import logging
import queue
import threading
from abc import ABC, abstractmethod
from typing import List, Optional

import pyttsx3

logger = logging.getLogger(__name__)


class Speaker(ABC):
    @abstractmethod
    def speak(self, text: str) -> None:
        """Say *text*, cancelling any utterance in progress."""

    def close(self) -> None:
        pass


class RecordingSpeaker(Speaker):
    """Collects utterances instead of playing them. Used by tests and --no-speech."""

    def __init__(self) -> None:
        self.spoken: List[str] = []

    def speak(self, text: str) -> None:
        text = (text or "").strip()
        if text:
            self.spoken.append(text)


class Pyttsx3Speaker(Speaker):
    """
    Parameters
    ----------
    rate : int
        Words per minute.
    volume : float
        0.0 – 1.0.
    voice_id : str, optional
        pyttsx3 voice id; the system default when None.
    """

    def __init__(self, rate: int = 180, volume: float = 1.0, voice_id: Optional[str] = None) -> None:
        self._rate = rate
        self._volume = volume
        self._voice_id = voice_id
        self._queue: "queue.Queue[Optional[str]]" = queue.Queue()
        self._engine = None
        self._ready = threading.Event()
        self._error: Optional[Exception] = None
        self._thread = threading.Thread(target=self._worker, name="TTS-Worker", daemon=True)
        self._thread.start()
        self._ready.wait(timeout=5.0)
        if self._error is not None:
            raise RuntimeError(f"Cannot start speech engine: {self._error}") from self._error

    # ------------------------------------------------------------------
    def speak(self, text: str) -> None:
        text = (text or "").strip()
        if not text:
            return
        # drop anything still waiting; only the newest request matters
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                break
        if self._engine is not None:
            self._engine.stop()
        self._queue.put(text)

    def close(self, timeout: float = 1.0) -> None:
        self._queue.put(None)
        self._thread.join(timeout=timeout)

    # ------------------------------------------------------------------
    def _worker(self) -> None:
        try:
            engine = pyttsx3.init()
            engine.setProperty("rate", self._rate)
            engine.setProperty("volume", self._volume)
            if self._voice_id is not None:
                engine.setProperty("voice", self._voice_id)
        except Exception as exc:  # driver missing / no audio backend
            self._error = exc
            self._ready.set()
            return

        self._engine = engine
        self._ready.set()

        while True:
            text = self._queue.get()
            if text is None:
                break
            logger.info("[TTS] >> %r", text)
            try:
                engine.say(text)
                engine.runAndWait()
            except RuntimeError as exc:
                logger.warning("[TTS] utterance failed: %s", exc)
        logger.debug("[TTS] worker exited")
