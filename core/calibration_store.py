"""
Calibration persistence behind a small load/save interface.

Storage problems are never an error for the caller: load() falls back
to the default Calibration and save() keeps going, both with a warning.
"""
from __future__ import annotations
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from domain.models import Calibration

logger = logging.getLogger(__name__)


class CalibrationStore(ABC):
    """Base class for calibration persistence backends."""

    @abstractmethod
    def load(self) -> Calibration:
        """Return the saved calibration, or the defaults when none is usable."""

    @abstractmethod
    def save(self, calibration: Calibration) -> None:
        """Persist *calibration*, replacing whatever was stored before."""


class InMemoryCalibrationStore(CalibrationStore):
    """Keeps the serialised blob in memory. Used by tests and headless runs."""

    def __init__(self, blob: Optional[str] = None) -> None:
        self.blob = blob
        self.saves = 0

    def load(self) -> Calibration:
        return _decode(self.blob, source="memory")

    def save(self, calibration: Calibration) -> None:
        self.blob = json.dumps(calibration.to_dict())
        self.saves += 1


class JsonCalibrationStore(CalibrationStore):
    """
    Stores the calibration as a JSON object on disk.

    Parameters
    ----------
    path : Path
        Settings file; parent directories are created on save.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Calibration:
        if not self._path.exists():
            logger.info("No saved calibration at %s, using defaults", self._path)
            return Calibration()
        try:
            blob = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Cannot read calibration %s (%s), using defaults", self._path, exc)
            return Calibration()
        return _decode(blob, source=str(self._path))

    def save(self, calibration: Calibration) -> None:
        """Write the settings file. A write failure is logged and the caller keeps its copy."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(calibration.to_dict(), indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("Cannot save calibration to %s (%s), keeping it in memory", self._path, exc)
            return
        logger.debug("Calibration saved to %s", self._path)


def _decode(blob: Optional[str], source: str) -> Calibration:
    if not blob:
        return Calibration()
    try:
        return Calibration.from_dict(json.loads(blob))
    except (ValueError, KeyError, TypeError) as exc:
        logger.warning("Malformed calibration data in %s (%s), using defaults", source, exc)
        return Calibration()
