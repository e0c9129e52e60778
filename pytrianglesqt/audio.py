"""Fire-and-forget sound cues.

Each ``play`` restarts the cue from the beginning, cutting off a previous
playback of the same cue. Cues without a usable source file are muted.
QSoundEffect only decodes uncompressed WAV files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QSoundEffect

logger = logging.getLogger(__name__)


class SoundCue(QObject):
    """A single sound effect that can be triggered repeatedly."""

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        volume: float = 1.0,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._effect: Optional[QSoundEffect] = None
        self._path = Path(path) if path is not None else None
        self.play_count = 0

        if self._path is None:
            return
        if not self._path.is_file():
            logger.warning("Sound file %s not found; cue is muted", self._path)
            return

        self._effect = QSoundEffect(self)
        self._effect.setSource(QUrl.fromLocalFile(str(self._path.resolve())))
        self._effect.setVolume(float(volume))

    @property
    def muted(self) -> bool:
        return self._effect is None

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def play(self) -> None:
        """Restart playback from the beginning."""
        self.play_count += 1
        if self._effect is None:
            return
        self._effect.stop()
        self._effect.play()
