# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
from typing import Dict, Optional, Protocol

from companion.utils.config import SOUND_VOLUME

logger = logging.getLogger(__name__)

AMBIENT_SOUNDS = ("forest", "wave", "rain")


class AudioPlayer(Protocol):
    volume: float

    def play(self) -> None: ...

    def pause(self) -> None: ...


class SoundController:
    """
    At most one ambient sound plays at a time: starting one pauses the others.
    A player that fails to start is reported as stopped.
    """

    def __init__(self, players: Dict[str, AudioPlayer], volume: float = SOUND_VOLUME):
        self._players = players
        self._volume = volume
        self.current: Optional[str] = None

    def is_playing(self, name: str) -> bool:
        return self.current == name

    @property
    def playing(self) -> Dict[str, bool]:
        return {name: self.is_playing(name) for name in AMBIENT_SOUNDS}

    def toggle(self, name: str) -> bool:
        """Flips one sound and returns whether it is now playing."""
        if name not in AMBIENT_SOUNDS:
            raise ValueError(f"Unknown ambient sound: {name}")

        if self.is_playing(name):
            self._pause(name)
            self.current = None
            return False

        self.stop_all()
        player = self._players.get(name)
        if player is None:
            logger.warning(f"🔇 No player available for {name} sound")
            return False

        try:
            player.volume = self._volume
            player.play()
        except Exception as e:
            logger.error(f"❌ Error with {name} sound: {e}")
            self.current = None
            return False

        self.current = name
        logger.info(f"🎵 Playing {name} sound")
        return True

    def stop_all(self):
        for name in AMBIENT_SOUNDS:
            self._pause(name)
        self.current = None

    def _pause(self, name: str):
        player = self._players.get(name)
        if player is None:
            return
        try:
            player.pause()
        except Exception as e:
            logger.warning(f"⚠️ Could not pause {name} sound: {e}")
