"""Sound effects and background music."""

from __future__ import annotations

from pathlib import Path

import pygame

from topiman.game import Event

_EFFECT_FILES = {
    "coin": "collect_coin1.mp3",
    "victory": "victory.wav",
    "defeat": "defeat1.mp3",
    "freeze": "freeze.mp3",
}

_MUSIC_FILES = {
    "game": "game_background_music1.mp3",
    "menu": "menu_background_music1.mp3",
    "victory": "victory_background_music1.mp3",
    "defeat": "defeat_background_music1.mp3",
}

_EVENT_EFFECTS = {
    Event.COIN: "coin",
    Event.FREEZE: "freeze",
    Event.ANTISEPTIC: "victory",
}


class SoundManager:
    """Loads the game's sounds and plays them; silent when audio is off.

    ``last_effect`` and ``current_music`` record the files most recently
    asked for, whether or not audio is available.
    """

    def __init__(self, resource_dir: str | Path, enabled: bool = True) -> None:
        self.sound_dir = Path(resource_dir) / "sounds_and_music"
        self.effect_paths = {
            name: self.sound_dir / file for name, file in _EFFECT_FILES.items()
        }
        self.music_paths = {
            name: self.sound_dir / file for name, file in _MUSIC_FILES.items()
        }
        self.last_effect: Path | None = None
        self.current_music: Path | None = None
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self.enabled = enabled and self._open_mixer()
        if self.enabled:
            for name, path in self.effect_paths.items():
                try:
                    self._sounds[name] = pygame.mixer.Sound(str(path))
                except (pygame.error, FileNotFoundError):
                    pass

    @staticmethod
    def _open_mixer() -> bool:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=44100, buffer=2048)
        except pygame.error:
            return False
        return True

    def __enter__(self) -> "SoundManager":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _effect(self, name: str) -> Path:
        path = self.effect_paths[name]
        self.last_effect = path
        sound = self._sounds.get(name)
        if sound is not None:
            sound.play()
        return path

    def _music(self, name: str) -> None:
        path = self.music_paths[name]
        self.current_music = path
        if not self.enabled:
            return
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(loops=-1)
        except (pygame.error, FileNotFoundError):
            pass

    def play_coin(self) -> Path:
        return self._effect("coin")

    def play_victory(self) -> Path:
        return self._effect("victory")

    def play_defeat(self) -> Path:
        return self._effect("defeat")

    def play_freeze(self) -> Path:
        return self._effect("freeze")

    def play_event(self, event: Event | None) -> Path | None:
        """Play the effect belonging to a game event, if it has one."""
        name = _EVENT_EFFECTS.get(event) if event is not None else None
        if name is None:
            return None
        return self._effect(name)

    def play_game_music(self) -> None:
        self._music("game")

    def play_menu_music(self) -> None:
        self._music("menu")

    def play_victory_music(self) -> None:
        self._music("victory")

    def play_defeat_music(self) -> None:
        self._music("defeat")

    def stop_music(self) -> None:
        self.current_music = None
        if self.enabled:
            pygame.mixer.music.stop()

    def close(self) -> None:
        """Stop the music and release the loaded sounds."""
        self.stop_music()
        for sound in self._sounds.values():
            sound.stop()
        self._sounds.clear()