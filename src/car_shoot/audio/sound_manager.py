"""
sound_manager.py
----------------
pygame mixer wrapper behind the simulation's audio sink.

Missing sound files or a missing audio device leave the game silent with a
warning instead of stopping it.
"""

import os

import pygame

from car_shoot.core.debug.debug_logger import DebugLogger

ASSET_ROOT = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets", "audio")


class SoundManager:
    ASSET_PATHS = {
        "bgm": {
            "game_bgm": "bgm/GameBGM.ogg",
        },
        "sfx": {
            "player_shoot": "sfx/PlayerShoot.wav",
            "impact": "sfx/Impact.wav",
            "enemy_destroy": "sfx/EnemyDestroy.wav",
            "power_up": "sfx/PowerUp.wav",
            "game_over": "sfx/GameOver.wav",
        },
    }

    def __init__(self, asset_root: str = ASSET_ROOT):
        self.asset_root = asset_root
        self.sfx = {}
        self.bgm = {}
        self.current_bgm_id = None
        self.enabled = self._init_mixer()
        if self.enabled:
            self.load_assets()

    def _init_mixer(self) -> bool:
        try:
            pygame.mixer.init()
        except pygame.error as e:
            DebugLogger.warn(f"Audio unavailable, running silent: {e}", category="audio")
            return False
        return True

    def load_assets(self):
        for name, route in self.ASSET_PATHS["bgm"].items():
            self.load_bgm(name, os.path.join(self.asset_root, route))
        for name, route in self.ASSET_PATHS["sfx"].items():
            self.load_sfx(name, os.path.join(self.asset_root, route))
        DebugLogger.init_sub(f"Audio: {len(self.sfx)} cue(s), {len(self.bgm)} track(s)")

    def load_sfx(self, name, path):
        if not os.path.exists(path):
            DebugLogger.warn(f"Missing sound '{name}' at {path}", category="audio")
            return
        try:
            self.sfx[name] = pygame.mixer.Sound(path)
        except pygame.error as e:
            DebugLogger.warn(f"Failed to load sound '{name}': {e}", category="audio")

    def load_bgm(self, name, path):
        if not os.path.exists(path):
            DebugLogger.warn(f"Missing track '{name}' at {path}", category="audio")
            return
        self.bgm[name] = path

    # ===========================================================
    # Playback
    # ===========================================================
    def play_sfx(self, name: str, volume: float = 1.0):
        """Play a one-shot cue. Unknown cues are skipped."""
        sound = self.sfx.get(name)
        if sound is None:
            DebugLogger.trace(f"Cue '{name}' not loaded", category="audio")
            return
        sound.set_volume(min(max(volume, 0.0), 1.0))
        sound.play()

    def play_music(self, name: str, volume: float = 1.0):
        """Loop a background track."""
        if self.current_bgm_id == name:
            return
        route = self.bgm.get(name)
        if route is None:
            DebugLogger.trace(f"Track '{name}' not loaded", category="audio")
            return
        pygame.mixer.music.load(route)
        pygame.mixer.music.set_volume(min(max(volume, 0.0), 1.0))
        pygame.mixer.music.play(loops=-1)
        self.current_bgm_id = name

    def stop_music(self):
        if self.enabled:
            pygame.mixer.music.stop()
        self.current_bgm_id = None
