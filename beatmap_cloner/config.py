# beatmap_cloner/config.py

import json
from pathlib import Path
from typing import Optional

DEFAULT_CLONE_OPTIONS = {
    "keep_timing_points": True,
    "remove_skin_files": True,
    "reset_sample_set": True,
    "reset_difficulty": True,
    "remove_colours": True,
}


class AppConfig:
    def __init__(self, config_file: Path | str = 'config.json'):
        self.config_file = Path(config_file)
        self._settings = self._load_config()

    def _load_config(self) -> dict:
        if self.config_file.exists():
            with open(self.config_file, 'r', encoding='utf-8') as f:
                return json.load(f)
        else:
            default_settings = {
                "songs_directory": "",
                "default_game_mode": "taiko",
                "log_file": "logs/app.log",
                "clone_options": dict(DEFAULT_CLONE_OPTIONS),
            }
            self._save_config(default_settings)
            return default_settings

    def _save_config(self, settings: dict):
        if self.config_file.parent != Path('.'):
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=4)

    def get_setting(self, key: str, default=None):
        return self._settings.get(key, default)

    def set_setting(self, key: str, value):
        self._settings[key] = value
        self._save_config(self._settings)

    @property
    def songs_directory(self) -> Optional[Path]:
        value = self._settings.get("songs_directory")
        return Path(value) if value else None

    @property
    def default_game_mode(self) -> str:
        return self._settings.get("default_game_mode", "taiko")

    @property
    def log_file(self) -> Optional[Path]:
        value = self._settings.get("log_file")
        return Path(value) if value else None

    @property
    def clone_options(self) -> dict:
        options = dict(DEFAULT_CLONE_OPTIONS)
        options.update(self._settings.get("clone_options", {}))
        return options
