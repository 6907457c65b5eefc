"""
Простой загрузчик/сохранитель конфигурации загрузчика в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from objmesh.utils.logger import logger

DEFAULT_CONFIG = {
    "loader": {
        "layout": "inlined",          # inlined | segmented
        "load_color_data": False,
        "validate_indices": True,
    },
    "log_level": "INFO",
}

LAYOUT_NAMES = ("inlined", "segmented")


class Config:
    """Объект конфигурации, привязанный к одному JSON‑файлу."""

    def __init__(self, path: str = "objmesh.json"):
        self.path = Path(path)
        self.data = {}
        self._load()

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                self.save()
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)

    # -----------------------------------------------------------------
    def loader_options(self) -> dict:
        """Проверенные параметры для ObjLoader (ключи секции "loader").

        Отсутствующие ключи берутся из DEFAULT_CONFIG.
        """
        section = dict(DEFAULT_CONFIG["loader"])
        section.update(self["loader"] or {})

        layout = str(section["layout"]).lower()
        if layout not in LAYOUT_NAMES:
            raise ValueError(
                f"[Config] loader.layout must be one of {LAYOUT_NAMES}, got {section['layout']!r}"
            )
        for key in ("load_color_data", "validate_indices"):
            if not isinstance(section[key], bool):
                raise ValueError(f"[Config] loader.{key} must be a boolean")

        return {
            "layout": layout,
            "load_color_data": section["load_color_data"],
            "validate_indices": section["validate_indices"],
        }
