"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файла нет – используются настройки по‑умолчанию (файл сам не создаётся).
"""

import json
from pathlib import Path
from vecs3d.utils.logger import logger, set_level

DEFAULT_CONFIG = {
    "rel_tol": 1e-5,
    "abs_tol": 1e-6,
    "log_level": "INFO",
}

class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "vecs3d.json"):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.path = Path(path)
            instance._load()
            cls._instance = instance
        return cls._instance

    @classmethod
    def reset(cls):
        """Сбросить singleton (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                if not isinstance(self.data, dict):
                    raise ValueError("top-level JSON value must be an object")
                set_level(self["log_level"])
                logger.info("[Config] Loaded configuration.")
            except (OSError, ValueError, TypeError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = DEFAULT_CONFIG.copy()
                set_level(self["log_level"])
        else:
            logger.debug("[Config] No config file – using defaults.")
            self.data = DEFAULT_CONFIG.copy()
            set_level(self["log_level"])

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")
            raise

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        if key == "log_level":
            set_level(value)

    def get(self, key, default=None):
        return self.data.get(key, default)
