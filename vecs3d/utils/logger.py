# vecs3d/utils/logger.py
# ---------------------------------------------------------------
# Логгер пакета. Библиотека сама не трогает root‑логгер:
# вывод включает приложение через init_logger().
# ---------------------------------------------------------------

import logging
from typing import Union

logger = logging.getLogger("vecs3d")
logger.addHandler(logging.NullHandler())

def init_logger(level: Union[int, str] = logging.INFO):
    """Настроить вывод в консоль (для приложений и отладки)."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logger

def set_level(level: Union[int, str]) -> None:
    """Уровень логгера пакета: число или имя ("DEBUG", "info", ...)."""
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
