# vecs3d/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger    – логгер пакета "vecs3d" (с NullHandler)
    * init_logger – включить вывод в консоль (basicConfig)
    * set_level – смена уровня логгера пакета
    * Config    – JSON‑конфигурация (допуски сравнения, уровень лога)
"""

from .logger import logger, init_logger, set_level
from .config import Config, DEFAULT_CONFIG

__all__ = ["logger", "init_logger", "set_level", "Config", "DEFAULT_CONFIG"]
