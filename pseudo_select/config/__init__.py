"""
Конфигурация экстрактора.

Модули:
- base: Pydantic-модели ExtractionConfig и ExtractorSettings
- loader: ConfigLoader и setup_logging
- schemas: JSON-схемы конфигурационных файлов
"""

from .base import ExtractionConfig, ExtractorSettings, ParserType
from .loader import ConfigLoader, setup_logging

__all__ = [
    "ExtractionConfig",
    "ExtractorSettings",
    "ParserType",
    "ConfigLoader",
    "setup_logging",
]
