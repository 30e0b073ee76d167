"""
Pseudo Select - псевдо-классы jQuery поверх CSS-селекторов BeautifulSoup.

Основные компоненты:
- parsers: Разбор гибридных селекторов и интерпретатор resolve
- query: Document и NodeSet поверх BeautifulSoup/soupsieve
- handlers: Извлечение табличных записей (extract)
- config: Конфигурация (ExtractionConfig, ExtractorSettings, ConfigLoader)
- errors: Исключения

Версия: 1.0.0
"""

__version__ = "1.0.0"

from .errors import (
    PseudoSelectorError,
    SelectorSyntaxError,
    MissingContextError,
    UnknownPseudoError,
)

from .query import Document, NodeSet, load

from .parsers import PSEUDOS, resolve, tokenize, parse_pseudo

from .handlers import TableRecordExtractor, extract

from .config import ExtractionConfig, ExtractorSettings, ConfigLoader, setup_logging

__all__ = [
    # Исключения
    "PseudoSelectorError",
    "SelectorSyntaxError",
    "MissingContextError",
    "UnknownPseudoError",
    # Движок запросов
    "Document",
    "NodeSet",
    "load",
    # Интерпретатор
    "PSEUDOS",
    "resolve",
    "tokenize",
    "parse_pseudo",
    # Извлечение
    "TableRecordExtractor",
    "extract",
    # Конфигурация
    "ExtractionConfig",
    "ExtractorSettings",
    "ConfigLoader",
    "setup_logging",
]
