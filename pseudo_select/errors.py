"""
Исключения интерпретатора псевдо-селекторов.

Все ошибки фатальны для вызова resolve/extract: повторов и частичных
результатов нет, экстрактор записей пробрасывает их без изменений.
"""

from typing import Any, Dict, Optional


class PseudoSelectorError(Exception):
    """Базовая ошибка разбора и применения селектора."""

    def __init__(
        self,
        message: str,
        *,
        selector: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.selector = selector
        self.context = context or {}


class SelectorSyntaxError(PseudoSelectorError, ValueError):
    """Селектор не удалось разобрать (в том числе пробелы в аргументах псевдо-класса)."""

    def __init__(
        self,
        message: str,
        *,
        selector: Optional[str] = None,
        position: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, selector=selector, context=context)
        self.position = position


class MissingContextError(PseudoSelectorError):
    """Псевдо-класс стоит в начале селектора, а контекст не передан."""


class UnknownPseudoError(PseudoSelectorError):
    """Псевдо-класс отсутствует в реестре."""

    def __init__(
        self,
        message: str,
        *,
        name: str,
        selector: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, selector=selector, context=context)
        self.name = name
