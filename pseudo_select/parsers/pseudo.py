"""
Разбор гибридного селектора на сегменты.

Селектор вида ``section p:eq(1) span:closest(div)`` разбивается на
чередующиеся сегменты: обычный CSS и вызовы псевдо-классов. Аргументы
псевдо-класса разделяются запятыми; аргумент из одних ASCII-цифр
становится int, остальные остаются строками.

Ограничение: пробелы внутри аргумента (``:closest(#main section)``)
не поддерживаются и приводят к SelectorSyntaxError.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union
import re

from ..errors import SelectorSyntaxError

Argument = Union[int, str]

_R_INT = re.compile(r"[0-9]+")
_WHITESPACE = " \t\n\r\f"


class SegmentKind(str, Enum):
    """Тип сегмента селектора."""

    PLAIN = "plain"  # Обычный CSS-селектор
    PSEUDO = "pseudo"  # Вызов псевдо-класса


@dataclass(frozen=True)
class PseudoCall:
    """Вызов псевдо-класса: имя и аргументы."""

    name: str
    args: Tuple[Argument, ...] = ()


@dataclass(frozen=True)
class Segment:
    """Сегмент селектора."""

    kind: SegmentKind
    text: str
    position: int
    call: Optional[PseudoCall] = None


def coerce_argument(token: str) -> Argument:
    """
    Приведение аргумента: только ASCII-цифры -> int, иначе строка.

    Args:
        token: Аргумент после strip()

    Returns:
        Union[int, str]: Приведённое значение
    """
    if _R_INT.fullmatch(token):
        return int(token)
    return token


def parse_arguments(
    raw: Optional[str], selector: Optional[str] = None, position: int = 0
) -> Tuple[Argument, ...]:
    """
    Разбор списка аргументов псевдо-класса.

    Args:
        raw: Текст между скобками или None, если скобок нет
        selector: Исходный селектор (для сообщения об ошибке)
        position: Позиция списка аргументов в селекторе

    Returns:
        Tuple[Argument, ...]: Аргументы без пустых значений

    Raises:
        SelectorSyntaxError: Аргумент содержит пробелы
    """
    if raw is None:
        return ()

    args = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        if any(ch in _WHITESPACE for ch in token):
            raise SelectorSyntaxError(
                f"Пробелы в аргументах псевдо-класса не поддерживаются: {token!r}",
                selector=selector,
                position=position,
            )
        args.append(coerce_argument(token))
    return tuple(args)


class SelectorTokenizer:
    """Разбивает гибридный селектор на сегменты."""

    def __init__(self, selector: str):
        self.selector = selector
        self.pos = 0
        self.length = len(selector)

    def _peek(self) -> str:
        if self.pos < self.length:
            return self.selector[self.pos]
        return ""

    def _error(self, message: str, position: Optional[int] = None) -> SelectorSyntaxError:
        if position is None:
            position = self.pos
        return SelectorSyntaxError(
            f"{message} (позиция {position} в {self.selector!r})",
            selector=self.selector,
            position=position,
        )

    def tokenize(self) -> List[Segment]:
        if not self.selector or not self.selector.strip():
            raise self._error("Пустой селектор", 0)

        segments: List[Segment] = []
        plain: List[str] = []
        plain_start = 0
        bracket_start: Optional[int] = None
        quote: Optional[str] = None
        quote_start = 0

        def flush() -> None:
            raw = "".join(plain)
            text = raw.strip()
            if text:
                offset = len(raw) - len(raw.lstrip())
                segments.append(Segment(SegmentKind.PLAIN, text, plain_start + offset))
            plain.clear()

        while self.pos < self.length:
            ch = self.selector[self.pos]

            # Экранированный символ, в том числе двоеточие
            if ch == "\\":
                plain.append(self.selector[self.pos : self.pos + 2])
                self.pos += 2
                continue

            if quote:
                if ch == quote:
                    quote = None
            elif ch in "\"'":
                quote = ch
                quote_start = self.pos
            elif ch == "[":
                if bracket_start is None:
                    bracket_start = self.pos
            elif ch == "]":
                bracket_start = None
            elif ch == ":" and bracket_start is None:
                flush()
                segments.append(self._read_pseudo())
                plain_start = self.pos
                continue

            plain.append(ch)
            self.pos += 1

        if quote:
            raise self._error("Незакрытая кавычка", quote_start)
        if bracket_start is not None:
            raise self._error("Незакрытая квадратная скобка", bracket_start)

        flush()
        return segments

    def _read_pseudo(self) -> Segment:
        start = self.pos
        self.pos += 1  # ':'

        name_start = self.pos
        while self.pos < self.length:
            ch = self.selector[self.pos]
            if ch in _WHITESPACE or ch in "(:":
                break
            self.pos += 1
        name = self.selector[name_start : self.pos]
        if not name:
            raise self._error("Ожидается имя псевдо-класса после ':'", start)

        raw_args = None
        if self._peek() == "(":
            close = self.selector.find(")", self.pos + 1)
            if close == -1:
                raise self._error("Незакрытая скобка в аргументах псевдо-класса", self.pos)
            raw_args = self.selector[self.pos + 1 : close]
            if "(" in raw_args:
                raise self._error(
                    "Вложенные скобки в аргументах псевдо-класса не поддерживаются",
                    self.pos,
                )
            args_position = self.pos + 1
            self.pos = close + 1
        else:
            args_position = self.pos

        args = parse_arguments(raw_args, self.selector, args_position)
        return Segment(
            SegmentKind.PSEUDO,
            self.selector[start : self.pos],
            start,
            PseudoCall(name, args),
        )


def tokenize(selector: str) -> List[Segment]:
    """
    Разбор селектора на сегменты.

    Args:
        selector: Гибридный селектор

    Returns:
        List[Segment]: Сегменты в исходном порядке (пустые пропущены)

    Raises:
        SelectorSyntaxError: Селектор не удалось разобрать
    """
    return SelectorTokenizer(selector).tokenize()


def parse_pseudo(text: str) -> PseudoCall:
    """
    Разбор одиночного вызова псевдо-класса, например ``:eq(1)``.

    Args:
        text: Текст псевдо-класса, начиная с ':'

    Returns:
        PseudoCall: Имя и аргументы
    """
    segments = tokenize(text)
    if len(segments) != 1 or segments[0].kind is not SegmentKind.PSEUDO:
        raise SelectorSyntaxError(
            f"Ожидается один псевдо-класс: {text!r}", selector=text, position=0
        )
    return segments[0].call
