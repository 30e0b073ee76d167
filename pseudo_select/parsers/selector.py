"""
Интерпретатор гибридных селекторов.

Сегменты селектора применяются слева направо: обычный CSS выполняет
запрос в текущем контексте, псевдо-класс передаёт текущую выборку
обработчику из реестра и заменяет контекст его результатом.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional
import logging

from ..errors import MissingContextError, UnknownPseudoError
from ..query.document import Document
from ..query.nodeset import NodeSet
from .pseudo import Segment, SegmentKind, tokenize
from .registry import PseudoHandler, merge_pseudos

logger = logging.getLogger(__name__)


class ContextState(str, Enum):
    """Состояние контекста запроса."""

    UNSET = "unset"  # Контекста нет
    RAW = "raw"  # Значение передано вызывающим кодом как есть
    RESOLVED = "resolved"  # Выборка получена запросом или псевдо-классом


@dataclass(frozen=True)
class QueryContext:
    """Текущая выборка при разборе селектора."""

    state: ContextState
    value: Any = None

    @classmethod
    def from_caller(cls, value: Any) -> "QueryContext":
        if value is None:
            return cls(ContextState.UNSET)
        return cls(ContextState.RAW, value)

    @classmethod
    def resolved(cls, nodes: NodeSet) -> "QueryContext":
        return cls(ContextState.RESOLVED, nodes)

    def as_nodeset(self, document: Document) -> NodeSet:
        """
        Выборка для передачи обработчику псевдо-класса.

        Значение, переданное вызывающим кодом, оборачивается через документ.
        """
        if self.state is ContextState.RESOLVED:
            return self.value
        if self.state is ContextState.RAW:
            return document.wrap(self.value)
        raise MissingContextError("Контекст запроса не задан")


def resolve(
    document: Any,
    selector: str,
    context: Any = None,
    extra_pseudos: Optional[Mapping[str, PseudoHandler]] = None,
) -> NodeSet:
    """
    Выполнение гибридного селектора.

    Args:
        document: Document (или BeautifulSoup) для запросов
        selector: Селектор с псевдо-классами, например ``section p:eq(1)``
        context: Узел, список узлов или NodeSet для поиска внутри (опционально).
                 Чтобы начать селектор с псевдо-класса, контекст обязателен.
        extra_pseudos: Дополнительные псевдо-классы поверх PSEUDOS (опционально)

    Returns:
        NodeSet: Итоговая выборка

    Raises:
        SelectorSyntaxError: Селектор не удалось разобрать
        MissingContextError: Псевдо-класс в начале селектора без контекста
        UnknownPseudoError: Псевдо-класс отсутствует в реестре
    """
    if not isinstance(document, Document):
        document = Document(document)

    pseudos = merge_pseudos(extra_pseudos)
    current = QueryContext.from_caller(context)

    for segment in tokenize(selector):
        if segment.kind is SegmentKind.PLAIN:
            scope = None if current.state is ContextState.UNSET else current.value
            current = QueryContext.resolved(document.query(segment.text, scope))
        else:
            current = _apply_pseudo(document, selector, segment, current, pseudos)
        logger.debug(f"{selector!r}: {segment.text!r} -> {len(current.value)} узл.")

    return current.as_nodeset(document)


def _apply_pseudo(
    document: Document,
    selector: str,
    segment: Segment,
    current: QueryContext,
    pseudos: Mapping[str, PseudoHandler],
) -> QueryContext:
    if current.state is ContextState.UNSET:
        raise MissingContextError(
            f"Псевдо-класс {segment.text} не может стоять в начале запроса {selector}",
            selector=selector,
            context={"segment": segment.text, "position": segment.position},
        )

    call = segment.call
    handler = pseudos.get(call.name)
    if handler is None:
        raise UnknownPseudoError(
            f"Неизвестный псевдо-класс {segment.text} в {selector}",
            name=call.name,
            selector=selector,
            context={"segment": segment.text, "position": segment.position},
        )

    nodes = current.as_nodeset(document)
    if call.args:
        result = handler(nodes, *call.args)
    else:
        result = handler(nodes, None)

    if not isinstance(result, NodeSet):
        result = document.wrap(result)
    return QueryContext.resolved(result)
