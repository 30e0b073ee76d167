"""
Документ HTML и CSS-запросы к нему.

Обёртка над BeautifulSoup: разбор разметки, выполнение CSS-селекторов
через soupsieve в пределах контекста и сортировка узлов в порядке документа.
"""

from typing import Any, Dict, Iterable, List, Optional, Union
import logging

import soupsieve
from bs4 import BeautifulSoup, PageElement, Tag

from ..errors import SelectorSyntaxError
from .nodeset import NodeSet, _unique

logger = logging.getLogger(__name__)

DEFAULT_PARSER = "lxml"

# Фрагмент, начинающийся с комбинатора, выполняется относительно контекста
_LEADING_COMBINATORS = (">", "+", "~")


class Document:
    """Разобранный HTML-документ."""

    def __init__(self, soup: BeautifulSoup):
        """
        Args:
            soup: Разобранный документ BeautifulSoup
        """
        self.soup = soup
        self._positions: Optional[Dict[int, int]] = None

    @classmethod
    def from_html(
        cls, html: Union[str, bytes], parser: str = DEFAULT_PARSER
    ) -> "Document":
        """
        Разбор HTML-разметки.

        Args:
            html: HTML-строка или байты
            parser: Построитель дерева BeautifulSoup (lxml, html.parser, html5lib)

        Returns:
            Document: Разобранный документ
        """
        logger.debug(f"Разбор HTML ({len(html)} символов), парсер: {parser}")
        return cls(BeautifulSoup(html, parser))

    def query(self, selector: Any, context: Any = None) -> NodeSet:
        """
        Выполнение CSS-запроса.

        Строка ищется во всём документе либо среди потомков узлов контекста.
        Любое другое значение (узел, список узлов, NodeSet) оборачивается в NodeSet.

        Args:
            selector: CSS-селектор или узел(ы)
            context: Узел, список узлов, NodeSet или Document

        Returns:
            NodeSet: Найденные узлы в порядке документа
        """
        if not isinstance(selector, str) or isinstance(selector, PageElement):
            return self.wrap(selector)

        if context is None or context is self:
            return NodeSet(self, self.select(self.soup, selector))

        found: List[PageElement] = []
        for node in self._scope(context):
            found.extend(self.select(node, selector))
        return NodeSet(self, self.sort(found))

    def wrap(self, value: Any) -> NodeSet:
        """
        Приведение значения к NodeSet.

        Args:
            value: None, узел, список узлов, NodeSet, Document или CSS-селектор

        Returns:
            NodeSet: Выборка
        """
        if value is None:
            return NodeSet(self)
        if isinstance(value, NodeSet):
            return NodeSet(self, value.get())
        if isinstance(value, Document):
            return NodeSet(self, [value.soup])
        if isinstance(value, PageElement):
            return NodeSet(self, [value])
        if isinstance(value, str):
            return self.query(value)
        if isinstance(value, (bool, int, float)):
            raise SelectorSyntaxError(
                f"Ожидается CSS-селектор или узлы, получено {value!r}",
                selector=str(value),
            )
        return NodeSet(self, value)

    def select(self, node: Tag, selector: str) -> List[Tag]:
        """Потомки узла, подходящие под CSS-селектор."""
        selector = selector.strip()
        if selector.startswith(_LEADING_COMBINATORS):
            selector = f":scope {selector}"
        try:
            return node.select(selector)
        except soupsieve.SelectorSyntaxError as e:
            raise SelectorSyntaxError(
                f"Некорректный CSS-селектор {selector!r}: {e}", selector=selector
            ) from e

    def match(self, node: Tag, selector: str) -> bool:
        """Проверка, подходит ли узел под CSS-селектор."""
        try:
            return soupsieve.match(selector, node)
        except soupsieve.SelectorSyntaxError as e:
            raise SelectorSyntaxError(
                f"Некорректный CSS-селектор {selector!r}: {e}", selector=selector
            ) from e

    def sort(self, nodes: Iterable[PageElement]) -> List[PageElement]:
        """Узлы без повторов в порядке документа."""
        positions = self._document_positions()
        fallback = len(positions)
        return sorted(
            _unique(nodes), key=lambda node: positions.get(id(node), fallback)
        )

    def _document_positions(self) -> Dict[int, int]:
        if self._positions is None:
            self._positions = {id(self.soup): -1}
            for index, node in enumerate(self.soup.descendants):
                self._positions[id(node)] = index
        return self._positions

    def _scope(self, context: Any) -> List[Tag]:
        if isinstance(context, Document):
            return [context.soup]
        nodes = self.wrap(context)
        return [node for node in nodes if isinstance(node, Tag)]


def load(html: Union[str, bytes], parser: str = DEFAULT_PARSER) -> Document:
    """
    Загрузка HTML в Document.

    Args:
        html: HTML-разметка
        parser: Построитель дерева BeautifulSoup

    Returns:
        Document: Разобранный документ
    """
    return Document.from_html(html, parser)
