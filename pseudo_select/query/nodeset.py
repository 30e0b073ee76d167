"""
Набор узлов документа с операциями в духе jQuery.

NodeSet хранит узлы BeautifulSoup без повторов (по идентичности объекта,
а не по структурному равенству bs4) и предоставляет операции обхода,
которые используют обработчики псевдо-классов.
"""

from typing import Any, Callable, Iterable, Iterator, List, Optional, Union

from bs4 import BeautifulSoup, PageElement, Tag

Selector = Union[str, Callable[[PageElement], bool], "NodeSet", PageElement, None]


def _unique(nodes: Iterable[PageElement]) -> List[PageElement]:
    """Убирает повторы, сохраняя порядок первого появления."""
    seen = set()
    result = []
    for node in nodes:
        if node is None or id(node) in seen:
            continue
        seen.add(id(node))
        result.append(node)
    return result


def _is_element(node: Optional[PageElement]) -> bool:
    # Корень документа (BeautifulSoup) элементом не считается
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)


def _node_text(node: PageElement) -> str:
    if isinstance(node, Tag):
        return node.get_text()
    return str(node)


def _as_index(value: Any, default: Optional[int] = None) -> Optional[int]:
    # Нечисловое значение заменяется на default
    if value is None or isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class NodeSet:
    """Упорядоченная выборка узлов одного документа."""

    def __init__(self, document: Any, nodes: Iterable[PageElement] = ()):
        """
        Args:
            document: Document, которому принадлежат узлы
            nodes: Узлы выборки
        """
        self.document = document
        self._nodes: List[PageElement] = _unique(nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[PageElement]:
        return iter(self._nodes)

    def __getitem__(self, index: int) -> PageElement:
        return self._nodes[index]

    def __repr__(self) -> str:
        names = ", ".join(
            node.name if isinstance(node, Tag) else "#text" for node in self._nodes[:5]
        )
        if len(self._nodes) > 5:
            names += ", ..."
        return f"NodeSet([{names}])"

    def get(self) -> List[PageElement]:
        """Список узлов выборки."""
        return list(self._nodes)

    def map(self, fn: Callable[[PageElement], Any]) -> List[Any]:
        """
        Применяет функцию к каждому узлу, отбрасывая результаты None.

        Args:
            fn: Функция от узла

        Returns:
            List[Any]: Результаты, отличные от None, в порядке узлов
        """
        results = []
        for node in self._nodes:
            value = fn(node)
            if value is not None:
                results.append(value)
        return results

    def text(self) -> str:
        """Объединённый текст всех узлов выборки."""
        return "".join(_node_text(node) for node in self._nodes)

    # ---- внутренние помощники ----

    def _derive(
        self,
        nodes: Iterable[PageElement],
        selector: Selector = None,
        reverse: bool = False,
    ) -> "NodeSet":
        matched = [node for node in _unique(nodes) if self._matches(node, selector)]
        ordered = self.document.sort(matched)
        if reverse:
            ordered.reverse()
        return NodeSet(self.document, ordered)

    def _matches(self, node: PageElement, selector: Selector) -> bool:
        if selector is None:
            return True
        if isinstance(selector, str):
            return isinstance(node, Tag) and self.document.match(node, selector)
        if callable(selector) and not isinstance(selector, (NodeSet, PageElement)):
            return bool(selector(node))
        return any(node is other for other in self.document.wrap(selector))

    # ---- обход дерева ----

    def parent(self, selector: Selector = None) -> "NodeSet":
        parents = [node.parent for node in self._nodes if _is_element(node.parent)]
        return self._derive(parents, selector)

    def parents(self, selector: Selector = None) -> "NodeSet":
        ancestors = []
        for node in self._nodes:
            ancestors.extend(p for p in node.parents if _is_element(p))
        return self._derive(ancestors, selector, reverse=True)

    def closest(self, selector: Selector = None) -> "NodeSet":
        if selector is None:
            return NodeSet(self.document)
        found = []
        for node in self._nodes:
            current = node
            while _is_element(current):
                if self._matches(current, selector):
                    found.append(current)
                    break
                current = current.parent
        return self._derive(found)

    def next(self, selector: Selector = None) -> "NodeSet":
        found = []
        for node in self._nodes:
            sibling = next(
                (s for s in node.next_siblings if isinstance(s, Tag)), None
            )
            found.append(sibling)
        return self._derive(found, selector)

    def next_all(self, selector: Selector = None) -> "NodeSet":
        found = []
        for node in self._nodes:
            found.extend(s for s in node.next_siblings if isinstance(s, Tag))
        return self._derive(found, selector)

    def prev(self, selector: Selector = None) -> "NodeSet":
        found = []
        for node in self._nodes:
            sibling = next(
                (s for s in node.previous_siblings if isinstance(s, Tag)), None
            )
            found.append(sibling)
        return self._derive(found, selector)

    def prev_all(self, selector: Selector = None) -> "NodeSet":
        found = []
        for node in self._nodes:
            found.extend(s for s in node.previous_siblings if isinstance(s, Tag))
        return self._derive(found, selector, reverse=True)

    def siblings(self, selector: Selector = None) -> "NodeSet":
        found = []
        for node in self._nodes:
            if node.parent is None:
                continue
            found.extend(
                child
                for child in node.parent.children
                if isinstance(child, Tag) and child is not node
            )
        return self._derive(found, selector)

    def children(self, selector: Selector = None) -> "NodeSet":
        found = []
        for node in self._nodes:
            if isinstance(node, Tag):
                found.extend(c for c in node.children if isinstance(c, Tag))
        return self._derive(found, selector)

    def contents(self) -> "NodeSet":
        """Все дочерние узлы, включая текстовые."""
        found = []
        for node in self._nodes:
            if isinstance(node, Tag):
                found.extend(node.contents)
        return self._derive(found)

    def find(self, selector: str) -> "NodeSet":
        """Потомки узлов выборки, подходящие под CSS-селектор."""
        return self.document.query(selector, self)

    # ---- фильтрация ----

    def filter(self, selector: Selector = None) -> "NodeSet":
        if selector is None:
            return NodeSet(self.document)
        return NodeSet(
            self.document, [n for n in self._nodes if self._matches(n, selector)]
        )

    def not_(self, selector: Selector = None) -> "NodeSet":
        if selector is None:
            return NodeSet(self.document, self._nodes)
        return NodeSet(
            self.document, [n for n in self._nodes if not self._matches(n, selector)]
        )

    def has(self, selector: Selector = None) -> "NodeSet":
        if selector is None:
            return NodeSet(self.document)
        if isinstance(selector, str):
            kept = [
                node
                for node in self._nodes
                if isinstance(node, Tag) and self.document.select(node, selector)
            ]
        else:
            candidates = self.document.wrap(selector)
            kept = [
                node
                for node in self._nodes
                if any(
                    any(parent is node for parent in candidate.parents)
                    for candidate in candidates
                )
            ]
        return NodeSet(self.document, kept)

    def first(self) -> "NodeSet":
        return NodeSet(self.document, self._nodes[:1])

    def last(self) -> "NodeSet":
        return NodeSet(self.document, self._nodes[-1:])

    def eq(self, index: Union[int, str]) -> "NodeSet":
        """Узел с указанным индексом; отрицательный индекс считается с конца."""
        index = _as_index(index)
        if index is None:
            return NodeSet(self.document)
        if index < 0:
            index += len(self._nodes)
        if index < 0 or index >= len(self._nodes):
            return NodeSet(self.document)
        return NodeSet(self.document, [self._nodes[index]])

    def slice(
        self,
        start: Union[int, str, None] = None,
        end: Union[int, str, None] = None,
    ) -> "NodeSet":
        # Нечисловая граница считается нулём
        bounds = slice(_as_index(start, 0), _as_index(end, 0))
        return NodeSet(self.document, self._nodes[bounds])

    def add(self, selector: Selector, context: Any = None) -> "NodeSet":
        """Объединение с узлами, найденными по селектору, в порядке документа."""
        if selector is None:
            return NodeSet(self.document, self._nodes)
        if isinstance(selector, str):
            other = self.document.query(selector, context)
        else:
            other = self.document.wrap(selector)
        return NodeSet(self.document, self.document.sort(self._nodes + other.get()))
