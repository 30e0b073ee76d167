"""
Реестр псевдо-классов.

Сопоставляет имя псевдо-класса функции ``fn(context, *args) -> context``.
Если аргументов нет, функция вызывается как ``fn(context, None)``, поэтому
дополнительные обработчики должны принимать необязательный аргумент.

Например, ``:eq(1)`` вызывает ``PSEUDOS["eq"](query, 1)``.
"""

from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional
import logging

logger = logging.getLogger(__name__)

PseudoHandler = Callable[..., Any]

_BUILTIN_PSEUDOS: Dict[str, PseudoHandler] = {
    "parent": lambda q, sel=None: q.parent(sel),
    "parents": lambda q, sel=None: q.parents(sel),
    "closest": lambda q, sel=None: q.closest(sel),
    "next": lambda q, sel=None: q.next(sel),
    "nextAll": lambda q, sel=None: q.next_all(sel),
    "prev": lambda q, sel=None: q.prev(sel),
    "prevAll": lambda q, sel=None: q.prev_all(sel),
    "slice": lambda q, start=None, end=None: q.slice(start, end),
    "siblings": lambda q, sel=None: q.siblings(sel),
    "children": lambda q, sel=None: q.children(sel),
    "contents": lambda q, *_: q.contents(),
    "filter": lambda q, sel=None: q.filter(sel),
    "not": lambda q, sel=None: q.not_(sel),
    "has": lambda q, sel=None: q.has(sel),
    "first": lambda q, *_: q.first(),
    "last": lambda q, *_: q.last(),
    "eq": lambda q, i=0: q.eq(0 if i is None else i),
    "add": lambda q, sel=None: q.add(sel),
}

# Встроенный реестр доступен только для чтения
PSEUDOS: Mapping[str, PseudoHandler] = MappingProxyType(_BUILTIN_PSEUDOS)


def merge_pseudos(
    extra_pseudos: Optional[Mapping[str, PseudoHandler]] = None,
) -> Mapping[str, PseudoHandler]:
    """
    Реестр для одного вызова: встроенные псевдо-классы плюс дополнительные.

    Дополнительные обработчики имеют приоритет при совпадении имён.
    PSEUDOS при этом не изменяется.

    Args:
        extra_pseudos: Дополнительные обработчики (опционально)

    Returns:
        Mapping[str, PseudoHandler]: Реестр для вызова
    """
    if not extra_pseudos:
        return PSEUDOS

    overridden = sorted(set(extra_pseudos) & set(PSEUDOS))
    if overridden:
        logger.debug(f"Переопределены встроенные псевдо-классы: {overridden}")

    merged = dict(PSEUDOS)
    merged.update(extra_pseudos)
    return merged
