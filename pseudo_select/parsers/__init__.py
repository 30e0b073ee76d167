"""
Парсеры и интерпретатор селекторов.

Модули:
- pseudo: Разбор селектора на сегменты и аргументов псевдо-классов
- registry: Реестр псевдо-классов PSEUDOS
- selector: Интерпретатор resolve
"""

from .pseudo import (
    PseudoCall,
    Segment,
    SegmentKind,
    coerce_argument,
    parse_arguments,
    parse_pseudo,
    tokenize,
)
from .registry import PSEUDOS, merge_pseudos
from .selector import ContextState, QueryContext, resolve

__all__ = [
    "PseudoCall",
    "Segment",
    "SegmentKind",
    "coerce_argument",
    "parse_arguments",
    "parse_pseudo",
    "tokenize",
    "PSEUDOS",
    "merge_pseudos",
    "ContextState",
    "QueryContext",
    "resolve",
]
