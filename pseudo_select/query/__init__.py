"""
Движок запросов к HTML-документу.

Модули:
- document: Document (BeautifulSoup + soupsieve) и функция load
- nodeset: NodeSet с операциями обхода в духе jQuery
"""

from .document import Document, load, DEFAULT_PARSER
from .nodeset import NodeSet

__all__ = ["Document", "NodeSet", "load", "DEFAULT_PARSER"]
