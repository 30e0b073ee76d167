"""
Обработчики извлечения данных.

Модули:
- table_handler: Извлечение записей из строк таблицы по конфигурации
"""

from .table_handler import TableRecordExtractor, extract

__all__ = ["TableRecordExtractor", "extract"]
