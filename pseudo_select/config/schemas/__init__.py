"""
JSON-схемы для валидации конфигурационных файлов.

Содержит схемы в формате JSON Schema для валидации
extractor_config.json и extractors.json.
"""

SCHEMA_EXTRACTOR_SETTINGS = {
    "$schema": "http://json-schema.org/draft-2020-12/schema#",
    "title": "Extractor Settings",
    "description": "Настройки окружения экстрактора",
    "type": "object",
    "properties": {
        "parser": {
            "type": "string",
            "enum": ["lxml", "html.parser", "html5lib", "xml"],
            "default": "lxml",
            "description": "Построитель дерева BeautifulSoup",
        },
        "log_level": {
            "type": "string",
            "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            "default": "INFO",
            "description": "Уровень логирования",
        },
        "verbose": {
            "type": "boolean",
            "default": False,
            "description": "Подробный вывод",
        },
        "config_dir": {
            "type": "string",
            "default": "config",
            "description": "Директория с конфигурационными файлами",
        },
    },
    "additionalProperties": True,
}

SCHEMA_EXTRACTION_CONFIG = {
    "$schema": "http://json-schema.org/draft-2020-12/schema#",
    "title": "Extraction Configuration",
    "description": "Конфигурация извлечения записей из таблицы",
    "type": "object",
    "properties": {
        "rows": {
            "type": "string",
            "minLength": 1,
            "description": "Селектор строк",
        },
        "fields": {
            "type": "object",
            "additionalProperties": {"type": "string", "minLength": 1},
            "description": "Селекторы полей относительно строки",
        },
        "skip_if_blank": {
            "type": ["array", "null"],
            "items": {"type": "string"},
            "description": "Поля, при пустом значении которых строка пропускается",
        },
        "repeat_if_blank": {
            "type": ["array", "null"],
            "items": {"type": "string"},
            "description": "Поля, пустое значение которых заменяется последним непустым",
        },
    },
    "required": ["rows", "fields"],
    "additionalProperties": False,
}

SCHEMA_EXTRACTORS_FILE = {
    "$schema": "http://json-schema.org/draft-2020-12/schema#",
    "title": "Extractors Configuration File",
    "description": "Файл именованных конфигураций извлечения",
    "type": "object",
    "properties": {
        "extractors": {
            "type": "object",
            "additionalProperties": SCHEMA_EXTRACTION_CONFIG,
        }
    },
    "required": ["extractors"],
}

__all__ = [
    "SCHEMA_EXTRACTOR_SETTINGS",
    "SCHEMA_EXTRACTION_CONFIG",
    "SCHEMA_EXTRACTORS_FILE",
]
