"""
Модели конфигурации экстрактора.

Содержит Pydantic-модели для валидации конфигурации извлечения записей
и настроек окружения.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum


class ParserType(str, Enum):
    """Построители дерева BeautifulSoup."""

    LXML = "lxml"
    HTML_PARSER = "html.parser"
    HTML5LIB = "html5lib"
    XML = "xml"


class ExtractionConfig(BaseModel):
    """Конфигурация извлечения записей из таблицы."""

    model_config = ConfigDict(frozen=True)

    rows: str = Field(
        ..., description="Селектор строк (например, '#s-date table:first tbody tr')"
    )
    fields: Dict[str, str] = Field(
        ...,
        description="Селекторы полей относительно строки (например, {'date': 'td:eq(0)'})",
    )
    skip_if_blank: Optional[List[str]] = Field(
        None, description="Поля, при пустом значении которых строка пропускается"
    )
    repeat_if_blank: Optional[List[str]] = Field(
        None,
        description="Поля, пустое значение которых заменяется последним непустым",
    )

    @field_validator("rows")
    @classmethod
    def validate_rows(cls, v):
        if not v.strip():
            raise ValueError("rows не может быть пустым")
        return v

    @field_validator("fields")
    @classmethod
    def validate_fields(cls, v):
        for name, selector in v.items():
            if not selector.strip():
                raise ValueError(f"Пустой селектор для поля '{name}'")
        return v

    def unknown_policy_fields(self) -> List[str]:
        """Поля из skip_if_blank/repeat_if_blank, отсутствующие в fields."""
        names = list(self.skip_if_blank or []) + list(self.repeat_if_blank or [])
        return [name for name in dict.fromkeys(names) if name not in self.fields]


class ExtractorSettings(BaseModel):
    """Настройки окружения экстрактора."""

    parser: ParserType = Field(
        ParserType.LXML.value, description="Построитель дерева BeautifulSoup"
    )

    # Параметры логирования
    log_level: str = Field("INFO", description="Уровень логирования")
    verbose: bool = Field(False, description="Подробный вывод")

    # Пути к файлам
    config_dir: str = Field(
        "config", description="Директория с конфигурационными файлами"
    )

    model_config = ConfigDict(use_enum_values=True, extra="allow")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return level
