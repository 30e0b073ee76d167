"""
Извлечение записей из табличных данных.

По конфигурации (селектор строк + именованные селекторы полей) находит
строки документа и для каждой строки собирает запись вида
``{имя_поля: текст}``.
"""

from typing import Any, Dict, List, Mapping, Optional, Union
import logging

from ..config.base import ExtractionConfig, ExtractorSettings
from ..parsers.registry import PseudoHandler
from ..parsers.selector import resolve
from ..query.document import DEFAULT_PARSER, Document

logger = logging.getLogger(__name__)

Record = Dict[str, str]


class TableRecordExtractor:
    """Экстрактор записей по декларативной конфигурации."""

    def __init__(
        self,
        config: Union[ExtractionConfig, Mapping[str, Any]],
        extra_pseudos: Optional[Mapping[str, PseudoHandler]] = None,
        settings: Optional[ExtractorSettings] = None,
    ):
        """
        Инициализация экстрактора.

        Args:
            config: Конфигурация извлечения (модель или словарь вида
                    ``{"rows": ..., "fields": {...}, "skip_if_blank": [...],
                    "repeat_if_blank": [...]}``)
            extra_pseudos: Дополнительные псевдо-классы (опционально)
            settings: Настройки окружения (опционально)
        """
        if not isinstance(config, ExtractionConfig):
            config = ExtractionConfig(**config)
        self.config = config
        self.extra_pseudos = extra_pseudos
        self.parser = settings.parser if settings else DEFAULT_PARSER
        self.logger = logging.getLogger(f"{__name__}.TableRecordExtractor")

        unknown = config.unknown_policy_fields()
        if unknown:
            self.logger.warning(
                f"Поля {unknown} указаны в skip_if_blank/repeat_if_blank, "
                f"но отсутствуют в fields"
            )

    def extract(self, content: Union[str, bytes, Document]) -> List[Record]:
        """
        Извлечение записей из HTML.

        Args:
            content: HTML-разметка или уже разобранный Document

        Returns:
            List[Record]: Записи в порядке строк документа
        """
        if isinstance(content, Document):
            document = content
        else:
            document = Document.from_html(content, self.parser)

        rows = resolve(document, self.config.rows, None, self.extra_pseudos)
        self.logger.debug(f"Найдено строк по селектору {self.config.rows!r}: {len(rows)}")

        # Последние непустые значения для repeat_if_blank
        previous_nonblank: Dict[str, str] = {}
        blank_repeaters = set(self.config.repeat_if_blank or ())

        def build_record(row) -> Optional[Record]:
            record: Record = {}

            for name, selector in self.config.fields.items():
                query = resolve(document, selector, row, self.extra_pseudos)
                val = query.text().strip()

                if name in blank_repeaters:
                    if val == "":
                        val = previous_nonblank.get(name, "")
                    else:
                        previous_nonblank[name] = val

                record[name] = val

            # Пропускаем строки с пустыми полями (если заданы)
            if self.config.skip_if_blank:
                blank = [n for n in self.config.skip_if_blank if not record.get(n)]
                if blank:
                    self.logger.debug(f"Строка пропущена, пустые поля: {blank}")
                    return None

            return record

        records = rows.map(build_record)
        self.logger.debug(f"Извлечено записей: {len(records)}")
        return records


def extract(
    content: Union[str, bytes, Document],
    config: Union[ExtractionConfig, Mapping[str, Any]],
    extra_pseudos: Optional[Mapping[str, PseudoHandler]] = None,
    parser: str = DEFAULT_PARSER,
) -> List[Record]:
    """
    Список записей из HTML по конфигурации.

    Args:
        content: HTML-разметка или Document
        config: Конфигурация извлечения вида::

            {
                "rows": "#s-date table:first tbody tr",
                "fields": {"date": "td:eq(0)", ...},
            }

        extra_pseudos: Дополнительные псевдо-классы (опционально)
        parser: Построитель дерева BeautifulSoup

    Returns:
        List[Record]: Записи в порядке строк
    """
    settings = ExtractorSettings(parser=parser)
    return TableRecordExtractor(config, extra_pseudos, settings).extract(content)
