"""
Загрузчик конфигурации экстрактора.

Загружает настройки окружения и именованные конфигурации извлечения
из JSON-файлов и настраивает логирование.
"""

import json
from typing import Dict, Optional, Union
from pathlib import Path
import logging

from .base import ExtractionConfig, ExtractorSettings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Шумные логгеры сторонних библиотек
_NOISY_LOGGERS = ("bs4", "soupsieve")


class ConfigLoader:
    """Загрузчик и валидатор конфигурации экстрактора."""

    SETTINGS_FILE = "extractor_config.json"
    EXTRACTORS_FILE = "extractors.json"

    def __init__(self, config_dir: Union[str, Path] = "config"):
        """
        Инициализация загрузчика конфигурации.

        Args:
            config_dir: Директория с конфигурационными файлами
        """
        self.config_dir = Path(config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)

        # Кэшированные конфигурации
        self._settings: Optional[ExtractorSettings] = None
        self._extractors: Dict[str, ExtractionConfig] = {}

    def load_settings(self, config_path: Optional[str] = None) -> ExtractorSettings:
        """
        Загрузить настройки окружения.

        Args:
            config_path: Путь к JSON-файлу настроек.
                        Если None, используется config/extractor_config.json

        Returns:
            ExtractorSettings: Загруженные настройки
        """
        if config_path is None:
            config_path = self.config_dir / self.SETTINGS_FILE
        else:
            config_path = Path(config_path)

        if not config_path.exists():
            logger.warning(f"Файл настроек не найден: {config_path}")
            logger.info("Создаю настройки по умолчанию")
            self._settings = ExtractorSettings(config_dir=str(self.config_dir))
            self._write_json(config_path, self._settings.model_dump())
            return self._settings

        try:
            config_data = self._read_json(config_path)
            self._settings = ExtractorSettings(**config_data)
            logger.info(f"Настройки загружены из {config_path}")
            return self._settings
        except json.JSONDecodeError as e:
            logger.error(f"Ошибка парсинга JSON в {config_path}: {e}")
            raise

    def load_extractors(
        self, config_path: Optional[str] = None
    ) -> Dict[str, ExtractionConfig]:
        """
        Загрузить именованные конфигурации извлечения.

        Формат файла: ``{"extractors": {"<имя>": {"rows": ..., "fields": {...}}}}``

        Args:
            config_path: Путь к JSON-файлу. Если None, используется
                        config/extractors.json

        Returns:
            Dict[str, ExtractionConfig]: Конфигурации по имени
        """
        if config_path is None:
            config_path = self.config_dir / self.EXTRACTORS_FILE
        else:
            config_path = Path(config_path)

        if not config_path.exists():
            logger.warning(f"Файл конфигураций извлечения не найден: {config_path}")
            self._extractors = {}
            return self._extractors

        try:
            config_data = self._read_json(config_path)
        except json.JSONDecodeError as e:
            logger.error(f"Ошибка парсинга JSON в {config_path}: {e}")
            raise

        self._extractors = {}
        for name, extractor_data in config_data.get("extractors", {}).items():
            config = ExtractionConfig(**extractor_data)
            unknown = config.unknown_policy_fields()
            if unknown:
                logger.warning(
                    f"Конфигурация {name}: поля {unknown} указаны в политике пустых значений, "
                    f"но отсутствуют в fields"
                )
            self._extractors[name] = config

        logger.info(f"Загружено конфигураций извлечения: {len(self._extractors)}")
        return self._extractors

    def get_extractor(self, name: str) -> Optional[ExtractionConfig]:
        """
        Получить конфигурацию извлечения по имени.

        Args:
            name: Имя конфигурации

        Returns:
            ExtractionConfig или None, если конфигурация не найдена
        """
        if not self._extractors:
            self.load_extractors()

        return self._extractors.get(name)

    def save_extractor(
        self,
        name: str,
        config: Union[ExtractionConfig, dict],
        config_path: Optional[str] = None,
    ) -> ExtractionConfig:
        """
        Добавить или заменить конфигурацию извлечения и сохранить файл.

        Args:
            name: Имя конфигурации
            config: Конфигурация (модель или словарь)
            config_path: Путь к JSON-файлу (по умолчанию config/extractors.json)

        Returns:
            ExtractionConfig: Сохранённая конфигурация
        """
        if config_path is None:
            config_path = self.config_dir / self.EXTRACTORS_FILE
        else:
            config_path = Path(config_path)

        if not isinstance(config, ExtractionConfig):
            config = ExtractionConfig(**config)

        if not self._extractors and config_path.exists():
            self.load_extractors(str(config_path))

        if name in self._extractors:
            logger.debug(f"Обновлена конфигурация извлечения {name}")
        else:
            logger.debug(f"Добавлена конфигурация извлечения {name}")
        self._extractors[name] = config

        data = {
            "extractors": {
                key: value.model_dump(exclude_none=True)
                for key, value in self._extractors.items()
            }
        }
        self._write_json(config_path, data)
        return config

    @staticmethod
    def _read_json(config_path: Path) -> dict:
        with open(config_path, "r", encoding="utf-8") as f:
            return json.load(f)

    @staticmethod
    def _write_json(config_path: Path, data: dict) -> None:
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.debug(f"Конфигурация сохранена в {config_path}")


def setup_logging(settings: Optional[ExtractorSettings] = None) -> None:
    """
    Настройка логирования по настройкам экстрактора.

    Args:
        settings: Настройки (по умолчанию ExtractorSettings())
    """
    if settings is None:
        settings = ExtractorSettings()

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    if settings.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        # Отключаем шумные логи библиотек
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    else:
        logging.getLogger().setLevel(settings.log_level)
