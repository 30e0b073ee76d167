import pytest
from pathlib import Path

from pseudo_select.query import Document, load

DATA_DIR = Path(__file__).parent / "data"


def load_sample_html() -> str:
    """Загружает тестовый HTML из data/sample.html."""
    with open(DATA_DIR / "sample.html", "r", encoding="utf-8") as f:
        return f.read()


@pytest.fixture(scope="session")
def sample_html() -> str:
    """Фикстура, возвращающая тестовый HTML."""
    return load_sample_html()


@pytest.fixture
def document(sample_html) -> Document:
    """Разобранный тестовый документ."""
    return load(sample_html)
