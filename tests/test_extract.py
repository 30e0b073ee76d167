"""
Тесты извлечения табличных записей.
"""

import pytest
from pydantic import ValidationError

from pseudo_select.config.base import ExtractionConfig, ExtractorSettings
from pseudo_select.errors import UnknownPseudoError
from pseudo_select.handlers import TableRecordExtractor, extract
from pseudo_select.query import load

FIELDS = {"col1": "td:eq(0)", "col2": "td:eq(1)"}


class TestExtract:
    """Тесты функции extract."""

    def test_table_extract(self, sample_html):
        result = extract(sample_html, {"rows": "table:first tr", "fields": FIELDS})
        assert result == [
            {"col1": "row 1 - col 1", "col2": "row 1 - col 2"},
            {"col1": "row 2 - col 1", "col2": "row 2 - col 2"},
        ]

    def test_field_order_follows_config(self, sample_html):
        fields = {"col2": "td:eq(1)", "col1": "td:eq(0)"}
        result = extract(sample_html, {"rows": "table:first tr", "fields": fields})
        assert list(result[0]) == ["col2", "col1"]

    def test_extra_pseudo_extract(self, sample_html):
        result = extract(
            sample_html,
            {"rows": "table:trs", "fields": {"col1": "td:eq(0)"}},
            {"trs": lambda q, _=None: q.find("tr")},
        )
        assert result[:2] == [
            {"col1": "row 1 - col 1"},
            {"col1": "row 2 - col 1"},
        ]

    def test_blank_values_kept_without_policy(self, sample_html):
        result = extract(sample_html, {"rows": "#blanks tr", "fields": FIELDS})
        assert [r["col1"] for r in result] == ["", "row 2 - col 1", "", "row 4 - col 1"]

    def test_repeat_if_blank(self, sample_html):
        config = {"rows": "#blanks tr", "fields": FIELDS, "repeat_if_blank": ["col1"]}
        result = extract(sample_html, config)
        # Первая пустая ячейка остаётся пустой: предыдущего значения нет
        assert [r["col1"] for r in result] == [
            "",
            "row 2 - col 1",
            "row 2 - col 1",
            "row 4 - col 1",
        ]
        assert result[3]["col2"] == ""

    def test_skip_if_blank(self, sample_html):
        config = {"rows": "#blanks tr", "fields": FIELDS, "skip_if_blank": ["col1"]}
        result = extract(sample_html, config)
        assert result == [
            {"col1": "row 2 - col 1", "col2": "row 2 - col 2"},
            {"col1": "row 4 - col 1", "col2": ""},
        ]

    def test_repeat_applied_before_skip(self, sample_html):
        config = {
            "rows": "#blanks tr",
            "fields": FIELDS,
            "repeat_if_blank": ["col1"],
            "skip_if_blank": ["col1"],
        }
        result = extract(sample_html, config)
        assert [r["col2"] for r in result] == [
            "row 2 - col 2",
            "row 3 - col 2",
            "",
        ]

    def test_skip_unknown_field_drops_all_rows(self, sample_html):
        config = {"rows": "table:first tr", "fields": FIELDS, "skip_if_blank": ["col3"]}
        assert extract(sample_html, config) == []

    def test_no_rows(self, sample_html):
        assert extract(sample_html, {"rows": "table.missing tr", "fields": FIELDS}) == []

    def test_interpreter_errors_propagate(self, sample_html):
        with pytest.raises(UnknownPseudoError):
            extract(sample_html, {"rows": "table tr", "fields": {"a": "td:nope"}})

    def test_html_parser(self, sample_html):
        result = extract(
            sample_html, {"rows": "table:first tr", "fields": FIELDS}, parser="html.parser"
        )
        assert len(result) == 2

    def test_invalid_config(self, sample_html):
        with pytest.raises(ValidationError):
            extract(sample_html, {"rows": "  ", "fields": FIELDS})


class TestTableRecordExtractor:
    """Тесты класса TableRecordExtractor."""

    def test_reuse_for_documents(self, sample_html):
        extractor = TableRecordExtractor(
            ExtractionConfig(rows="table:last tr", fields={"col2": "td:eq(1)"})
        )
        first = extractor.extract(sample_html)
        second = extractor.extract(load(sample_html))
        assert first == second
        assert [r["col2"] for r in first] == [
            "row 1 - col 2",
            "row 2 - col 2",
            "row 3 - col 2",
            "",
        ]

    def test_repeat_state_not_shared_between_calls(self, sample_html):
        extractor = TableRecordExtractor(
            {"rows": "#blanks tr", "fields": FIELDS, "repeat_if_blank": ["col1"]}
        )
        extractor.extract(sample_html)
        assert extractor.extract(sample_html)[0]["col1"] == ""

    def test_settings_parser(self, sample_html):
        extractor = TableRecordExtractor(
            {"rows": "table:first tr", "fields": FIELDS},
            settings=ExtractorSettings(parser="html.parser"),
        )
        assert extractor.parser == "html.parser"
        assert len(extractor.extract(sample_html)) == 2
