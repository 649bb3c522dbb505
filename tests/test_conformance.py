"""Tests for conformance case loading, validation and running.

WHY: The bundled reference cases are the main evidence that each dialect
behaves like its real parser, and user-supplied case files must be
rejected clearly when they are malformed rather than failing mid-run.

HOW: The bundled file is run end to end. Broken case files are written to
tmp_path via the write_case_file fixture and must raise
ConformanceFileError. A deliberately wrong case checks the report and the
WARNING log line.
"""

import logging

import pytest

from winsplit.conformance import (
    REFERENCE_CASES_PATH,
    SCHEMA_PATH,
    ConformanceCase,
    ConformanceReport,
    load_cases,
    load_reference_cases,
    parse_cases,
    run_case,
    run_cases,
)
from winsplit.errors import ConformanceFileError
from winsplit.models import Dialect


def _case(**overrides):
    case = {
        "dialect": "cmd_exe",
        "operation": "split",
        "input": "a b",
        "expected": ["a", "b"],
    }
    case.update(overrides)
    return case


class TestReferenceCases:
    def test_bundled_files_exist(self):
        assert SCHEMA_PATH.is_file()
        assert REFERENCE_CASES_PATH.is_file()

    def test_every_dialect_is_covered(self):
        dialects = {case.dialect for case in load_reference_cases()}
        assert dialects == set(Dialect)

    def test_all_reference_cases_pass(self):
        report = run_cases(load_reference_cases())
        failures = [r.case.label for r in report.failed]
        assert failures == []
        assert report.ok
        assert report.total == len(report.passed) > 0


class TestParseCases:
    def test_valid_cases(self):
        cases = parse_cases({"cases": [
            _case(name="pair"),
            _case(dialect="powershell", operation="quote", input="it's", expected="'it''s'"),
        ]})
        assert len(cases) == 2
        assert cases[0].dialect is Dialect.CMD_EXE
        assert cases[0].label == "pair"
        assert cases[1].expected == "'it''s'"
        assert cases[1].label == "powershell quote \"it's\""

    def test_empty_case_list(self):
        assert parse_cases({"cases": []}) == []

    @pytest.mark.parametrize("data", [
        {},
        {"cases": "nope"},
        {"cases": [], "extra": 1},
        {"cases": [{"dialect": "cmd_exe", "operation": "split", "input": "a"}]},
        {"cases": [_case(dialect="bash")]},
        {"cases": [_case(operation="join")]},
        {"cases": [_case(input=5)]},
        {"cases": [_case(expected="a b")]},
        {"cases": [_case(expected=["a", 2])]},
        {"cases": [_case(operation="quote", expected=["a"])]},
        {"cases": [_case(dialect="vc2008", operation="quote", expected="\"a b\"")]},
        {"cases": [_case(comment="not allowed")]},
    ])
    def test_invalid_data_rejected(self, data):
        with pytest.raises(ConformanceFileError, match="Invalid case file"):
            parse_cases(data)

    def test_error_names_location(self):
        with pytest.raises(ConformanceFileError) as exc_info:
            parse_cases({"cases": [_case(), _case(dialect="bash")]})
        assert "cases/1/dialect" in str(exc_info.value)


class TestLoadCases:
    def test_load_from_file(self, write_case_file):
        path = write_case_file({"description": "two", "cases": [_case(), _case(input="")]})
        cases = load_cases(path)
        assert [c.input for c in cases] == ["a b", ""]

    def test_accepts_str_path(self, write_case_file):
        path = write_case_file({"cases": [_case()]})
        assert len(load_cases(str(path))) == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConformanceFileError, match="Cannot read"):
            load_cases(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConformanceFileError, match="not valid JSON"):
            load_cases(path)

    def test_schema_error_from_file(self, write_case_file):
        path = write_case_file({"cases": [_case(operation="explode")]})
        with pytest.raises(ConformanceFileError):
            load_cases(path)


class TestRunCases:
    def test_run_split_case(self):
        case = ConformanceCase(Dialect.VC2008, "split", r'a\\\"b c', [r'a\"b', "c"])
        assert run_case(case).passed

    def test_run_quote_case(self):
        case = ConformanceCase(Dialect.CMD_EXE, "quote", 'a"b', '"a""b"')
        assert run_case(case).actual == '"a""b"'

    def test_failure_is_reported_and_logged(self, caplog):
        good = ConformanceCase(Dialect.POWERSHELL, "split", "a b", ["a", "b"])
        bad = ConformanceCase(Dialect.POWERSHELL, "split", "a b", ["a b"], name="wrong on purpose")

        with caplog.at_level(logging.WARNING, logger="winsplit.conformance"):
            report = run_cases([good, bad])

        assert not report.ok
        assert [r.case.name for r in report.failed] == ["wrong on purpose"]
        assert report.failed[0].actual == ["a", "b"]
        assert report.summary() == "1 passed, 1 failed (2 cases)"
        assert "Case failed: wrong on purpose" in caplog.text

    def test_empty_report(self):
        report = ConformanceReport()
        assert report.ok
        assert report.total == 0
        assert report.summary() == "0 passed, 0 failed (0 cases)"
