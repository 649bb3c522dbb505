"""Conformance cases: recorded reference behaviour checked against the codecs.

WHY: Each dialect has to match its reference parser bit-for-bit, not just
"reasonably". Keeping expected results as data (rather than only as unit
tests) lets anyone capture the real behaviour of CommandLineToArgvW,
cmd.exe or PowerShell on a Windows machine and replay it here.

HOW: A case file is JSON validated against data/cases.schema.json with
jsonschema. Each case names a dialect, an operation (split or quote), an
input string and the expected result. run_cases() runs every case through
the public API and collects a ConformanceReport.

RULES:
- Schema violations, unreadable files and invalid JSON all raise
  ConformanceFileError; a loaded case never fails at run time except by
  producing a different result.
- "expected" is a list of strings for split, a string for quote.
- quote cases are not allowed for vc2008.
- The bundled reference file is data/reference_cases.json.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema

import winsplit
from winsplit.errors import ConformanceFileError
from winsplit.models import Dialect

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent / "data"
SCHEMA_PATH = _DATA_DIR / "cases.schema.json"
REFERENCE_CASES_PATH = _DATA_DIR / "reference_cases.json"

_CACHED_SCHEMA: Optional[Dict[str, Any]] = None


def _get_schema() -> Dict[str, Any]:
    """Load and cache the case file schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


@dataclass
class ConformanceCase:
    """One recorded input and its expected result.

    Attributes:
        dialect: Dialect the case applies to.
        operation: "split" or "quote".
        input: Raw command line (split) or token (quote).
        expected: List of tokens (split) or escaped string (quote).
        name: Optional human-readable label.
    """

    dialect: Dialect
    operation: str
    input: str
    expected: Union[List[str], str]
    name: str = ""

    @property
    def label(self) -> str:
        return self.name or "{} {} {!r}".format(self.dialect.value, self.operation, self.input)


@dataclass
class CaseResult:
    """Outcome of running one case."""

    case: ConformanceCase
    actual: Union[List[str], str]

    @property
    def passed(self) -> bool:
        return self.actual == self.case.expected


@dataclass
class ConformanceReport:
    """All results of a conformance run, split into passed and failed."""

    passed: List[CaseResult] = field(default_factory=list)
    failed: List[CaseResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.passed) + len(self.failed)

    @property
    def ok(self) -> bool:
        return not self.failed

    def summary(self) -> str:
        return "{} passed, {} failed ({} cases)".format(
            len(self.passed), len(self.failed), self.total
        )


def parse_cases(data: Any) -> List[ConformanceCase]:
    """Validate decoded case-file JSON and build ConformanceCase objects.

    Raises:
        ConformanceFileError: If data does not match the schema.
    """
    try:
        jsonschema.validate(instance=data, schema=_get_schema())
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise ConformanceFileError(
            "Invalid case file at {}: {}".format(location, exc.message)
        ) from exc

    cases = []  # type: List[ConformanceCase]
    for item in data["cases"]:
        expected = item["expected"]
        if isinstance(expected, list):
            expected = list(expected)
        cases.append(ConformanceCase(
            dialect=Dialect(item["dialect"]),
            operation=item["operation"],
            input=item["input"],
            expected=expected,
            name=item.get("name", ""),
        ))
    return cases


def load_cases(path: Union[str, Path], encoding: str = "utf-8") -> List[ConformanceCase]:
    """Read, validate and parse a case file.

    Raises:
        ConformanceFileError: If the file is missing, not JSON, or invalid.
    """
    path = Path(path)
    try:
        with open(path, encoding=encoding) as f:
            data = json.load(f)
    except OSError as exc:
        raise ConformanceFileError("Cannot read case file {}: {}".format(path, exc)) from exc
    except ValueError as exc:
        raise ConformanceFileError("Case file {} is not valid JSON: {}".format(path, exc)) from exc

    cases = parse_cases(data)
    logger.debug("Loaded %d cases from %s", len(cases), path)
    return cases


def load_reference_cases() -> List[ConformanceCase]:
    """Load the reference cases bundled with the package."""
    return load_cases(REFERENCE_CASES_PATH)


def run_case(case: ConformanceCase) -> CaseResult:
    """Run one case through the public API."""
    if case.operation == "split":
        actual = winsplit.split(case.dialect, case.input)  # type: Union[List[str], str]
    else:
        actual = winsplit.quote(case.dialect, case.input)
    return CaseResult(case=case, actual=actual)


def run_cases(cases: List[ConformanceCase]) -> ConformanceReport:
    """Run every case and collect the results.

    Failures are logged at WARNING with expected and actual values; the
    totals are logged at INFO.
    """
    report = ConformanceReport()
    for case in cases:
        result = run_case(case)
        if result.passed:
            report.passed.append(result)
        else:
            logger.warning(
                "Case failed: %s (expected %r, got %r)",
                case.label, case.expected, result.actual,
            )
            report.failed.append(result)
    logger.info("Conformance run: %s", report.summary())
    return report
