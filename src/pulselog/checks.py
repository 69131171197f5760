# ABOUTME: Example-driven checks for the heart-rate extractor
# ABOUTME: Runs fixed log samples through extract() and tallies pass/fail results

import logging
from dataclasses import dataclass, field

from pulselog.errors import InvalidArgumentError
from pulselog.extractor import extract

logger = logging.getLogger(__name__)


@dataclass
class CheckCase:
    """
    A single example check.

    Attributes:
        name: Short name shown in reports
        input: Value passed to extract(); non-strings expect InvalidArgumentError
        expected: Expected readings, or None when an error is expected
        description: What the case demonstrates
    """

    name: str
    input: object
    expected: list[float] | None
    description: str = ""

    @property
    def expects_error(self) -> bool:
        return self.expected is None


@dataclass
class CheckResult:
    case: CheckCase
    passed: bool
    actual: list[float] | None = None
    error: str | None = None


@dataclass
class CheckReport:
    results: list[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return len(self.results) - self.passed

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def success_rate(self) -> float:
        """Percentage of passing checks, 0.0 when nothing ran."""
        if not self.results:
            return 0.0
        return self.passed / self.total * 100

    @property
    def all_passed(self) -> bool:
        return self.failed == 0


DEFAULT_CASES: list[CheckCase] = [
    CheckCase(
        name="Log sample",
        input=(
            "LOG_01: HeartRate=72bpm; STATUS=OK | LOG_02: HeartRate= 85 ; STATUS=WARN"
            " | LOG_03: HeartRate=error; STATUS=FAIL"
        ),
        expected=[72, 85],
        description="Units are ignored and non-numeric readings dropped",
    ),
    CheckCase("Empty string", "", [], "Empty input yields no readings"),
    CheckCase("No valid numbers", "HeartRate=error; HeartRate=N/A", [], "Non-numeric values are filtered out"),
    CheckCase(
        "Multiple valid values",
        "HeartRate=60; HeartRate=75; HeartRate=90",
        [60, 75, 90],
        "All valid numeric values are extracted",
    ),
    CheckCase("Decimal values", "HeartRate=72.5bpm; HeartRate=85.3", [72.5, 85.3], "Decimals are kept"),
    CheckCase(
        "Mixed spacing",
        "HeartRate=100;HeartRate = 120 ;HeartRate= 140",
        [100, 120, 140],
        "Whitespace around '=' is allowed",
    ),
    CheckCase("Negative value", "HeartRate=-10; HeartRate=80", [80], "Negative readings are impossible"),
    CheckCase("Zero value", "HeartRate=0; HeartRate=60", [60], "Zero is not a heart rate"),
    CheckCase(
        "Minimum boundary",
        "HeartRate=29; HeartRate=30; HeartRate=31",
        [30, 31],
        "30 bpm is the lowest accepted reading",
    ),
    CheckCase(
        "Maximum boundary",
        "HeartRate=249; HeartRate=250; HeartRate=251",
        [249, 250],
        "250 bpm is the highest accepted reading",
    ),
    CheckCase("Unrealistically large", "HeartRate=999; HeartRate=100", [100], "Implausible highs are dropped"),
    CheckCase(
        "Mixed valid and invalid",
        "HeartRate=65; HeartRate=invalid; HeartRate=78; HeartRate=N/A; HeartRate=82",
        [65, 78, 82],
        "Only valid readings survive, in order",
    ),
    CheckCase("None input", None, None, "Non-string input raises InvalidArgumentError"),
    CheckCase("Numeric input", 123, None, "Non-string input raises InvalidArgumentError"),
]


def run_check(case: CheckCase) -> CheckResult:
    """Run a single case and compare extract() output to its expectation."""
    try:
        actual = extract(case.input)  # type: ignore[arg-type]
    except InvalidArgumentError as e:
        return CheckResult(case=case, passed=case.expects_error, error=str(e))

    if case.expects_error:
        return CheckResult(case=case, passed=False, actual=actual, error="Expected InvalidArgumentError")

    return CheckResult(case=case, passed=actual == case.expected, actual=actual)


def run_checks(cases: list[CheckCase] | None = None) -> CheckReport:
    """
    Run example checks and collect a report.

    Args:
        cases: Cases to run; defaults to DEFAULT_CASES

    Returns:
        CheckReport with per-case results and totals
    """
    if cases is None:
        cases = DEFAULT_CASES

    report = CheckReport()
    for case in cases:
        result = run_check(case)
        if not result.passed:
            logger.warning(f"Check failed: {case.name} (expected {case.expected}, got {result.actual})")
        report.results.append(result)

    logger.info(f"Checks complete: {report.passed}/{report.total} passed")
    return report
