# ABOUTME: Tests for the example check runner
# ABOUTME: Verifies the built-in cases pass and that failures are counted

from pulselog.checks import DEFAULT_CASES, CheckCase, CheckReport, run_check, run_checks


class TestDefaultCases:
    def test_all_default_cases_pass(self):
        report = run_checks()

        assert report.total == len(DEFAULT_CASES)
        assert report.failed == 0
        assert report.all_passed is True
        assert report.success_rate == 100.0

    def test_includes_type_error_cases(self):
        error_cases = [case for case in DEFAULT_CASES if case.expects_error]
        assert [case.input for case in error_cases] == [None, 123]


class TestRunCheck:
    def test_matching_case_passes(self):
        result = run_check(CheckCase("ok", "HeartRate=60", [60]))

        assert result.passed is True
        assert result.actual == [60.0]
        assert result.error is None

    def test_mismatch_fails(self):
        result = run_check(CheckCase("wrong", "HeartRate=60", [61]))

        assert result.passed is False
        assert result.actual == [60.0]

    def test_expected_error_raised(self):
        result = run_check(CheckCase("none", None, None))

        assert result.passed is True
        assert "Input must be a string" in result.error

    def test_expected_error_not_raised(self):
        result = run_check(CheckCase("string", "HeartRate=60", None))

        assert result.passed is False
        assert result.error == "Expected InvalidArgumentError"

    def test_unexpected_error_fails(self):
        result = run_check(CheckCase("bytes", b"HeartRate=60", [60]))

        assert result.passed is False
        assert result.actual is None


class TestCheckReport:
    def test_counts(self):
        report = run_checks(
            [
                CheckCase("a", "HeartRate=60", [60]),
                CheckCase("b", "HeartRate=60", []),
                CheckCase("c", "", []),
                CheckCase("d", 5, None),
            ]
        )

        assert report.total == 4
        assert report.passed == 3
        assert report.failed == 1
        assert report.success_rate == 75.0
        assert report.all_passed is False

    def test_empty_report(self):
        report = CheckReport()

        assert report.total == 0
        assert report.success_rate == 0.0
        assert report.all_passed is True

    def test_failures_logged(self, caplog):
        run_checks([CheckCase("bad", "HeartRate=60", [])])

        assert "Check failed: bad" in caplog.text
