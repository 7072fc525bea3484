"""Tests for domain/model/report.py."""

import pytest

from calicheck.domain.model.enums import Severity
from calicheck.domain.model.report import EXIT_FAILURE, EXIT_SUCCESS, Report
from tests.factories import make_finding


class TestReportCreation:
    """Tests for FAIL-FIRST validation."""

    def test_missing_severity_raises(self) -> None:
        with pytest.raises(ValueError, match="every severity"):
            Report(findings=(), severity_counts={Severity.ERROR: 0}, rule_counts={})

    def test_counts_must_match_findings(self) -> None:
        with pytest.raises(ValueError, match="sum"):
            Report(
                findings=(make_finding(),),
                severity_counts=dict.fromkeys(Severity, 0),
                rule_counts={},
            )


class TestReportStatus:
    """Tests for pass/fail and exit codes."""

    def test_empty_report_passes(self) -> None:
        report = Report.empty()
        assert report.passed
        assert report.exit_code == EXIT_SUCCESS
        assert report.total == 0

    def test_warnings_only_pass(self) -> None:
        finding = make_finding(severity=Severity.WARNING)
        report = Report(
            findings=(finding,),
            severity_counts={Severity.ERROR: 0, Severity.WARNING: 1, Severity.INFO: 0},
            rule_counts={"max-call-chain": 1},
        )
        assert report.passed
        assert report.warning_count == 1

    def test_error_fails(self) -> None:
        finding = make_finding(severity=Severity.ERROR)
        report = Report(
            findings=(finding,),
            severity_counts={Severity.ERROR: 1, Severity.WARNING: 0, Severity.INFO: 0},
            rule_counts={"max-call-chain": 1},
        )
        assert not report.passed
        assert report.exit_code == EXIT_FAILURE

    def test_for_rule(self) -> None:
        first = make_finding("max-call-chain")
        second = make_finding("no-else-branch", payload={})
        report = Report(
            findings=(first, second),
            severity_counts={Severity.ERROR: 0, Severity.WARNING: 2, Severity.INFO: 0},
            rule_counts={"max-call-chain": 1, "no-else-branch": 1},
        )
        assert report.for_rule("no-else-branch") == (second,)
        assert report.for_rule("layered-dependency") == ()
