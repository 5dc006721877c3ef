"""Tests for check outcomes."""

from datapipeline_check.check_result import CheckResult, Outcome


# ##################################################################
# test exit codes follow the plugin convention
def test_exit_codes():
    assert CheckResult.ok("fine").exit_code == 0
    assert CheckResult(Outcome.WARNING, "meh").exit_code == 1
    assert CheckResult.critical("bad").exit_code == 2
    assert CheckResult.unknown("huh").exit_code == 3


def test_constructors_keep_message():
    result = CheckResult.critical("Pipeline ghost not found!")

    assert result.outcome == Outcome.CRITICAL
    assert result.message == "Pipeline ghost not found!"
