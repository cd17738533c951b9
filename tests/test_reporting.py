import json

from reqtest.assertions import EvaluationResult, Operator, Outcome
from reqtest.reporting import Reporter, RunStatus, print_result
from reqtest.suite import Suite, TestDefinition


def make_reporter(*tests):
    reporter = Reporter.from_suite(Suite(name="demo", tests=list(tests)), run_id="run-1")
    reporter.start_run()
    return reporter


def test_error_outranks_failure():
    test = TestDefinition(method="get", url="http://x")
    reporter = make_reporter(test, test, test)
    reporter.record(1, test, EvaluationResult.succeeded_result("ok"))
    reporter.record(2, test, EvaluationResult.failed_result("bad", Operator.EQ, 1, 2))
    reporter.record(3, test, EvaluationResult.aborted_result("Unknown Method: X"))

    report = reporter.finish_run()

    assert report.status == RunStatus.ERROR
    assert (report.succeeded_tests, report.failed_tests, report.aborted_tests) == (1, 1, 1)


def test_all_succeeded_is_passed_even_with_warnings():
    test = TestDefinition(method="get", url="http://x")
    reporter = make_reporter(test)
    reporter.record(1, test, EvaluationResult.succeeded_result("ok", warning='No "expect" test.'))

    report = reporter.finish_run()

    assert report.status == RunStatus.PASSED
    assert report.warning_tests == 1


def test_record_captures_comparison_and_timing():
    test = TestDefinition(method="get", url="http://x", title="t", expect={"id": 1})
    reporter = make_reporter(test)
    reporter.start_test(1, test)
    record = reporter.record(
        1, test, EvaluationResult.failed_result("bad", Operator.GT, '{"id":1}', '{"id":0}'),
    )

    assert record.operator == "gt"
    assert record.expected_value == '{"id":1}'
    assert record.exit_code == 0
    assert record.duration_ms is not None


def test_save_json_and_summary(tmp_path):
    test = TestDefinition(method="get", url="http://x")
    reporter = make_reporter(test)
    reporter.record(1, test, EvaluationResult.request_error_result("timeout"))
    reporter.finish_run()

    path = tmp_path / "out" / "report.json"
    reporter.save_json(path)
    data = json.loads(path.read_text())

    assert data["run_id"] == "run-1"
    assert data["suite_name"] == "demo"
    assert data["tests"][0]["outcome"] == "request_error"
    assert data["tests"][0]["exit_code"] == 1

    summary = reporter.get_summary()
    assert "Run Report: demo" in summary
    assert "#1 GET http://x" in summary
    assert "timeout" in summary


def test_suite_hash_is_stable():
    tests = [TestDefinition(method="get", url="http://x", expect=[1])]
    first = Reporter.from_suite(Suite(name="a", tests=tests)).report.suite_hash
    second = Reporter.from_suite(Suite(name="a", tests=list(tests))).report.suite_hash
    assert first == second
    assert len(first) == 12


def test_print_result_routes_streams(capture_consoles):
    out, err = capture_consoles
    print_result(EvaluationResult.succeeded_result('Response was [gt] than "expect" test.', operator=Operator.GT), out, err)
    print_result(EvaluationResult.aborted_result('No "method" field'), out, err)

    assert 'Response was [gt] than "expect" test.' in out.file.getvalue()
    assert "Test aborted!" in err.file.getvalue()
    assert 'No "method" field' in err.file.getvalue()


def test_result_str():
    result = EvaluationResult.failed_result("Expected response to be [eq] to", Operator.EQ, '{"id":1}', '{"id":2}')
    text = str(result)
    assert text.startswith("❌ FAILED")
    assert 'Expected: {"id":1}' in text
    assert 'Actual:   {"id":2}' in text
    assert result.outcome == Outcome.FAILED
