import pytest

from reqtest.assertions import Outcome, TestEvaluator
from reqtest.reporting import Reporter, RunStatus
from reqtest.runner import SequentialRunner
from reqtest.suite import Suite, TestDefinition, validate_suite_text
from reqtest.transport import RequestError


@pytest.mark.asyncio
async def test_runs_every_test_in_order_after_errors(fake_client, capture_consoles):
    out, err = capture_consoles
    client = fake_client(RequestError("timeout"), {"id": 1})
    tests = [
        TestDefinition(method="bogus", url="http://x"),
        TestDefinition(method="get", url="http://x/a"),
        TestDefinition(method="get", url="http://x/b", expect={"id": 1}),
    ]

    runner = SequentialRunner(TestEvaluator(client), out=out, err=err)
    results = await runner.run(tests)

    assert [r.outcome for r in results] == [Outcome.ABORTED, Outcome.REQUEST_ERROR, Outcome.SUCCEEDED]
    assert [r.exit_code for r in results] == [1, 1, 0]
    assert [call[1][0] for call in client.calls] == ["http://x/a", "http://x/b"]


@pytest.mark.asyncio
async def test_headers_are_numbered_from_one(fake_client, capture_consoles):
    out, err = capture_consoles
    tests = [
        TestDefinition(method="get", url="http://x/1", title="first"),
        TestDefinition(method="post", url="http://x/2", body={"a": 1}),
    ]

    await SequentialRunner(TestEvaluator(fake_client()), out=out, err=err).run(tests)
    text = out.file.getvalue()

    assert "TEST #1 - first" in text
    assert "GET http://x/1" in text
    assert "TEST #2" in text
    assert "POST http://x/2" in text
    assert '"a": 1' in text
    assert text.index("TEST #1") < text.index("TEST #2")


@pytest.mark.asyncio
async def test_failures_go_to_stderr(fake_client, capture_consoles):
    out, err = capture_consoles
    tests = [TestDefinition(method="get", url="http://x", expect={"id": 1})]

    await SequentialRunner(TestEvaluator(fake_client({"id": 2})), out=out, err=err).run(tests)
    text = err.file.getvalue()

    assert "Test failed!" in text
    assert "Expected response to be [eq] to :" in text
    assert '{"id":1}' in text
    assert '{"id":2}' in text


@pytest.mark.asyncio
async def test_no_expect_warning_is_printed(fake_client, capture_consoles):
    out, err = capture_consoles
    tests = [TestDefinition(method="get", url="http://x")]

    await SequentialRunner(TestEvaluator(fake_client("pong")), out=out, err=err).run(tests)
    text = out.file.getvalue()

    assert '[WARN] No "expect" test.' in text
    assert "Test Succeeded!" in text
    assert "pong" in text


@pytest.mark.asyncio
async def test_quiet_prints_only_unsuccessful_tests(fake_client, capture_consoles):
    out, err = capture_consoles
    tests = [
        TestDefinition(method="get", url="http://x", expect=1),
        TestDefinition(method="nope", url="http://x"),
    ]

    await SequentialRunner(TestEvaluator(fake_client(1)), quiet=True, out=out, err=err).run(tests)

    assert out.file.getvalue() == ""
    assert "Test aborted!" in err.file.getvalue()
    assert "Unknown Method: NOPE" in err.file.getvalue()


@pytest.mark.asyncio
async def test_results_are_recorded(fake_client, capture_consoles):
    out, err = capture_consoles
    tests = [
        TestDefinition(method="get", url="http://x", expect=1, title="one"),
        TestDefinition(method="get", url="http://x", expect=1),
    ]
    reporter = Reporter.from_suite(Suite(name="demo", tests=tests))
    reporter.start_run()

    await SequentialRunner(TestEvaluator(fake_client(1, 2)), reporter=reporter, out=out, err=err).run(tests)
    report = reporter.finish_run()

    assert [t.number for t in report.tests] == [1, 2]
    assert report.tests[0].title == "one"
    assert report.succeeded_tests == 1
    assert report.failed_tests == 1
    assert report.status == RunStatus.FAILED


@pytest.mark.asyncio
async def test_yaml_only_values_do_not_stop_the_run(fake_client, capture_consoles):
    out, err = capture_consoles
    suite, validation = validate_suite_text(
        "- {method: get, url: 'http://x/1', expect: {released: 2024-01-01}}\n"
        "- {method: post, url: 'http://x/2', body: {day: 2024-01-01}, expect: {1: a, b: c}}\n"
        "- {method: get, url: 'http://x/3', expect: ok}\n"
    )
    assert validation.is_valid
    client = fake_client({"released": "2024-01-01"}, {"1": "a", "b": "c"}, "ok")
    reporter = Reporter.from_suite(suite)
    reporter.start_run()

    results = await SequentialRunner(TestEvaluator(client), reporter=reporter, out=out, err=err).run(suite.tests)

    assert [r.outcome for r in results] == [Outcome.SUCCEEDED] * 3
    assert len(client.calls) == 3
    assert '"day": "2024-01-01"' in out.file.getvalue()
    assert reporter.finish_run().status == RunStatus.PASSED
