"""
Sequential test runner.

Runs tests one at a time, in order, each fully awaited before the next
starts. A test that aborts or whose request fails does not stop the run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from rich.console import Console

from .assertions import EvaluationResult, TestEvaluator
from .reporting.console import print_header, print_result

if TYPE_CHECKING:
    from .reporting import Reporter
    from .suite import TestDefinition


class SequentialRunner:
    """
    Evaluates a sequence of tests strictly in order.

    Example:
        async with create_client(suite) as client:
            runner = SequentialRunner(TestEvaluator(client))
            results = await runner.run(suite.tests)
    """

    def __init__(
        self,
        evaluator: TestEvaluator,
        reporter: Reporter | None = None,
        quiet: bool = False,
        out: Console | None = None,
        err: Console | None = None,
    ):
        self.evaluator = evaluator
        self.reporter = reporter
        self.quiet = quiet
        self.out = out
        self.err = err

    async def run(self, tests: Iterable[TestDefinition]) -> list[EvaluationResult]:
        """
        Evaluate every test and return the results in input order.

        Tests are numbered from 1 for reporting.
        """
        results: list[EvaluationResult] = []
        for number, test in enumerate(tests, start=1):
            results.append(await self.run_one(number, test))
        return results

    async def run_one(self, number: int, test: TestDefinition) -> EvaluationResult:
        if not self.quiet:
            print_header(number, test, out=self.out)
        if self.reporter:
            self.reporter.start_test(number, test)

        result = await self.evaluator.evaluate(test)

        if self.reporter:
            self.reporter.record(number, test, result)
        if not self.quiet or not result.succeeded:
            print_result(result, out=self.out, err=self.err)
        return result
