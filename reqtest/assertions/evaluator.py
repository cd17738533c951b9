"""
Test evaluator.

Evaluates one test definition: checks that it can be run, sends its
request through a client and compares the response payload with the
test's expectation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..suite.models import HttpMethod, MissingFieldError, TestDefinition, TestDefinitionError
from ..transport.models import HttpResponse, RequestError
from .comparison import Operator, comparable
from .models import EvaluationResult

if TYPE_CHECKING:
    from ..transport.base import BaseClient

logger = logging.getLogger(__name__)

NO_EXPECT_WARNING = 'No "expect" test.'


def check_definition(test: TestDefinition) -> tuple[HttpMethod, Operator]:
    """
    Parse the method and operator of a test.

    Raises:
        MissingFieldError: method or url is missing
        UnknownMethodError: method is not a supported verb
        UnknownOperatorError: operator is not a supported comparison
    """
    if test.method is None or test.method == "":
        raise MissingFieldError("method")
    method = HttpMethod.parse(test.method)
    operator = Operator.parse(test.operator)
    if not test.url:
        raise MissingFieldError("url")
    return method, operator


class TestEvaluator:
    """
    Evaluates test definitions against an HTTP client.

    Every failure is turned into an EvaluationResult; evaluate() does
    not raise for bad definitions or failed requests.

    Example:
        async with AiohttpClient() as client:
            evaluator = TestEvaluator(client)
            result = await evaluator.evaluate(TestDefinition(
                method="get", url="http://localhost:8000/items/1", expect={"id": 1},
            ))
            print(result)
    """
    __test__ = False

    def __init__(self, client: BaseClient):
        self.client = client

    async def evaluate(self, test: TestDefinition) -> EvaluationResult:
        """
        Evaluate a single test.

        Args:
            test: The test definition

        Returns:
            EvaluationResult; ``exit_code`` is 1 for aborted tests and
            failed requests, 0 otherwise
        """
        try:
            method, operator = check_definition(test)
        except TestDefinitionError as e:
            logger.debug(f"Test aborted: {e}")
            return EvaluationResult.aborted_result(str(e))

        try:
            response = await self._dispatch(method, test)
        except RequestError as e:
            return EvaluationResult.request_error_result(
                e.message,
                details={"status": e.status} if e.status is not None else None,
            )
        except Exception as e:
            return EvaluationResult.request_error_result(str(e) or type(e).__name__)

        return self.compare(test, operator, response.data)

    async def _dispatch(self, method: HttpMethod, test: TestDefinition) -> HttpResponse:
        """
        Call the client verb with positional arguments shaped as
        (url, body, options), (url, options, None) or (url, None, None).
        """
        call = getattr(self.client, method.value)
        if test.has_body:
            return await call(test.url, test.body, test.options)
        if test.options is not None:
            return await call(test.url, test.options, None)
        return await call(test.url, None, None)

    def compare(self, test: TestDefinition, operator: Operator, data: Any) -> EvaluationResult:
        """Compare a response payload with the test's expectation."""
        if not test.has_expect:
            return EvaluationResult.succeeded_result(
                "Response received",
                response=data,
                warning=NO_EXPECT_WARNING,
            )

        actual = comparable(data).normalize()
        expected = comparable(test.expect).normalize()

        details: dict[str, Any] = {}
        try:
            holds = operator.apply(actual, expected)
        except TypeError:
            holds = False
            details["hint"] = (
                f"Cannot order {type(actual).__name__} against {type(expected).__name__}"
            )

        if holds:
            return EvaluationResult.succeeded_result(
                f'Response was [{operator.value}] {operator.preposition} "expect" test.',
                operator=operator,
                expected=expected,
                actual=actual,
                response=data,
            )

        return EvaluationResult.failed_result(
            f"Expected response to be [{operator.value}] {operator.preposition}",
            operator=operator,
            expected=expected,
            actual=actual,
            response=data,
            details=details,
        )
