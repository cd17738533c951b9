"""
Evaluation engine for HTTP request tests

This package validates a test definition, sends its request and
compares the response with the test's expectation.

Supported operators (response <op> expected):
    - eq, ne: equality / inequality
    - gt, gte, lt, lte: ordering

Objects, arrays and null are compared through their canonical JSON text,
so ordering operators on them compare strings.

Usage:
    from reqtest.assertions import TestEvaluator, Operator, normalize

    evaluator = TestEvaluator(client)
    result = await evaluator.evaluate(test)

    if result.succeeded:
        print("✅ Test succeeded")
    else:
        print(result)  # Detailed failure message
"""

# Models
from .models import EvaluationResult, Outcome

# Comparison
from .comparison import Comparable, Operator, Scalar, Structured, canonical_json, comparable, normalize

# Evaluator
from .evaluator import NO_EXPECT_WARNING, TestEvaluator, check_definition

__all__ = [
    # Models
    "EvaluationResult",
    "Outcome",
    # Comparison
    "Comparable",
    "Operator",
    "Scalar",
    "Structured",
    "canonical_json",
    "comparable",
    "normalize",
    # Evaluator
    "NO_EXPECT_WARNING",
    "TestEvaluator",
    "check_definition",
]
