"""
reqtest - HTTP Request Assertion Runner

This package sends the HTTP requests described by a suite of test
definitions and checks each response against an expected value.

Subpackages:
    - suite: Load, validate and interpolate suite files
    - transport: HTTP client (aiohttp)
    - assertions: Test evaluator and comparison operators
    - reporting: Console output and run reports

Usage:
    from reqtest import load_suite, create_client, TestEvaluator, SequentialRunner

    suite, result = load_suite("parameters.json")
    reporter = Reporter.from_suite(suite)
    reporter.start_run()

    async with create_client(suite) as client:
        runner = SequentialRunner(TestEvaluator(client), reporter=reporter)
        results = await runner.run(suite.tests)

    report = reporter.finish_run()
    print(report.summary())
"""

__version__ = "0.1.0"

# Re-export suite for convenience
from .suite import (
    # Loader functions
    load_suite,
    validate_suite_text,
    interpolate_suite,
    # Models
    Suite,
    TestDefinition,
    Defaults,
    HttpMethod,
    AuthConfig,
    AuthType,
    # Errors
    TestDefinitionError,
    MissingFieldError,
    UnknownMethodError,
    UnknownOperatorError,
    # Validation
    ValidationResult,
    ValidationError,
    SchemaValidator,
)

# Re-export transport for convenience
from .transport import (
    create_client,
    BaseClient,
    AiohttpClient,
    HttpResponse,
    RequestError,
)

# Re-export assertions for convenience
from .assertions import (
    EvaluationResult,
    Outcome,
    Operator,
    Scalar,
    Structured,
    comparable,
    normalize,
    TestEvaluator,
    check_definition,
)

# Re-export reporting for convenience
from .reporting import (
    RunReport,
    RunStatus,
    TestRecord,
    Reporter,
)

from .runner import SequentialRunner

__all__ = [
    # Package info
    "__version__",
    # Suite
    "load_suite",
    "validate_suite_text",
    "interpolate_suite",
    "Suite",
    "TestDefinition",
    "Defaults",
    "HttpMethod",
    "AuthConfig",
    "AuthType",
    "TestDefinitionError",
    "MissingFieldError",
    "UnknownMethodError",
    "UnknownOperatorError",
    "ValidationResult",
    "ValidationError",
    "SchemaValidator",
    # Transport
    "create_client",
    "BaseClient",
    "AiohttpClient",
    "HttpResponse",
    "RequestError",
    # Assertions
    "EvaluationResult",
    "Outcome",
    "Operator",
    "Scalar",
    "Structured",
    "comparable",
    "normalize",
    "TestEvaluator",
    "check_definition",
    # Reporting
    "RunReport",
    "RunStatus",
    "TestRecord",
    "Reporter",
    # Runner
    "SequentialRunner",
]
