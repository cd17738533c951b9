"""
Suite loading for HTTP request tests

This package provides tools for loading, validating and interpolating
suites of HTTP request tests.

Usage:
    from reqtest.suite import load_suite, interpolate_suite

    # Load from file (a bare JSON list or a YAML/JSON object with 'tests')
    suite, result = load_suite("parameters.json")
    if not result.is_valid:
        print(result)

    # Resolve {{env.NAME}} placeholders
    suite = interpolate_suite(suite)
"""

# Public API
from .loader import load_suite, validate_suite_text
from .interpolation import build_env, interpolate_suite, interpolate_test, interpolate_value

# Models (for type hints and isinstance checks)
from .models import (
    AuthConfig,
    AuthType,
    Defaults,
    HttpMethod,
    MissingFieldError,
    Suite,
    TestDefinition,
    TestDefinitionError,
    UnknownMethodError,
    UnknownOperatorError,
)

# Validation (for custom validation if needed)
from .validation import SchemaValidator, ValidationError, ValidationResult

__all__ = [
    # Loader functions
    "load_suite",
    "validate_suite_text",
    # Interpolation
    "build_env",
    "interpolate_suite",
    "interpolate_test",
    "interpolate_value",
    # Models
    "Suite",
    "TestDefinition",
    "Defaults",
    "HttpMethod",
    "AuthConfig",
    "AuthType",
    # Errors
    "TestDefinitionError",
    "MissingFieldError",
    "UnknownMethodError",
    "UnknownOperatorError",
    # Validation
    "ValidationResult",
    "ValidationError",
    "SchemaValidator",
]
