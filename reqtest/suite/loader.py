"""
Suite loader for request test suites.

This module provides the public API for loading and validating
suite files from disk or from strings. Files ending in ``.json`` are
read with the json module, anything else with PyYAML.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .models import Suite
from .parser import SchemaParser
from .validation import SchemaValidator, ValidationResult


def load_suite(path: str | Path) -> tuple[Suite | None, ValidationResult]:
    """
    Load and validate a suite from a JSON or YAML file.

    Args:
        path: Path to the suite file

    Returns:
        Tuple of (Suite or None, ValidationResult)
        If validation fails, Suite will be None.

    Example:
        suite, result = load_suite("parameters.json")
        if not result.is_valid:
            print(result)
            sys.exit(1)
        # Use suite...
    """
    path = Path(path)

    # Check file exists
    if not path.exists():
        result = ValidationResult()
        result.add_error(
            str(path),
            "File not found",
            suggestion="Check the file path is correct"
        )
        return None, result

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data, result = _parse_json(text, str(path))
    else:
        data, result = _parse_yaml(text, str(path))
    if not result.is_valid:
        return None, result

    return _validate_and_parse(data, default_name=path.stem)


def validate_suite_text(
    text: str,
    fmt: str = "yaml",
    name: str = "suite",
) -> tuple[Suite | None, ValidationResult]:
    """
    Validate a suite from a string (useful for testing).

    Args:
        text: Suite content
        fmt: "json" or "yaml"
        name: Suite name used when the document doesn't set one

    Returns:
        Tuple of (Suite or None, ValidationResult)
    """
    if fmt == "json":
        data, result = _parse_json(text, fmt)
    else:
        data, result = _parse_yaml(text, fmt)
    if not result.is_valid:
        return None, result

    return _validate_and_parse(data, default_name=name)


def _parse_json(text: str, source: str) -> tuple[Any, ValidationResult]:
    result = ValidationResult()
    try:
        return json.loads(text), result
    except json.JSONDecodeError as e:
        result.add_error(
            source,
            f"Invalid JSON syntax: {e}",
            suggestion="Check for trailing commas and unquoted keys"
        )
        return None, result


def _parse_yaml(text: str, source: str) -> tuple[Any, ValidationResult]:
    result = ValidationResult()
    try:
        return yaml.safe_load(text), result
    except yaml.YAMLError as e:
        result.add_error(
            source,
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)"
        )
        return None, result


def _validate_and_parse(data: Any, default_name: str) -> tuple[Suite | None, ValidationResult]:
    validator = SchemaValidator(data)
    result = validator.validate()

    if not result.is_valid:
        return None, result

    parser = SchemaParser(data, default_name=default_name)
    return parser.parse(), result
