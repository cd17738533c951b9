"""
Comparison protocol for response expectations.

Before comparing, the response payload and the expected value are each
turned into a comparable value:

- Scalar: strings, numbers and booleans compare as themselves.
- Structured: objects, arrays and null compare as their canonical JSON
  text.

A consequence is that ordering operators on structured values are
string (lexicographic) comparisons: ``[10] < [9]`` because ``"[10]" <
"[9]"``. Existing suites rely on this, so it is kept.
"""

from __future__ import annotations

import json
import operator as op
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Union

from ..suite.models import UnknownOperatorError


def canonical_json(value: Any) -> str:
    """
    Serialize a structured value to its canonical comparable text.

    Values JSON has no type for (dates read from YAML suites, for example)
    are written as their ``str()``. Mappings whose keys cannot be sorted
    against each other have their keys turned into JSON key text first.
    """
    try:
        return _dumps(value)
    except TypeError:
        return _dumps(_with_string_keys(value))


def _dumps(value: Any) -> str:
    return json.dumps(
        value, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str,
    )


def _json_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    return str(key)


def _with_string_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {_json_key(k): _with_string_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_with_string_keys(v) for v in value]
    return value


@dataclass(frozen=True)
class Scalar:
    """A value compared natively."""
    value: Any

    def normalize(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Structured:
    """A value compared through its canonical JSON text."""
    value: Any

    def normalize(self) -> str:
        return canonical_json(self.value)


Comparable = Union[Scalar, Structured]


def comparable(value: Any) -> Comparable:
    """Tag a value as Scalar or Structured."""
    if value is None or isinstance(value, (dict, list, tuple)):
        return Structured(value)
    return Scalar(value)


def normalize(value: Any) -> Any:
    """Shortcut for ``comparable(value).normalize()``."""
    return comparable(value).normalize()


class Operator(str, Enum):
    """Comparison applied as ``response <op> expected``."""
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"

    @classmethod
    def parse(cls, raw: Any) -> Operator:
        """Parse a raw operator name; None or "" means EQ."""
        if raw is None or raw == "":
            return cls.EQ
        try:
            return cls(raw)
        except ValueError:
            raise UnknownOperatorError(raw) from None

    @property
    def preposition(self) -> str:
        """'than' for strict orderings, 'to' otherwise, as used in reports."""
        return "than" if self in (Operator.GT, Operator.LT) else "to"

    def apply(self, left: Any, right: Any) -> bool:
        """
        Evaluate ``left <op> right``.

        Raises:
            TypeError: if the operands cannot be ordered against each other
        """
        return bool(_COMPARATORS[self](left, right))


_COMPARATORS: dict[Operator, Callable[[Any, Any], Any]] = {
    Operator.EQ: op.eq,
    Operator.NE: op.ne,
    Operator.GT: op.gt,
    Operator.GTE: op.ge,
    Operator.LT: op.lt,
    Operator.LTE: op.le,
}
