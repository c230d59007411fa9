"""
Core data models for the field validation engine.

This module provides the value types passed between the parser, the registry,
the engine and callers:
- Rule: a parsed rule token (name plus ordered parameters)
- RuleDescriptor: name and default message of a custom rule
- ErrorBag: ordered accumulation of failure messages per field
- ValidationResult: outcome of one validation pass
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Sequence, Tuple

Predicate = Callable[[Any, Sequence[str]], bool]
ErrorMap = Dict[str, List[str]]


@dataclass(frozen=True)
class Rule:
    """
    A single parsed rule token such as ``max:10`` or ``required``.

    Attributes:
        name (str): Registered name of the predicate to run
        params (Tuple[str, ...]): Ordered parameters, empty when none were given
    """

    name: str
    params: Tuple[str, ...] = ()

    def __str__(self) -> str:
        return ":".join((self.name,) + self.params)


@dataclass(frozen=True)
class RuleDescriptor:
    """
    Describes a custom rule for registration.

    Attributes:
        name (str): Rule name used in rule expressions
        message (str): Default failure message for the rule
    """

    name: str
    message: str


class ErrorBag:
    """
    Accumulates failure messages per field.

    Messages for a field keep the order in which they were recorded, which is
    the order the rules were declared in. Identical messages are kept.
    """

    def __init__(self):
        self._errors: ErrorMap = {}

    def record(self, field_name: str, message: str) -> None:
        """Append a message to the field's list, creating it on first use."""
        if field_name in self._errors:
            self._errors[field_name].append(message)
        else:
            self._errors[field_name] = [message]

    def to_dict(self) -> ErrorMap:
        """Return the accumulated error map."""
        return self._errors

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)


@dataclass
class ValidationResult:
    """
    Outcome of a validation pass.

    A result is truthy when validation passed, so it can be used directly in
    conditions.

    Attributes:
        is_valid (bool): Whether every field satisfied every rule
        errors (Dict[str, List[str]]): Failure messages per field
        context (Dict[str, Any]): Details about the pass, such as validated fields
    """

    is_valid: bool
    errors: ErrorMap = field(default_factory=dict)
    context: Dict[str, Any] = field(default_factory=dict)

    def get_errors(self) -> ErrorMap:
        """Return the failure messages recorded per field."""
        return self.errors

    def __bool__(self) -> bool:
        return self.is_valid
