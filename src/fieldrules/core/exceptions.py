"""
Custom exceptions for the field validation engine.

This module defines the closed hierarchy of errors raised by fieldrules. Each
exception type corresponds to a programmer or schema error that must abort the
current call. Routine validation failures are never raised; they are recorded
in the error map of a ValidationResult instead.
"""

from typing import Optional


class FieldRulesError(Exception):
    """
    Base class for every error raised by fieldrules.

    Attributes:
        rule (Optional[str]): Name of the rule involved, when known
        field (Optional[str]): Name of the field being validated, when known
    """

    def __init__(self, message: str, rule: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message)
        self.rule = rule
        self.field = field


class ConfigurationError(FieldRulesError):
    """
    Raised when a validation call is configured incorrectly.

    This exception is raised synchronously, before or during a validation pass,
    when the arguments themselves are unusable.

    Examples:
        * Data to validate is not a mapping
        * Rules to validate are not a mapping
        * Rule document does not match the rule document schema
    """

    def __str__(self) -> str:
        """Format configuration error message."""
        return f"Configuration Error: {super().__str__()}"


class InvalidRuleDefinitionError(ConfigurationError):
    """
    Raised when a custom rule cannot be registered.

    Examples:
        * Descriptor is not a mapping or RuleDescriptor
        * Missing or empty rule name
        * Missing or empty default message
        * Predicate is not callable
    """


class RuleParameterError(ConfigurationError):
    """
    Raised when a built-in rule receives parameters it cannot use.

    Examples:
        * ``regex`` without a pattern, or with a pattern that does not compile
    """


class UnknownRuleError(FieldRulesError):
    """
    Raised when a rule name has no registered predicate.

    This is a schema bug rather than a validation failure, so it aborts the
    whole validation pass and no error map is produced.
    """

    def __str__(self) -> str:
        """Format unknown rule error message."""
        return f"Unknown Rule Error: {super().__str__()}"
