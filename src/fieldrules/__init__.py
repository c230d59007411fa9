"""
fieldrules - Declarative Field Validation

This package validates records of named values against per-field rule
expressions such as ``"required|email|max:64"`` and collects human-readable
error messages per field. It includes:

- A rule expression parser and a registry of built-in and custom rules
- A validation engine returning structured results
- Message overrides per rule or per field
- Rule documents checked with JSON Schema, reporting helpers and a CLI

Example:
    >>> import fieldrules
    >>> result = fieldrules.validate({}, {"email": "required|email"})
    >>> result.errors
    {'email': ['Field is required']}
"""

__version__ = "0.1.0"
__author__ = "fieldrules Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 11):
    raise RuntimeError("fieldrules requires Python 3.11 or higher")

# Import commonly used components for easier access
from .core.config import ValidatorConfig
from .core.engine import Validator, get_default_validator, register, reset_default_validator, validate
from .core.exceptions import (
    ConfigurationError,
    FieldRulesError,
    InvalidRuleDefinitionError,
    RuleParameterError,
    UnknownRuleError,
)
from .core.models import Rule, RuleDescriptor, ValidationResult
from .core.registry import RuleRegistry
from .core.ruleset import RuleSet

__all__ = [
    "Validator",
    "ValidatorConfig",
    "validate",
    "register",
    "get_default_validator",
    "reset_default_validator",
    "RuleRegistry",
    "RuleSet",
    "Rule",
    "RuleDescriptor",
    "ValidationResult",
    "FieldRulesError",
    "ConfigurationError",
    "InvalidRuleDefinitionError",
    "RuleParameterError",
    "UnknownRuleError",
]
