"""
Core components of the fieldrules validation engine.

Key Components:
- Validator: runs rule sets against data records
- RuleRegistry: built-in and custom rule predicates
- MessageResolver: failure message lookup with overrides
- RuleSet / parse_rule / parse_rules: rule expression parsing
- ValidationResult / ErrorBag: validation outcomes
"""

from .config import ValidatorConfig
from .engine import Validator, get_default_validator, register, reset_default_validator, validate
from .exceptions import (
    ConfigurationError,
    FieldRulesError,
    InvalidRuleDefinitionError,
    RuleParameterError,
    UnknownRuleError,
)
from .messages import DEFAULT_MESSAGES, MessageResolver
from .models import ErrorBag, Rule, RuleDescriptor, ValidationResult
from .parser import parse_rule, parse_rules, split_rules
from .registry import RuleRegistry
from .ruleset import RuleSet

__all__ = [
    "Validator",
    "ValidatorConfig",
    "get_default_validator",
    "reset_default_validator",
    "validate",
    "register",
    "RuleRegistry",
    "MessageResolver",
    "DEFAULT_MESSAGES",
    "RuleSet",
    "Rule",
    "RuleDescriptor",
    "ErrorBag",
    "ValidationResult",
    "parse_rule",
    "parse_rules",
    "split_rules",
    "FieldRulesError",
    "ConfigurationError",
    "InvalidRuleDefinitionError",
    "RuleParameterError",
    "UnknownRuleError",
]
