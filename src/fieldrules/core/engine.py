"""
Validation Engine

Runs a rule set against a data record. For every field, in declaration order,
and every rule of that field, in declaration order:

- if the field was provided, the rule's predicate runs and a false result
  records the resolved failure message for the field;
- if the field was not provided (absent, empty string, or None), only a
  ``required`` rule fires, as a failure; every other rule is skipped.

A rule name with no predicate raises UnknownRuleError and aborts the pass.
Everything a pass touches besides the registry and the instance overrides is
local to the call, so a Validator can be shared between threads.
"""

import logging
from threading import Lock
from typing import Any, Dict, Mapping, Optional, Union

from .config import ValidatorConfig
from .exceptions import ConfigurationError, RuleParameterError
from .messages import MessageResolver
from .models import ErrorBag, Predicate, RuleDescriptor, ValidationResult
from .parser import RuleExpression
from .registry import RuleRegistry
from .ruleset import RuleSet

logger = logging.getLogger(__name__)

REQUIRED_RULE = "required"

Rules = Union[RuleSet, Mapping[str, RuleExpression]]


class Validator:
    """
    Declarative field validator.

    Attributes:
        registry (RuleRegistry): Predicates available to rule expressions
        config (ValidatorConfig): Engine configuration

    Example:
        >>> validator = Validator()
        >>> result = validator.validate({"name": ""}, {"name": "required|max:10"})
        >>> result.is_valid
        False
        >>> result.errors
        {'name': ['Field is required']}
    """

    def __init__(
        self,
        registry: Optional[RuleRegistry] = None,
        config: Optional[ValidatorConfig] = None,
    ):
        self.registry = registry or RuleRegistry()
        self.config = config or ValidatorConfig()
        self._messages: Dict[str, str] = {}
        self._messages_lock = Lock()

    def register(
        self, descriptor: Union[RuleDescriptor, Mapping[str, Any]], predicate: Predicate
    ) -> Predicate:
        """
        Register a custom rule on this validator's registry.

        The descriptor's message becomes the rule's default failure message; a
        ``rule`` or ``rule.field`` override still takes precedence over it.

        Returns:
            The predicate, so registration can be chained
        """
        return self.registry.register(descriptor, predicate)

    def set_messages(self, messages: Optional[Mapping[str, str]]) -> None:
        """
        Set message overrides that persist across validation calls.

        With no overrides set yet, the map is adopted as a whole; otherwise its
        entries are merged key by key into the existing overrides.
        """
        if messages is None:
            return
        if not isinstance(messages, Mapping):
            raise ConfigurationError("Messages must be a mapping of rule keys to text")
        with self._messages_lock:
            if not self._messages:
                self._messages = dict(messages)
            else:
                self._messages.update(messages)

    @property
    def messages(self) -> Dict[str, str]:
        """Copy of the persistent message overrides."""
        with self._messages_lock:
            return dict(self._messages)

    def _is_provided(self, data: Mapping[str, Any], field: str) -> bool:
        if field not in data:
            return False
        value = data[field]
        if value is None and self.config.none_is_missing:
            return False
        return not (isinstance(value, str) and value == "")

    def validate(
        self,
        data: Mapping[str, Any],
        rules: Rules,
        messages: Optional[Mapping[str, str]] = None,
    ) -> ValidationResult:
        """
        Validate a data record against per-field rules.

        Args:
            data: Field names mapped to the values to check
            rules: A RuleSet, or field names mapped to rule expressions such as
                ``"required|email"`` or ``["required", "regex:^a|b$"]``
            messages: Overrides for this call only, keyed by rule name or
                ``rule.field``

        Returns:
            ValidationResult: Validity and the failure messages per field

        Raises:
            ConfigurationError: If data, rules or messages are malformed, or a
                built-in rule received unusable parameters
            UnknownRuleError: If a rule name has no registered predicate
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError("Data to validate is required")
        if messages is not None and not isinstance(messages, Mapping):
            raise ConfigurationError("Messages must be a mapping of rule keys to text")

        rule_set = rules if isinstance(rules, RuleSet) else RuleSet.from_mapping(rules)
        resolver = MessageResolver.layered(
            self.registry.messages(),
            self.messages,
            messages,
            fallback_message=self.config.fallback_message,
        )

        if self.config.strict_rules:
            for field, field_rules in rule_set.items():
                for rule in field_rules:
                    self.registry.resolve(rule.name, field=field)

        errors = ErrorBag()
        for field, field_rules in rule_set.items():
            provided = self._is_provided(data, field)
            for rule in field_rules:
                if not provided:
                    if rule.name == REQUIRED_RULE:
                        errors.record(field, resolver.resolve(field, rule.name, rule.params))
                    continue

                predicate = self.registry.resolve(rule.name, field=field)
                try:
                    passed = predicate(data[field], rule.params)
                except RuleParameterError as e:
                    e.field = field
                    raise
                if not passed:
                    errors.record(field, resolver.resolve(field, rule.name, rule.params))

        result = ValidationResult(
            is_valid=not errors,
            errors=errors.to_dict(),
            context={"validated_fields": rule_set.fields, "rule_count": len(rule_set)},
        )
        status = "passed" if result.is_valid else f"{len(result.errors)} failing"
        logger.debug(f"Validated {len(rule_set.fields)} fields: {status}")
        return result


_default_validator: Optional[Validator] = None
_default_lock = Lock()


def get_default_validator() -> Validator:
    """Return the process-wide validator used by the module-level helpers."""
    global _default_validator
    with _default_lock:
        if _default_validator is None:
            _default_validator = Validator()
        return _default_validator


def reset_default_validator() -> None:
    """Discard the process-wide validator, dropping its custom rules and overrides."""
    global _default_validator
    with _default_lock:
        _default_validator = None


def validate(
    data: Mapping[str, Any],
    rules: Rules,
    messages: Optional[Mapping[str, str]] = None,
) -> ValidationResult:
    """Validate with the process-wide validator."""
    return get_default_validator().validate(data, rules, messages)


def register(descriptor: Union[RuleDescriptor, Mapping[str, Any]], predicate: Predicate) -> Predicate:
    """Register a custom rule on the process-wide validator."""
    return get_default_validator().register(descriptor, predicate)
