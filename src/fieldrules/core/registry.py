"""
Rule Registry

Maps rule names to executable predicates. Every registry resolves names against
its own custom rules first and then against the shared, read-only table of
built-in predicates. Registering a rule under a built-in name therefore shadows
the built-in on that registry only; the built-in table itself never changes.
"""

import logging
from threading import RLock
from typing import Any, Dict, List, Mapping, Optional, Union

from .exceptions import InvalidRuleDefinitionError, UnknownRuleError
from .models import Predicate, RuleDescriptor
from .predicates import BUILTIN_PREDICATES

logger = logging.getLogger(__name__)

Descriptor = Union[RuleDescriptor, Mapping[str, Any]]


def _coerce_descriptor(descriptor: Descriptor) -> RuleDescriptor:
    if isinstance(descriptor, RuleDescriptor):
        name, message = descriptor.name, descriptor.message
    elif isinstance(descriptor, Mapping):
        name, message = descriptor.get("name"), descriptor.get("message")
    else:
        raise InvalidRuleDefinitionError(
            "Rule descriptor must be a mapping or RuleDescriptor with 'name' and 'message'"
        )

    if not isinstance(name, str) or not name:
        raise InvalidRuleDefinitionError("Rule name is required")
    if not isinstance(message, str) or not message:
        raise InvalidRuleDefinitionError(
            f"Rule '{name}' requires a default message describing the failure", rule=name
        )
    return RuleDescriptor(name=name, message=message)


class RuleRegistry:
    """
    Registry of rule predicates with name-based lookup.

    Example:
        >>> registry = RuleRegistry()
        >>> even = registry.register(
        ...     {"name": "even", "message": "Must be even"}, lambda v, p: int(v) % 2 == 0
        ... )
        >>> registry.resolve("even")("4", ())
        True
    """

    def __init__(self):
        self._custom: Dict[str, Predicate] = {}
        self._messages: Dict[str, str] = {}
        self._lock = RLock()

    def register(self, descriptor: Descriptor, predicate: Predicate) -> Predicate:
        """
        Register a custom rule, replacing any custom rule with the same name.

        Args:
            descriptor: RuleDescriptor or mapping with ``name`` and ``message``
            predicate: Callable taking ``(value, params)`` and returning a bool

        Returns:
            The predicate, unchanged

        Raises:
            InvalidRuleDefinitionError: If the descriptor or predicate is invalid
        """
        rule = _coerce_descriptor(descriptor)
        if not callable(predicate):
            raise InvalidRuleDefinitionError(
                f"Predicate for rule '{rule.name}' must be callable", rule=rule.name
            )

        with self._lock:
            if rule.name in BUILTIN_PREDICATES:
                logger.warning(f"Custom rule '{rule.name}' shadows the built-in rule")
            self._custom[rule.name] = predicate
            self._messages[rule.name] = rule.message

        logger.debug(f"Registered rule: {rule.name}")
        return predicate

    def unregister(self, name: str) -> Predicate:
        """Remove and return a custom rule. Raises UnknownRuleError if there is none."""
        with self._lock:
            if name not in self._custom:
                raise UnknownRuleError(f"No custom rule registered as '{name}'", rule=name)
            self._messages.pop(name, None)
            return self._custom.pop(name)

    def resolve(self, name: str, field: Optional[str] = None) -> Predicate:
        """
        Look up the predicate for a rule name.

        Args:
            name: Rule name as written in the rule expression
            field: Field being validated, attached to the error for context

        Raises:
            UnknownRuleError: If no predicate is registered under the name
        """
        with self._lock:
            predicate = self._custom.get(name)
        if predicate is None:
            predicate = BUILTIN_PREDICATES.get(name)
        if predicate is None:
            location = f" on field '{field}'" if field is not None else ""
            logger.error(f"Rule '{name}'{location} is not registered")
            raise UnknownRuleError(f"Rule '{name}'{location} is not supported", rule=name, field=field)
        return predicate

    def has(self, name: str) -> bool:
        """Check if a rule name resolves to a predicate."""
        with self._lock:
            return name in self._custom or name in BUILTIN_PREDICATES

    def is_builtin(self, name: str) -> bool:
        """Check if a name resolves to a built-in predicate that is not shadowed."""
        with self._lock:
            return name in BUILTIN_PREDICATES and name not in self._custom

    def names(self) -> List[str]:
        """List every resolvable rule name, built-ins first."""
        with self._lock:
            custom = [name for name in self._custom if name not in BUILTIN_PREDICATES]
        return list(BUILTIN_PREDICATES) + custom

    def messages(self) -> Dict[str, str]:
        """Return a copy of the default messages of the custom rules."""
        with self._lock:
            return dict(self._messages)

    def clear(self) -> None:
        """Remove all custom rules."""
        with self._lock:
            self._custom.clear()
            self._messages.clear()

    def __len__(self) -> int:
        return len(self.names())

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __repr__(self) -> str:
        return f"RuleRegistry(builtin={len(BUILTIN_PREDICATES)}, custom={len(self._custom)})"
