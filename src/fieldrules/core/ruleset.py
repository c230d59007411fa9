"""
Rule Set Components

A RuleSet holds the parsed rules of every field, keeping the declaration order
of fields and of the rules within each field. That order is the order in which
the engine runs the rules and records failures.
"""

from typing import Dict, Iterator, List, Mapping, Tuple

from .exceptions import ConfigurationError
from .models import Rule
from .parser import RuleExpression, parse_rule, parse_rules


class RuleSet:
    """
    Collection of parsed rules organized by field.

    Attributes:
        rules (Dict[str, List[Rule]]): Field names mapped to their rules
    """

    def __init__(self):
        self.rules: Dict[str, List[Rule]] = {}

    @classmethod
    def from_mapping(cls, rules: Mapping[str, RuleExpression]) -> "RuleSet":
        """
        Build a rule set from field names mapped to rule expressions.

        Args:
            rules: Each value is a pipe-delimited string or a list of tokens

        Raises:
            ConfigurationError: If ``rules`` is not a mapping or a
                field's rules are neither a string nor a list of strings

        Example:
            >>> rule_set = RuleSet.from_mapping({"email": "required|email"})
            >>> [rule.name for rule in rule_set.rules["email"]]
            ['required', 'email']
        """
        if not isinstance(rules, Mapping):
            raise ConfigurationError("Rules to validate are required")

        rule_set = cls()
        for field, expression in rules.items():
            if isinstance(expression, str):
                parsed = parse_rules(expression)
            elif isinstance(expression, (list, tuple)) and all(
                isinstance(token, str) for token in expression
            ):
                parsed = parse_rules(expression)
            else:
                raise ConfigurationError(
                    f"Rules for field '{field}' must be a string or a list of strings", field=field
                )
            rule_set.rules.setdefault(field, []).extend(parsed)
        return rule_set

    def add_rule(self, field: str, token: str) -> None:
        """
        Append a single rule token to a field.

        Multiple rules can be added for the same field; they run in the order
        they were added.
        """
        self.rules.setdefault(field, []).append(parse_rule(token))

    @property
    def fields(self) -> List[str]:
        """Field names in declaration order."""
        return list(self.rules)

    def rule_names(self) -> List[str]:
        """Distinct rule names used across all fields, in first-use order."""
        return list(dict.fromkeys(rule.name for rules in self.rules.values() for rule in rules))

    def items(self) -> Iterator[Tuple[str, List[Rule]]]:
        return iter(self.rules.items())

    def __len__(self) -> int:
        return sum(len(rules) for rules in self.rules.values())

    def __contains__(self, field: str) -> bool:
        return field in self.rules
