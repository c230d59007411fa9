"""
Rule Expression Parser

Turns the rule expressions attached to a field into Rule objects. The grammar is:

    field_rules := rule ("|" rule)*
    rule        := name (":" param)*

Parameters are colon-delimited, so ``between:1:10`` yields the parameters
``("1", "10")``. Parsing never fails: a trailing colon produces an empty-string
parameter rather than an error.
"""

from functools import lru_cache
from typing import List, Sequence, Union

from .models import Rule

RULE_SEPARATOR = "|"
PARAM_SEPARATOR = ":"

RuleExpression = Union[str, Sequence[str]]


@lru_cache(maxsize=1024)
def parse_rule(token: str) -> Rule:
    """
    Parse a single rule token into a Rule.

    Args:
        token: One rule token, e.g. ``"max:10"`` or ``"required"``

    Returns:
        Rule: The rule name and its ordered parameters

    Example:
        >>> parse_rule("max:10")
        Rule(name='max', params=('10',))
        >>> parse_rule("max:")
        Rule(name='max', params=('',))
    """
    name, *params = token.split(PARAM_SEPARATOR)
    return Rule(name=name.strip(), params=tuple(params))


def split_rules(expression: str) -> List[str]:
    """
    Split a pipe-delimited rule expression into tokens.

    Empty tokens left by doubled or trailing pipes are dropped.
    """
    return [token for token in expression.split(RULE_SEPARATOR) if token.strip()]


def parse_rules(expression: RuleExpression) -> List[Rule]:
    """
    Parse the rules declared for one field.

    Args:
        expression: Either a pipe-delimited string (``"required|max:10"``) or a
            sequence of individual tokens. The sequence form is not split on
            pipes, which lets a token such as a regex alternation contain ``|``.

    Returns:
        List[Rule]: Rules in declaration order
    """
    if isinstance(expression, str):
        tokens = split_rules(expression)
    else:
        tokens = [token for token in expression if token.strip()]
    return [parse_rule(token) for token in tokens]
