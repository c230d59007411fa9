"""
Message Resolution

Determines the failure message for a rule that did not pass. Lookup order:

1. override keyed ``"{rule}.{field}"``
2. override keyed ``"{rule}"``
3. built-in default text, with ``params[0]`` interpolated for ``max`` and ``min``
4. the fallback message
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence

from .config import DEFAULT_FALLBACK_MESSAGE

DEFAULT_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "required": "Field is required",
        "email": "Invalid Email provided",
        "max": "More than {0} characters are not allowed",
        "min": "Less than {0} characters are not allowed",
        "json": "Invalid Json provided",
        "url": "Invalid URL provided",
        "date": "Invalid Date provided",
        "integer": "Data provided is not type [integer]",
        "regex": "Data provided do not match regular expression",
    }
)


def default_message(rule: str, params: Sequence[str] = ()) -> Optional[str]:
    """Return the built-in text for a rule, or None if the rule has none."""
    template = DEFAULT_MESSAGES.get(rule)
    if template is None:
        return None
    if "{0}" in template:
        return template.format(params[0] if params else "")
    return template


class MessageResolver:
    """
    Resolves failure messages from a layered override map.

    Attributes:
        overrides (Dict[str, str]): Messages keyed by rule name or ``rule.field``
        fallback_message (str): Message used when nothing else applies
    """

    def __init__(
        self,
        overrides: Optional[Mapping[str, str]] = None,
        fallback_message: str = DEFAULT_FALLBACK_MESSAGE,
    ):
        self.overrides: Dict[str, str] = dict(overrides or {})
        self.fallback_message = fallback_message

    @classmethod
    def layered(cls, *layers: Optional[Mapping[str, str]], fallback_message: str = DEFAULT_FALLBACK_MESSAGE):
        """Build a resolver from override maps, later layers winning key by key."""
        overrides: Dict[str, str] = {}
        for layer in layers:
            if layer:
                overrides.update(layer)
        return cls(overrides, fallback_message=fallback_message)

    def resolve(self, field: str, rule: str, params: Sequence[str] = ()) -> str:
        """
        Resolve the message for a failed rule on a field.

        Args:
            field: Name of the field that failed
            rule: Name of the rule that failed
            params: Parameters the rule was declared with

        Returns:
            str: The failure message
        """
        # Empty overrides count as unset.
        return (
            self.overrides.get(f"{rule}.{field}")
            or self.overrides.get(rule)
            or default_message(rule, params)
            or self.fallback_message
        )
