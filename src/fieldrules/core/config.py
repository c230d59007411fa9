"""
Configuration for the validation engine.
"""

DEFAULT_FALLBACK_MESSAGE = "No data provided to validator"


class ValidatorConfig:
    """
    Configuration for a Validator instance.

    Attributes:
        fallback_message: Message used when a failing rule has no override and
            no built-in default text
        none_is_missing: Whether a ``None`` value counts as "not provided"
            alongside absent fields and empty strings
        strict_rules: Whether every rule name is resolved before the pass, so
            unknown rules raise even on fields that were not provided
    """

    def __init__(
        self,
        fallback_message: str = DEFAULT_FALLBACK_MESSAGE,
        none_is_missing: bool = True,
        strict_rules: bool = False,
    ):
        self.fallback_message = fallback_message
        self.none_is_missing = none_is_missing
        self.strict_rules = strict_rules

    def __repr__(self) -> str:
        return (
            f"ValidatorConfig(fallback_message={self.fallback_message!r}, "
            f"none_is_missing={self.none_is_missing}, strict_rules={self.strict_rules})"
        )
