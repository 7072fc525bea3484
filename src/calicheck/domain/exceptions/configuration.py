"""Rule registry and configuration exceptions.

Raised at registry setup time; fatal to that setup step.
"""

from calicheck.domain.exceptions.base import CalicheckError


class RuleConfigurationError(CalicheckError):
    """Base class for registry/configuration errors.

    Attributes:
        rule_id: Offending rule identifier (must not be empty)
    """

    def __init__(self, rule_id: str, message: str) -> None:
        # FAIL-FIRST validation
        if not rule_id:
            raise ValueError("rule_id must not be empty")

        self.rule_id = rule_id
        super().__init__(message)


class DuplicateRuleError(RuleConfigurationError):
    """Rule identifier already registered."""

    def __init__(self, rule_id: str) -> None:
        super().__init__(rule_id, f"Rule '{rule_id}' is already registered")


class UnknownRuleError(RuleConfigurationError):
    """Rule identifier not present in the registry.

    Attributes:
        rule_id: Unknown identifier
        known: Registered identifiers, for the message
    """

    def __init__(self, rule_id: str, known: tuple[str, ...] = ()) -> None:
        self.known = known
        message = f"Unknown rule '{rule_id}'"
        if known:
            message += f" (known: {', '.join(known)})"
        super().__init__(rule_id, message)


class UnknownRuleOptionError(RuleConfigurationError):
    """Option key not recognized by the rule (strict configuration only).

    Attributes:
        rule_id: Rule that was configured
        option: Unrecognized option key (must not be empty)
    """

    def __init__(self, rule_id: str, option: str) -> None:
        if not option:
            raise ValueError("option must not be empty")

        self.option = option
        super().__init__(rule_id, f"Rule '{rule_id}' has no option '{option}'")


class InvalidRuleOptionError(RuleConfigurationError):
    """Option value rejected (wrong type, negative threshold, unknown name).

    Attributes:
        rule_id: Rule that was configured
        option: Option key (must not be empty)
        reason: Why the value is invalid (must not be empty)
    """

    def __init__(self, rule_id: str, option: str, reason: str) -> None:
        if not option:
            raise ValueError("option must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.option = option
        self.reason = reason
        super().__init__(rule_id, f"Invalid value for '{rule_id}.{option}': {reason}")
