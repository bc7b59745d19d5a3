"""
Idea Validator - Validates an idea before it reaches the core.

The classifier, synthesizer and provider chain assume the idea is a
trimmed string within the length bounds checked here.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ValidationResult:
    """Result of a validation check."""
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    idea: Optional[str] = None  # trimmed idea when valid
    value: Any = None  # raw value as received

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def to_error_list(self, param: str = "idea") -> list[dict]:
        """Errors in the request-validation response shape."""
        return [
            {"msg": message, "param": param, "location": "body", "value": self.value}
            for message in self.errors
        ]


class IdeaValidator:
    """Checks that an idea is text of an acceptable length."""

    MIN_LENGTH = 10
    MAX_LENGTH = 1000

    LENGTH_MESSAGE = f"Idea must be between {MIN_LENGTH} and {MAX_LENGTH} characters"

    def validate(self, value: Any) -> ValidationResult:
        """
        Validate a raw idea value.

        Args:
            value: Whatever the caller supplied for the idea

        Returns:
            ValidationResult carrying the trimmed idea when valid
        """
        result = ValidationResult(is_valid=True, value=value)

        if not isinstance(value, str):
            result.add_error(self.LENGTH_MESSAGE)
            return result

        idea = value.strip()
        result.value = idea

        if not self.MIN_LENGTH <= len(idea) <= self.MAX_LENGTH:
            result.add_error(self.LENGTH_MESSAGE)
            return result

        result.idea = idea
        return result


def validate_idea(value: Any) -> ValidationResult:
    """
    Convenience function to validate an idea.

    Args:
        value: Raw idea value

    Returns:
        ValidationResult with errors or the trimmed idea
    """
    return IdeaValidator().validate(value)
