"""ShortGuid validator."""

from dataclasses import dataclass
from uuid import UUID

from shortguid.codec import ENCODED_LENGTH, decode, encode
from shortguid.exceptions import InvalidEncodingError, TamperedEncodingError


@dataclass
class ValidationResult:
    """ShortGuid validation result."""

    valid: bool
    error: str | None = None
    warnings: list[str] | None = None
    value: UUID | None = None

    def __post_init__(self) -> None:
        """Initialize warnings list."""
        if self.warnings is None:
            self.warnings = []


class ShortGuidValidator:
    """Checks candidate strings without raising."""

    def __init__(self, *, strict: bool):
        """Initialize validator.

        Args:
            strict: Reject encodings that are not canonical
        """
        self.strict = strict

    def validate(self, text: str) -> ValidationResult:
        """Validate a ShortGuid string.

        Args:
            text: ShortGuid string to validate

        Returns:
            Validation result
        """
        if len(text) != ENCODED_LENGTH:
            error = f"Invalid ShortGuid length: expected {ENCODED_LENGTH}, got {len(text)}"
            hint = self._uuid_hint(text)
            if hint:
                error = f"{error}. {hint}"
            return ValidationResult(valid=False, error=error)

        try:
            value = decode(text, strict=self.strict)
        except (InvalidEncodingError, TamperedEncodingError) as e:
            return ValidationResult(valid=False, error=str(e))

        result = ValidationResult(valid=True, value=value)

        canonical = encode(value)
        if canonical != text:
            result.warnings.append(
                f"'{text}' is not the canonical encoding of {value}; "
                f"it encodes as '{canonical}'"
            )

        return result

    @staticmethod
    def _uuid_hint(text: str) -> str | None:
        try:
            value = UUID(text)
        except ValueError:
            return None
        return f"'{text}' is a UUID; its ShortGuid is '{encode(value)}'"
