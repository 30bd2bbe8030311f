"""Domain value objects for the back office.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Value object for an employee email address.

    Validated with email-validator, the same library behind pydantic's
    EmailStr on the login form, so every stored address can also log in.
    Stored normalized (surrounding whitespace stripped, lowercased) so the
    same address always compares and hashes equal.
    """

    value: str

    def __post_init__(self) -> None:
        """Normalize and validate.

        Raises:
            ValueError: If empty or not a valid email address.
        """
        raw = (self.value or "").strip()
        if not raw:
            raise ValueError("Email must be a non-empty string")
        try:
            normalized = validate_email(raw, check_deliverability=False).normalized
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email address {raw!r}: {e}") from None
        object.__setattr__(self, "value", normalized.lower())

    def __str__(self) -> str:
        return self.value
