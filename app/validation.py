"""
Sign-up field validation.

Each validator classifies a raw field value; an invalid value is a normal
outcome, never an exception.
"""

import re
from enum import Enum
from typing import Optional

import regex


class ValidationResult(str, Enum):
    VALID = "valid"
    MISSING = "missing"
    INVALID = "invalid"
    TOO_SHORT = "too_short"


EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]+")
MIN_PASSWORD_LENGTH = 6

ALERT_TITLE = "Error"
ALERT_MESSAGE = "Please enter valid information"

_EMAIL_MESSAGES = {
    ValidationResult.MISSING: "Email is required",
    ValidationResult.INVALID: "Invalid email",
}
_PASSWORD_MESSAGES = {
    ValidationResult.TOO_SHORT: f"Password must be at least {MIN_PASSWORD_LENGTH} digits",
}


def validate_email(value: str) -> ValidationResult:
    if not value:
        return ValidationResult.MISSING
    if not EMAIL_PATTERN.fullmatch(value):
        return ValidationResult.INVALID
    return ValidationResult.VALID


def _length(value: str) -> int:
    # user-perceived characters (extended grapheme clusters)
    return len(regex.findall(r"\X", value))


def validate_password(value: str) -> ValidationResult:
    if _length(value) < MIN_PASSWORD_LENGTH:
        return ValidationResult.TOO_SHORT
    return ValidationResult.VALID


def can_submit(email_result: ValidationResult, password_result: ValidationResult) -> bool:
    return email_result is ValidationResult.VALID and password_result is ValidationResult.VALID


def email_error(result: Optional[ValidationResult]) -> Optional[str]:
    return _EMAIL_MESSAGES.get(result)


def password_error(result: Optional[ValidationResult]) -> Optional[str]:
    return _PASSWORD_MESSAGES.get(result)
