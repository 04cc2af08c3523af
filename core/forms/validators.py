# =============================================================================
# core/forms/validators.py - Shared Field Rules
# =============================================================================
# Every form validates into a flat error map: field name (camelCase, as the
# console names its inputs) -> message. An empty map means the form may be
# submitted.
#
# The check_* helpers record at most one message per field and return
# whether the field passed, so callers can chain dependent rules.
# =============================================================================

import re
from typing import Any

# Permissive shapes; the store is the real authority
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[\+]?[1-9][\d]{0,15}$")
PHONE_SEPARATORS = re.compile(r"[\s\-\(\)]")
PASSWORD_MIX_PATTERN = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")

FieldErrors = dict[str, str]


# =============================================================================
# Shape Checks
# =============================================================================

def is_blank(value: Any) -> bool:
    """Empty string, whitespace only, None or empty collection."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return not value
    return False


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))


def is_valid_phone(value: str) -> bool:
    """Phone check after stripping spaces, dashes and parentheses."""
    return bool(PHONE_PATTERN.match(PHONE_SEPARATORS.sub("", value)))


# =============================================================================
# Error-Map Helpers
# =============================================================================

def check_required(errors: FieldErrors, field: str, value: Any, message: str) -> bool:
    if is_blank(value):
        errors.setdefault(field, message)
        return False
    return True


def check_min_length(
    errors: FieldErrors,
    field: str,
    value: str,
    length: int,
    required_message: str,
    short_message: str,
) -> bool:
    if not check_required(errors, field, value, required_message):
        return False
    if len(value.strip()) < length:
        errors.setdefault(field, short_message)
        return False
    return True


def check_email(
    errors: FieldErrors,
    field: str,
    value: str,
    required: bool = True,
    required_message: str = "Email is required",
    invalid_message: str = "Please enter a valid email address",
) -> bool:
    if is_blank(value):
        if required:
            errors.setdefault(field, required_message)
            return False
        return True
    if not is_valid_email(value):
        errors.setdefault(field, invalid_message)
        return False
    return True


def check_phone(
    errors: FieldErrors,
    field: str,
    value: str,
    required: bool = True,
    required_message: str = "Phone number is required",
    invalid_message: str = "Please enter a valid phone number",
) -> bool:
    if is_blank(value):
        if required:
            errors.setdefault(field, required_message)
            return False
        return True
    if not is_valid_phone(value):
        errors.setdefault(field, invalid_message)
        return False
    return True


def check_range(
    errors: FieldErrors,
    field: str,
    value: float,
    message: str,
    minimum: float | None = None,
    maximum: float | None = None,
    exclusive_minimum: bool = False,
) -> bool:
    """
    Numeric bound check.

    Example:
        check_range(errors, "rating", 6, "Rating must be between 0 and 5", 0, 5)
        check_range(errors, "memberCount", 0, "Capacity must be greater than 0",
                    minimum=0, exclusive_minimum=True)
    """
    too_low = minimum is not None and (
        value <= minimum if exclusive_minimum else value < minimum
    )
    too_high = maximum is not None and value > maximum
    if too_low or too_high:
        errors.setdefault(field, message)
        return False
    return True


def check_password(errors: FieldErrors, password: str, confirmation: str) -> bool:
    """New-account password rules: length, character mix, matching confirmation."""
    ok = True
    if not password:
        errors.setdefault("password", "Password is required")
        ok = False
    elif len(password) < 8:
        errors.setdefault("password", "Password must be at least 8 characters")
        ok = False
    elif not PASSWORD_MIX_PATTERN.match(password):
        errors.setdefault("password", "Password must contain uppercase, lowercase, and number")
        ok = False

    if not confirmation:
        errors.setdefault("confirmPassword", "Please confirm your password")
        ok = False
    elif password != confirmation:
        errors.setdefault("confirmPassword", "Passwords do not match")
        ok = False
    return ok
