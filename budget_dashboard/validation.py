"""Form validation for budget, expense, account and profile input.

Each validator takes raw form values (strings as typed) and either returns
clean values or raises :class:`~budget_dashboard.errors.ValidationError`
with the message to show next to the form.  Nothing invalid reaches the
Gateway or the view state.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any, Optional, Tuple

from .errors import ValidationError
from .models import ZERO, ProfileUpdate, RegistrationData, to_amount

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
MIN_PASSWORD_LENGTH = 6


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def _parse_amount(raw: Any) -> Optional[Decimal]:
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        parsed = to_amount(raw)
    except ValueError:
        return None
    # The service takes JSON numbers, so the amount must fit in a float.
    if not math.isfinite(float(parsed)):
        return None
    return parsed


def validate_expense(name: Optional[str], amount: Any, category: Optional[str]) -> Tuple[str, Decimal, str]:
    """Validate the add-expense form.

    Returns:
        ``(name, amount, category)`` with surrounding whitespace removed.

    Raises:
        ValidationError: If name or category is blank, or the amount is not
            a positive number.
    """
    clean_name = _clean(name)
    clean_category = _clean(category)
    parsed = _parse_amount(amount)
    if not clean_name or not clean_category or parsed is None or parsed <= ZERO:
        raise ValidationError("Please enter a valid name, category, and positive amount.")
    return clean_name, parsed, clean_category


def validate_budget(amount: Any) -> Decimal:
    """Validate the set-budget form; zero is allowed, negatives are not."""
    parsed = _parse_amount(amount)
    if parsed is None or parsed < ZERO:
        raise ValidationError("Please enter a valid, positive budget amount.")
    return parsed


def validate_email(email: str) -> str:
    clean_email = _clean(email)
    if not EMAIL_PATTERN.search(clean_email):
        raise ValidationError("Please enter a valid email address.")
    return clean_email


def validate_login(username: Optional[str], password: Optional[str]) -> Tuple[str, str]:
    clean_username = _clean(username)
    if not clean_username or not password:
        raise ValidationError("Please enter your username and password.")
    return clean_username, password


def validate_registration(
    *,
    username: Optional[str],
    password: Optional[str],
    confirm_password: Optional[str],
    full_name: Optional[str],
    email: Optional[str],
    village: Optional[str],
    phone_number: Optional[str] = "",
) -> RegistrationData:
    """Validate the sign-up form.

    Checks run in the order the form reports them: password confirmation,
    password length, email shape, then required fields.
    """
    password = password or ""
    if password != (confirm_password or ""):
        raise ValidationError("Passwords do not match.")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
    clean_email = validate_email(email or "")
    clean_username = _clean(username)
    clean_full_name = _clean(full_name)
    clean_village = _clean(village)
    if not clean_username or not clean_full_name or not clean_village:
        raise ValidationError("Please fill in all required fields (*).")
    return RegistrationData(
        username=clean_username,
        password=password,
        full_name=clean_full_name,
        email=clean_email,
        village=clean_village,
        phone_number=_clean(phone_number),
    )


def validate_password_change(
    current_password: Optional[str],
    new_password: Optional[str],
    confirmation_password: Optional[str],
) -> Tuple[str, str, str]:
    if not current_password or not new_password or not confirmation_password:
        raise ValidationError("Please fill in all password fields.")
    if new_password != confirmation_password:
        raise ValidationError("New passwords do not match.")
    return current_password, new_password, confirmation_password


def validate_profile_update(
    *,
    full_name: Optional[str],
    email: Optional[str],
    village: Optional[str],
    phone_number: Optional[str] = "",
) -> ProfileUpdate:
    clean_full_name = _clean(full_name)
    clean_village = _clean(village)
    if not clean_full_name or not _clean(email) or not clean_village:
        raise ValidationError("Please fill in all required fields (*).")
    return ProfileUpdate(
        full_name=clean_full_name,
        email=validate_email(email or ""),
        village=clean_village,
        phone_number=_clean(phone_number),
    )


def validate_photo(content: Optional[bytes], content_type: Optional[str]) -> None:
    """Accept only non-empty image uploads."""
    if not content_type or not content_type.startswith("image/"):
        raise ValidationError("Please select a valid image file (JPEG, PNG, GIF).")
    if not content:
        raise ValidationError("Please select a file to upload.")
