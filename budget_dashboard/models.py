"""Record types exchanged with the Gateway and derived by the aggregator.

The Gateway speaks camelCase JSON; these dataclasses hold the snake_case
Python view of the same records.  Amounts are ``Decimal`` so that category
sums and spent/remaining figures add up exactly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from . import config

ZERO = Decimal("0")


def to_amount(value: Any) -> Decimal:
    """Convert a JSON number or numeric string into a currency ``Decimal``.

    Floats go through ``str`` first so ``5.1`` becomes ``Decimal('5.1')``
    rather than its binary expansion.

    Raises:
        ValueError: If the value is missing, non-numeric, NaN or infinite.
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"Not an amount: {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Not a finite amount: {value!r}")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Not an amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Not a finite amount: {value!r}")
    return amount


@dataclass(frozen=True)
class Expense:
    id: Any
    name: str
    category: str
    amount: Decimal

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Expense":
        """Build an expense from a Gateway record.

        Raises:
            ValueError: If the record lacks an id or carries a negative or
                non-numeric amount.
        """
        if payload.get("id") is None:
            raise ValueError("Expense record has no id")
        amount = to_amount(payload.get("amount"))
        if amount < ZERO:
            raise ValueError(f"Expense {payload['id']!r} has a negative amount")
        return cls(
            id=payload["id"],
            name=str(payload.get("name") or ""),
            category=str(payload.get("category") or ""),
            amount=amount,
        )


@dataclass(frozen=True)
class CategoryTotal:
    label: str
    total: Decimal


@dataclass(frozen=True)
class BudgetSummary:
    """Spent and remaining figures for one budget.

    ``remaining`` is reported as computed and goes negative on overspend.
    ``chart_remaining`` is the same value floored at zero for bar charts.
    """

    spent: Decimal
    remaining: Decimal
    budget: Decimal

    @property
    def chart_remaining(self) -> Decimal:
        return self.remaining if self.remaining > ZERO else ZERO

    @property
    def is_overspent(self) -> bool:
        return self.remaining < ZERO


@dataclass(frozen=True)
class SortSpec:
    field: str
    direction: str = "asc"

    @property
    def descending(self) -> bool:
        return self.direction == "desc"


@dataclass(frozen=True)
class Profile:
    username: str = "User"
    full_name: str = ""
    email: str = ""
    village: str = ""
    phone_number: str = ""
    profile_photo_url: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Profile":
        return cls(
            username=payload.get("username") or "User",
            full_name=payload.get("fullName") or "",
            email=payload.get("email") or "",
            village=payload.get("village") or "",
            phone_number=payload.get("phoneNumber") or "",
            profile_photo_url=payload.get("profilePhotoUrl") or None,
        )

    @property
    def display_name(self) -> str:
        return self.full_name or self.username

    def photo_or_default(self) -> str:
        return self.profile_photo_url or str(config.DEFAULT_AVATAR_PATH)

    def with_photo(self, url: Optional[str]) -> "Profile":
        return replace(self, profile_photo_url=url)


@dataclass(frozen=True)
class ProfileUpdate:
    full_name: str
    email: str
    village: str
    phone_number: str = ""

    def to_payload(self) -> Dict[str, str]:
        return {
            "fullName": self.full_name,
            "email": self.email,
            "village": self.village,
            "phoneNumber": self.phone_number,
        }


@dataclass(frozen=True)
class RegistrationData:
    username: str
    password: str
    full_name: str
    email: str
    village: str
    phone_number: str = ""

    def to_payload(self) -> Dict[str, str]:
        return {
            "username": self.username,
            "password": self.password,
            "fullName": self.full_name,
            "email": self.email,
            "village": self.village,
            "phoneNumber": self.phone_number,
        }


@dataclass(frozen=True)
class PhotoUploadResult:
    file_url: str
    message: str = "Photo updated successfully!"
