"""Visitor memberships and the discounts they carry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

_DISCOUNTS = {"vip": 30.0, "local": 10.0}


def discount_for(kind: str) -> float:
    """Percentage discount for a membership type; unknown types get none."""
    return _DISCOUNTS.get(kind, 0.0)


@dataclass
class Membership:
    """A membership with an identifier, a type and a percentage discount."""

    membership_id: int = 0
    kind: str = ""
    discount: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Serialisable mapping of the membership's fields."""
        return {
            "memberShipId": self.membership_id,
            "type": self.kind,
            "discount": self.discount,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Membership:
        """Build a membership from a mapping made by ``to_dict``."""
        membership_id = data["memberShipId"]
        kind = data["type"]
        discount = data["discount"]
        for key, value in (("memberShipId", membership_id), ("discount", discount)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{key!r} must be a number, not {type(value).__name__}")
        if not isinstance(kind, str):
            raise TypeError(f"'type' must be a string, not {type(kind).__name__}")
        return cls(int(membership_id), kind, float(discount))