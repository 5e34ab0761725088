"""Museum visitors with their tickets, memberships and reviews."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from museumdesk.membership import Membership
from museumdesk.review import Review
from museumdesk.ticket import Ticket


def _format_number(value: float) -> str:
    return f"{value:g}"


def _list_of(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data[key]
    if not isinstance(value, list):
        raise TypeError(f"{key!r} must be a list, not {type(value).__name__}")
    return value


@dataclass
class User:
    """A visitor holding tickets, memberships and reviews."""

    name: str = ""
    tickets: list[Ticket] = field(default_factory=list)
    memberships: list[Membership] = field(default_factory=list)
    reviews: list[Review] = field(default_factory=list)

    def add_ticket(self, ticket: Ticket) -> None:
        """Give the user another ticket."""
        self.tickets.append(ticket)

    def ticket(self, index: int) -> Ticket:
        """The ticket at a zero-based index; IndexError when there is none."""
        if not 0 <= index < len(self.tickets):
            raise IndexError(f"Invalid Index: {index}")
        return self.tickets[index]

    def add_membership(self, membership: Membership) -> None:
        """Give the user another membership."""
        self.memberships.append(membership)

    def membership(self, index: int) -> Membership:
        """The membership at a zero-based index; IndexError when there is none."""
        if not 0 <= index < len(self.memberships):
            raise IndexError(f"Invalid Index: {index}")
        return self.memberships[index]

    def add_review(self, review: Review) -> None:
        """Record a review written by the user."""
        self.reviews.append(review)

    def has_vip_pass(self) -> bool:
        """True when any of the user's tickets grants VIP access."""
        return any(ticket.vip for ticket in self.tickets)

    def tickets_report(self) -> str:
        """Count of tickets followed by each ticket's details."""
        parts = [f"Total Tickets: {len(self.tickets)}"]
        for number, ticket in enumerate(self.tickets, start=1):
            parts.append(f"\nTicket #{number} Info:")
            parts.append(ticket.describe())
        return "\n".join(parts)

    def memberships_report(self) -> str:
        """Count of memberships followed by each membership's details."""
        parts = [f"Total Memberships: {len(self.memberships)}"]
        for number, membership in enumerate(self.memberships, start=1):
            parts.append(f"\nMembership #{number}:")
            parts.append(f"Membership ID: {membership.membership_id}")
            parts.append(f"Type: {membership.kind}")
            parts.append(f"Discount: {_format_number(membership.discount)}%")
        return "\n".join(parts)

    def reviews_report(self) -> str:
        """Count of reviews followed by each review's details."""
        parts = [f"Total Reviews: {len(self.reviews)}"]
        for number, review in enumerate(self.reviews, start=1):
            parts.append(f"\nReview #{number}:")
            parts.append(f"Reviewer: {review.reviewer}")
            parts.append(f"Comment: {review.comment}")
            parts.append(f"Rating: {_format_number(review.rating)}")
        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialisable mapping of the user and everything they hold."""
        return {
            "userName": self.name,
            "tickets": [ticket.to_dict() for ticket in self.tickets],
            "memberships": [membership.to_dict() for membership in self.memberships],
            "reviews": [review.to_dict() for review in self.reviews],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> User:
        """Build a user from a mapping made by ``to_dict``."""
        name = data["userName"]
        if not isinstance(name, str):
            raise TypeError(f"'userName' must be a string, not {type(name).__name__}")
        return cls(
            name,
            [Ticket.from_dict(item) for item in _list_of(data, "tickets")],
            [Membership.from_dict(item) for item in _list_of(data, "memberships")],
            [Review.from_dict(item) for item in _list_of(data, "reviews")],
        )

    def save(self, path: str | Path) -> None:
        """Write the user to a JSON file indented by four spaces."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=4), encoding="utf-8")

    @classmethod
    def load(cls, path: str | Path) -> User:
        """Read a user from a JSON file written by ``save``."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_dict(json.load(handle))


def load_user(name: str, directory: str | Path = ".") -> User:
    """Load ``<name>.json`` from a directory.

    Raises FileNotFoundError when the file is missing and ValueError when the
    name is empty or the file is empty or malformed. A stored user without a
    name takes the name that was asked for.
    """
    if not name:
        raise ValueError("Username cannot be empty")
    path = Path(directory) / f"{name}.json"
    text = path.read_text(encoding="utf-8")
    if not text:
        raise ValueError(f"{path.name} is empty")
    try:
        user = User.from_dict(json.loads(text))
    except (KeyError, TypeError, ValueError) as error:
        raise ValueError(f"Error reading {path.name}: {error}") from error
    if not user.name:
        user.name = name
    return user