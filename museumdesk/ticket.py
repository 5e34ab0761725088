"""Entry tickets linked to an exhibit."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from museumdesk.exhibit import Exhibit


@dataclass
class Ticket:
    """A ticket; two tickets are equal when id, expiry date and VIP flag match."""

    ticket_id: int = 0
    expiry_date: str = ""
    vip: bool = False
    exhibit: Exhibit = field(default_factory=Exhibit, compare=False)

    def describe(self) -> str:
        """Multi-line text showing the ticket and its linked exhibit."""
        return "\n".join(
            [
                f"Ticket ID: {self.ticket_id}",
                f"Expiry Date: {self.expiry_date}",
                f"VIP Access: {'Yes' if self.vip else 'No'}",
                "Linked Exhibit:",
                self.exhibit.describe(),
            ]
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialisable mapping; the exhibit keeps only its common fields."""
        return {
            "ticketId": self.ticket_id,
            "expiryDate": self.expiry_date,
            "isVIP": self.vip,
            "exhibit": Exhibit.to_dict(self.exhibit),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Ticket:
        """Build a ticket from a mapping made by ``to_dict``."""
        ticket_id = data["ticketId"]
        expiry_date = data["expiryDate"]
        vip = data["isVIP"]
        if isinstance(ticket_id, bool) or not isinstance(ticket_id, (int, float)):
            raise TypeError(f"'ticketId' must be a number, not {type(ticket_id).__name__}")
        if not isinstance(expiry_date, str):
            raise TypeError("'expiryDate' must be a string")
        if not isinstance(vip, bool):
            raise TypeError("'isVIP' must be a boolean")
        exhibit = Exhibit.from_dict(data["exhibit"])
        return cls(int(ticket_id), expiry_date, vip, exhibit)


def is_ticket_of_user(ticket: Ticket, user_id: int) -> bool:
    """Whether the ticket's id matches the user id."""
    return ticket.ticket_id == user_id