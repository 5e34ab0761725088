"""Visitor reviews."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_CAPACITY = 10


@dataclass
class Review:
    """A visitor's comment and rating."""

    reviewer: str = ""
    comment: str = ""
    rating: float = 0.0
    capacity: int = DEFAULT_CAPACITY

    def to_dict(self) -> dict[str, Any]:
        """Serialisable mapping of the review's fields."""
        return {
            "userName": self.reviewer,
            "comment": self.comment,
            "rating": self.rating,
            "reviewCapacity": self.capacity,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Review:
        """Build a review; a missing or non-positive capacity becomes the default."""
        reviewer = data["userName"]
        comment = data["comment"]
        rating = data["rating"]
        if not isinstance(reviewer, str) or not isinstance(comment, str):
            raise TypeError("userName and comment must be strings")
        if isinstance(rating, bool) or not isinstance(rating, (int, float)):
            raise TypeError(f"'rating' must be a number, not {type(rating).__name__}")
        capacity = data.get("reviewCapacity", DEFAULT_CAPACITY)
        if isinstance(capacity, bool) or not isinstance(capacity, (int, float)):
            raise TypeError("'reviewCapacity' must be a number")
        capacity = int(capacity)
        if capacity <= 0:
            capacity = DEFAULT_CAPACITY
        return cls(reviewer, comment, float(rating), capacity)