"""Tour guides who lead visitors around exhibits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from museumdesk.exhibit import Exhibit


@dataclass
class Guide:
    """A guide who gives tours in one language."""

    name: str = ""
    language: str = ""

    def start_tour(self, exhibit: Exhibit) -> str:
        """Announcement text for a tour of the given exhibit."""
        return (
            f"Guide {self.name} is starting a tour in {self.language} "
            f"for exhibit: {exhibit.title}\n"
            f"Exhibit Description: {exhibit.description}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialisable mapping of the guide's fields."""
        return {"guideName": self.name, "language": self.language}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Guide:
        """Build a guide from a mapping made by ``to_dict``."""
        name = data["guideName"]
        language = data["language"]
        if not isinstance(name, str) or not isinstance(language, str):
            raise TypeError("guideName and language must be strings")
        return cls(name, language)