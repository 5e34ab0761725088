"""Exhibits on show in the museum, plain and specialised."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, not {type(value).__name__}")
    return value


def _number(data: Mapping[str, Any], key: str) -> int | float:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, not {type(value).__name__}")
    return value


def _format_number(value: float) -> str:
    """Render a number the way a default stream would (six significant digits)."""
    return f"{value:g}"


@dataclass
class Exhibit:
    """A museum exhibit with a popularity score and a rating."""

    title: str = ""
    description: str = ""
    popularity: int = 0
    rating: float = 0.0

    def increment_popularity(self) -> None:
        """Raise the popularity score by one."""
        self.popularity += 1

    def popularity_status(self) -> str:
        """Describe the popularity score in words."""
        if self.popularity >= 75:
            return "Highly Popular"
        if self.popularity >= 50:
            return "Moderately Popular"
        if self.popularity >= 25:
            return "Somewhat Popular"
        return "Not Popular"

    def describe(self) -> str:
        """Multi-line text showing every field of the exhibit."""
        return "\n".join(
            [
                f"Title: {self.title}",
                f"Description: {self.description}",
                f"Popularity: {self.popularity}",
                f"Rating: {_format_number(self.rating)}",
            ]
        )

    def __str__(self) -> str:
        return f"{self.title}{self.description}"

    def to_dict(self) -> dict[str, Any]:
        """Serialisable mapping of the exhibit's fields."""
        return {
            "title": self.title,
            "description": self.description,
            "popularity": self.popularity,
            "rating": self.rating,
        }

    @classmethod
    def _common_fields(cls, data: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "title": _text(data, "title"),
            "description": _text(data, "description"),
            "popularity": int(_number(data, "popularity")),
            "rating": float(_number(data, "rating")),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Exhibit:
        """Build an exhibit from a mapping made by ``to_dict``."""
        return cls(**cls._common_fields(data))


@dataclass
class ArtExhibit(Exhibit):
    """An exhibit of artwork by a named artist."""

    artist: str = ""

    def describe(self) -> str:
        return f"{super().describe()}\nArtist: {self.artist}"

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "artist": self.artist}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ArtExhibit:
        return cls(**cls._common_fields(data), artist=_text(data, "artist"))


@dataclass
class HistoryExhibit(Exhibit):
    """An exhibit from a historical era."""

    era: str = ""

    def describe(self) -> str:
        return f"{super().describe()}\nEra: {self.era}"

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "era": self.era}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HistoryExhibit:
        return cls(**cls._common_fields(data), era=_text(data, "era"))


@dataclass
class TechExhibit(Exhibit):
    """An exhibit showcasing a technology."""

    technology: str = ""

    def describe(self) -> str:
        return f"{super().describe()}\nTechnology: {self.technology}"

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "technology": self.technology}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TechExhibit:
        return cls(**cls._common_fields(data), technology=_text(data, "technology"))


def exhibit_from_dict(data: Mapping[str, Any]) -> Exhibit:
    """Build the right kind of exhibit, judged by which extra key is present."""
    if "artist" in data:
        return ArtExhibit.from_dict(data)
    if "era" in data:
        return HistoryExhibit.from_dict(data)
    if "technology" in data:
        return TechExhibit.from_dict(data)
    return Exhibit.from_dict(data)