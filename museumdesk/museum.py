"""The museum: its name, schedule, exhibits and guides."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from museumdesk.exhibit import Exhibit, exhibit_from_dict
from museumdesk.guide import Guide
from museumdesk.schedule import HolidayLimitError, Schedule

DEFAULT_NAME = "National Museum"
UNNAMED = "Unknown Museum"


def _list_of(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data[key]
    if not isinstance(value, list):
        raise TypeError(f"{key!r} must be a list, not {type(value).__name__}")
    return value


@dataclass
class Museum:
    """A museum holding exhibits and guides, with an optional opening schedule."""

    name: str = ""
    schedule: Schedule | None = None
    exhibits: list[Exhibit] = field(default_factory=list)
    guides: list[Guide] = field(default_factory=list)

    def add_exhibit(self, exhibit: Exhibit) -> None:
        """Put another exhibit on show."""
        self.exhibits.append(exhibit)

    def exhibit(self, index: int) -> Exhibit:
        """The exhibit at a zero-based index; IndexError when there is none."""
        if not 0 <= index < len(self.exhibits):
            raise IndexError(f"Invalid Index: {index}")
        return self.exhibits[index]

    def add_guide(self, guide: Guide) -> None:
        """Take on another guide."""
        self.guides.append(guide)

    def guide(self, index: int) -> Guide:
        """The guide at a zero-based index; IndexError when there is none."""
        if not 0 <= index < len(self.guides):
            raise IndexError(f"Invalid Index: {index}")
        return self.guides[index]

    def is_open_today(self, day: str) -> bool:
        """Whether the museum opens on the given day; closed when no schedule is set."""
        return self.schedule.is_open_on(day) if self.schedule is not None else False

    def to_dict(self) -> dict[str, Any]:
        """Serialisable mapping of the museum and everything it holds."""
        return {
            "museumName": self.name or UNNAMED,
            "schedule": self.schedule.to_dict() if self.schedule is not None else {},
            "exhibits": [exhibit.to_dict() for exhibit in self.exhibits],
            "guides": [guide.to_dict() for guide in self.guides],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Museum:
        """Build a museum from a mapping made by ``to_dict``.

        A missing, null or empty schedule gives a default schedule.
        """
        name = data["museumName"]
        if not isinstance(name, str):
            raise TypeError(f"'museumName' must be a string, not {type(name).__name__}")
        schedule_data = data.get("schedule")
        schedule = Schedule.from_dict(schedule_data) if schedule_data else Schedule()
        return cls(
            name,
            schedule,
            [exhibit_from_dict(item) for item in _list_of(data, "exhibits")],
            [Guide.from_dict(item) for item in _list_of(data, "guides")],
        )

    def save(self, path: str | Path) -> None:
        """Write the museum to a JSON file indented by four spaces."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=4), encoding="utf-8")

    @classmethod
    def load(cls, path: str | Path) -> Museum:
        """Read a museum from a JSON file written by ``save``.

        Raises FileNotFoundError when the file is missing and ValueError when
        it is empty or malformed.
        """
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        if not text:
            raise ValueError(f"{path.name} is empty")
        try:
            return cls.from_dict(json.loads(text))
        except (KeyError, TypeError, ValueError, HolidayLimitError) as error:
            raise ValueError(f"Error reading {path.name}: {error}") from error