"""Opening days, opening hours and holidays of the museum."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
HOLIDAY_CAPACITY = 10


class HolidayLimitError(Exception):
    """Raised when more holidays are added than a schedule can hold."""


def _seven_days(days: Iterable[Any]) -> list[bool]:
    values = list(days)
    if len(values) != len(DAY_NAMES):
        raise ValueError(f"expected {len(DAY_NAMES)} days, got {len(values)}")
    return [bool(day) for day in values]


@dataclass
class Schedule:
    """Weekly opening days (Sunday first), opening hours and holidays."""

    open_days: list[bool] = field(default_factory=lambda: [False] * len(DAY_NAMES))
    opening_time: str = ""
    closing_time: str = ""
    holidays: list[str] = field(default_factory=list)

    def set_timings(self, opening: str, closing: str) -> None:
        """Set the opening and closing times."""
        self.opening_time = opening
        self.closing_time = closing

    def timings_text(self) -> str:
        """The opening and closing times as two lines."""
        return f"Opening Time: {self.opening_time}\nClosing Time: {self.closing_time}"

    def set_open_days(self, days: Iterable[Any]) -> None:
        """Set which days are open from seven flags, Sunday first."""
        self.open_days = _seven_days(days)

    def open_days_text(self) -> str:
        """The names of the open days on one line."""
        names = "".join(
            f"{name} " for name, is_open in zip(DAY_NAMES, self.open_days) if is_open
        )
        return f"Open Days: {names}"

    def add_holiday(self, holiday: str) -> None:
        """Record a holiday, raising HolidayLimitError once the list is full."""
        if len(self.holidays) >= HOLIDAY_CAPACITY:
            raise HolidayLimitError("Holiday limit reached!")
        self.holidays.append(holiday)

    def is_open_on(self, date: str) -> bool:
        """Whether the museum opens on a weekday name; holidays and unknown names are closed."""
        if date in self.holidays:
            return False
        if date in DAY_NAMES:
            return self.open_days[DAY_NAMES.index(date)]
        return False

    def copy(self) -> Schedule:
        """An independent copy of this schedule."""
        return Schedule(
            list(self.open_days),
            self.opening_time,
            self.closing_time,
            list(self.holidays),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialisable mapping of the schedule."""
        return {
            "openingTime": self.opening_time,
            "closingTime": self.closing_time,
            "openDays": list(self.open_days),
            "holidays": list(self.holidays),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Schedule:
        """Build a schedule from a mapping made by ``to_dict``."""
        opening = data["openingTime"]
        closing = data["closingTime"]
        if not isinstance(opening, str) or not isinstance(closing, str):
            raise TypeError("openingTime and closingTime must be strings")
        days = data["openDays"]
        if not all(isinstance(day, bool) for day in days):
            raise TypeError("openDays must hold booleans")
        holidays = data["holidays"]
        if not all(isinstance(day, str) for day in holidays):
            raise TypeError("holidays must hold strings")
        if len(holidays) > HOLIDAY_CAPACITY:
            raise HolidayLimitError(
                f"at most {HOLIDAY_CAPACITY} holidays, got {len(holidays)}"
            )
        return cls(_seven_days(days), opening, closing, list(holidays))