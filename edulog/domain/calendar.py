"""Domain models for scheduled lessons."""
from datetime import time
from enum import Enum
import re
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, field_validator, model_validator

from edulog.domain.base import ValueObject
from edulog.utils.text import is_blank

_HHMM_PATTERN = re.compile(r"([01][0-9]|2[0-3])[0-5][0-9]")
MINUTES_PER_DAY = 24 * 60


class DayOfWeek(Enum):
    """Days of the week, numbered Monday=1 to Sunday=7 (ISO 8601)."""
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def lookup(cls, text: str) -> Optional["DayOfWeek"]:
        """Find the day spelt fully or as its 3-letter shorthand, ignoring case.

        Examples:
            >>> DayOfWeek.lookup("fri")
            <DayOfWeek.FRIDAY: 5>
            >>> DayOfWeek.lookup("Fridays") is None
            True
        """
        key = text.upper()
        for day in cls:
            if key == day.name or key == day.name[:3]:
                return day
        return None

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


class Day(ValueObject):
    """The weekday a lesson recurs on."""
    INVALID_DAY_OF_WEEK: ClassVar[str] = (
        "Day of week should be spelt fully or as its 3-letter shorthand, e.g. Monday or mon"
    )
    MESSAGE_CONSTRAINTS: ClassVar[str] = INVALID_DAY_OF_WEEK

    value: DayOfWeek

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return DayOfWeek.lookup(value) is not None

    @classmethod
    def accepts(cls, value: Any) -> bool:
        return isinstance(value, DayOfWeek)

    @field_validator("value", mode="before")
    @classmethod
    def resolve_day(cls, value: Any) -> Any:
        if isinstance(value, str):
            day = DayOfWeek.lookup(value)
            if day is None:
                raise ValueError(cls.INVALID_DAY_OF_WEEK)
            return day
        return value

    @property
    def day_of_week(self) -> DayOfWeek:
        return self.value

    def __str__(self) -> str:
        return self.value.display_name


class Description(ValueObject):
    """Free-text description of a lesson, 1 to 100 characters."""
    MAX_LENGTH: ClassVar[int] = 100
    DESCRIPTION_EMPTY: ClassVar[str] = "Lesson description cannot be empty."
    DESCRIPTION_TOO_LONG: ClassVar[str] = (
        "Lesson description cannot be longer than 100 characters."
    )
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Lesson description should be 1 to 100 characters long."

    value: str

    @classmethod
    def check_empty(cls, value: str) -> bool:
        return is_blank(value)

    @classmethod
    def check_too_long(cls, value: str) -> bool:
        return len(value) > cls.MAX_LENGTH

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return not cls.check_empty(value) and not cls.check_too_long(value)

    @classmethod
    def constraint_message(cls, value: Any) -> str:
        if cls.check_empty(value):
            return cls.DESCRIPTION_EMPTY
        if cls.check_too_long(value):
            return cls.DESCRIPTION_TOO_LONG
        return cls.MESSAGE_CONSTRAINTS


def _to_time(hhmm: str) -> time:
    return time(hour=int(hhmm[:2]), minute=int(hhmm[2:]))


class LessonTime(BaseModel):
    """Start and end of a lesson as 24-hour ``HHMM`` strings.

    The two times must differ. An end earlier than the start is read as a
    lesson running past midnight.

    Attributes:
        start: Start time, e.g. "1400"
        end: End time, e.g. "1530"
    """
    NOT_24H_FORMAT: ClassVar[str] = (
        "Lesson times should be in 24-hour format without spaces, e.g. 1200 or 2359."
    )
    NO_SAME_TIME: ClassVar[str] = "A lesson's start and end times cannot be the same."

    start: str
    end: str

    class Config:
        frozen = True

    def __init__(self, start: str, end: str):
        super().__init__(start=start, end=end)

    @classmethod
    def is_valid_time(cls, value: str) -> bool:
        """True if ``value`` is a 24-hour time such as "0930" or "2359"."""
        return bool(_HHMM_PATTERN.fullmatch(value))

    @classmethod
    def is_valid_pair(cls, start: str, end: str) -> bool:
        """True if two individually valid times can bound a lesson."""
        return start != end

    @field_validator("start", "end")
    @classmethod
    def check_format(cls, value: str) -> str:
        if not cls.is_valid_time(value):
            raise ValueError(cls.NOT_24H_FORMAT)
        return value

    @model_validator(mode="after")
    def check_pair(self) -> "LessonTime":
        if not self.is_valid_pair(self.start, self.end):
            raise ValueError(self.NO_SAME_TIME)
        return self

    @property
    def start_time(self) -> time:
        return _to_time(self.start)

    @property
    def end_time(self) -> time:
        return _to_time(self.end)

    @property
    def crosses_midnight(self) -> bool:
        return self.end < self.start

    @property
    def duration_minutes(self) -> int:
        start = self.start_time.hour * 60 + self.start_time.minute
        end = self.end_time.hour * 60 + self.end_time.minute
        return (end - start) % MINUTES_PER_DAY

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


class Lesson(BaseModel):
    """A recurring weekly lesson."""
    description: Description
    day: Day
    lesson_time: LessonTime

    class Config:
        frozen = True

    def __init__(self, description: Description, day: Day, lesson_time: LessonTime):
        super().__init__(description=description, day=day, lesson_time=lesson_time)

    def __str__(self) -> str:
        return f"{self.description} ({self.day} {self.lesson_time})"
