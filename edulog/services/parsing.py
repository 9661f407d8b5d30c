"""Parsing of raw user input into validated domain objects.

Every command that accepts user text goes through these functions, so the
format rules and the messages shown for violations live in one place:

- Each ``parse_*`` function trims its input (except fees and days, which
  are checked as typed), checks it against the target type's rule and
  returns the value object.
- A rejected value raises ``InvalidFormatError`` with the type's message.
- Lesson times are checked in two phases: each time on its own, then the
  pair together. A pair problem raises ``InvalidRelationError``.

The functions are pure; a rejected input is reported to the caller and
never retried here.
"""
from typing import Iterable, Set, Type

from edulog.core.exceptions import (
    InvalidFormatError,
    InvalidRelationError,
    ParseError,
    require_all_non_null,
    require_non_null,
)
from edulog.core.logging import get_logger
from edulog.domain.base import ValueObject
from edulog.domain.calendar import Day, Description, LessonTime
from edulog.domain.index import Index
from edulog.domain.student import Address, Email, Fee, Name, Phone
from edulog.domain.tag import Tag
from edulog.utils.text import is_non_zero_unsigned_integer

logger = get_logger(__name__)

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."


def _reject(field: str, message: str, error_type: Type[ParseError] = InvalidFormatError) -> ParseError:
    logger.debug(f"Rejected {field} input", extra={"field": field, "reason": message})
    return error_type(message)


def _parse_trimmed(raw: str, value_type: Type[ValueObject], field: str) -> ValueObject:
    require_non_null(raw, field)
    trimmed = raw.strip()
    if not value_type.is_valid(trimmed):
        raise _reject(field, value_type.MESSAGE_CONSTRAINTS)
    return value_type(trimmed)


def parse_index(one_based_index: str) -> Index:
    """Parse a one-based index such as "3" into an ``Index``.

    Leading and trailing whitespace is trimmed.

    Args:
        one_based_index: Raw index text

    Returns:
        Index pointing at that one-based position

    Raises:
        InvalidFormatError: If the text is not a non-zero unsigned integer
    """
    require_non_null(one_based_index, "index")
    trimmed = one_based_index.strip()
    if not is_non_zero_unsigned_integer(trimmed):
        raise _reject("index", MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(trimmed))


def parse_name(name: str) -> Name:
    """Parse a student name. Whitespace is trimmed."""
    return _parse_trimmed(name, Name, "name")


def parse_phone(phone: str) -> Phone:
    """Parse a phone number. Whitespace is trimmed."""
    return _parse_trimmed(phone, Phone, "phone")


def parse_address(address: str) -> Address:
    """Parse an address. Whitespace is trimmed."""
    return _parse_trimmed(address, Address, "address")


def parse_email(email: str) -> Email:
    """Parse an email address. Whitespace is trimmed."""
    return _parse_trimmed(email, Email, "email")


def parse_tag(tag: str) -> Tag:
    """Parse a single tag name. Whitespace is trimmed."""
    return _parse_trimmed(tag, Tag, "tag")


def parse_tags(tags: Iterable[str]) -> Set[Tag]:
    """Parse a collection of tag names into a set of tags.

    Duplicate names collapse into one tag. The first invalid name aborts
    the whole parse.

    Raises:
        InvalidFormatError: If any tag name is invalid
    """
    require_non_null(tags, "tags")
    return {parse_tag(tag_name) for tag_name in tags}


def parse_description(description: str) -> Description:
    """Parse a lesson description of 1 to 100 characters.

    Leading and trailing whitespace is trimmed before the length check.

    Raises:
        InvalidFormatError: With ``DESCRIPTION_EMPTY`` for blank text, or
            ``DESCRIPTION_TOO_LONG`` for more than 100 characters
    """
    require_non_null(description, "description")
    trimmed = description.strip()
    if Description.check_empty(trimmed):
        raise _reject("description", Description.DESCRIPTION_EMPTY)
    if Description.check_too_long(trimmed):
        raise _reject("description", Description.DESCRIPTION_TOO_LONG)
    return Description(trimmed)


def parse_fee(fee: str) -> Fee:
    """Parse a fee such as "40". The text is checked exactly as given."""
    require_non_null(fee, "fee")
    if not Fee.is_valid(fee):
        raise _reject("fee", Fee.MESSAGE_CONSTRAINTS)
    return Fee(int(fee))


def parse_day_of_week(day: str) -> Day:
    """Parse a weekday spelt fully or as its 3-letter shorthand.

    "Monday", "wednesday" and "fri" are all accepted. The text is checked
    exactly as given.

    Raises:
        InvalidFormatError: With ``Day.INVALID_DAY_OF_WEEK``
    """
    require_non_null(day, "day")
    if not Day.is_valid(day):
        raise _reject("day", Day.INVALID_DAY_OF_WEEK)
    return Day(day)


def parse_lesson_time(start_time: str, end_time: str) -> LessonTime:
    """Parse the start and end of a lesson, e.g. ("1400", "1530").

    Both strings are trimmed. Each must be a 24-hour ``HHMM`` time; only
    once both are well formed is the pair itself checked.

    Args:
        start_time: Raw start time
        end_time: Raw end time

    Returns:
        LessonTime holding the trimmed strings

    Raises:
        InvalidFormatError: With ``LessonTime.NOT_24H_FORMAT`` if either
            time is malformed
        InvalidRelationError: With ``LessonTime.NO_SAME_TIME`` if the times
            are equal
    """
    require_all_non_null(start_time, end_time)
    start = start_time.strip()
    end = end_time.strip()

    if not LessonTime.is_valid_time(start) or not LessonTime.is_valid_time(end):
        raise _reject("lesson_time", LessonTime.NOT_24H_FORMAT)

    if not LessonTime.is_valid_pair(start, end):
        raise _reject("lesson_time", LessonTime.NO_SAME_TIME, InvalidRelationError)

    return LessonTime(start, end)
