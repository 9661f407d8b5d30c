"""Text predicates used when validating raw user input."""
import re

_UNSIGNED_INTEGER = re.compile(r"[0-9]+")

# Largest position a list index may hold (signed 32-bit)
MAX_INDEX = 2**31 - 1


def is_non_zero_unsigned_integer(text: str) -> bool:
    """Check whether ``text`` spells a positive integer with no sign.

    Only ASCII digits are accepted, so "+1", "1.5", " 1" and "-1" are all
    rejected. Leading zeros are allowed ("01" is 1). Values above
    ``MAX_INDEX`` are rejected.

    Args:
        text: Candidate string

    Returns:
        True if the string is a non-zero unsigned integer

    Examples:
        >>> is_non_zero_unsigned_integer("42")
        True
        >>> is_non_zero_unsigned_integer("0")
        False
    """
    if not _UNSIGNED_INTEGER.fullmatch(text):
        return False
    return 0 < int(text) <= MAX_INDEX


def is_blank(text: str) -> bool:
    """True if ``text`` is empty or whitespace only."""
    return not text or text.isspace()
