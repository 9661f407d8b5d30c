"""Domain models for students and their contact details."""
import re
from typing import ClassVar, FrozenSet, Iterable

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator

from edulog.core.exceptions import require_all_non_null
from edulog.domain.base import ValueObject
from edulog.domain.tag import ImmutableTagSet, Tag

_NAME_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")
_PHONE_PATTERN = re.compile(r"[0-9]{3,}")
_ADDRESS_PATTERN = re.compile(r"\S.*", re.DOTALL)
_FEE_PATTERN = re.compile(r"[0-9]{1,9}")


class Name(ValueObject):
    """A student's name."""
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )

    value: str

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return bool(_NAME_PATTERN.fullmatch(value))

    @property
    def full_name(self) -> str:
        return self.value


class Phone(ValueObject):
    """A phone number, digits only."""
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )

    value: str

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return bool(_PHONE_PATTERN.fullmatch(value))


class Email(ValueObject):
    """An email address.

    Syntax is checked with ``email-validator`` using its default rules, which
    require a globally routable domain. Deliverability (DNS) is not checked,
    so validation never touches the network.
    """
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain, e.g. alice@example.com:\n"
        "1. The local-part may contain letters, digits, periods and the special characters "
        "! # $ % & ' * + - / = ? ^ _ ` { | } ~, but should not start or end with a period "
        "or contain two periods in a row.\n"
        "2. The domain should be a public internet domain of labels separated by periods, "
        "such as example.com. Single-word domains (e.g. localhost) and reserved domains "
        "(e.g. .test, .local, .invalid) are not accepted."
    )

    value: str

    @classmethod
    def is_valid(cls, value: str) -> bool:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True


class Address(ValueObject):
    """A postal address. Any text is accepted as long as it is not blank."""
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Addresses can take any values, and it should not be blank"

    value: str

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return bool(_ADDRESS_PATTERN.fullmatch(value))


class Fee(ValueObject):
    """Fee charged per lesson, a non-negative whole number.

    ``is_valid`` checks the raw text a user typed; the constructor also
    takes an ``int`` directly.
    """
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Fees should be a non-negative whole number of at most 9 digits, e.g. 40"
    )
    MAX_FEE: ClassVar[int] = 999_999_999

    value: int

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return bool(_FEE_PATTERN.fullmatch(value))

    @classmethod
    def accepts(cls, value: int) -> bool:
        return 0 <= value <= cls.MAX_FEE

    @property
    def amount(self) -> int:
        return self.value


class Student(BaseModel):
    """Represents a student in the tutoring records.

    Identity fields (name, phone, email) and data fields (address, tags)
    are validated value objects and cannot be reassigned. Only the
    attendance flag changes after construction.

    Attributes:
        name: Student's name, also their weak identity
        phone: Contact number
        email: Contact email
        address: Postal address
        tags: Read-only set of tags, copied from the constructor argument
        is_present: Attendance flag, False until marked
    """
    name: Name = Field(frozen=True)
    phone: Phone = Field(frozen=True)
    email: Email = Field(frozen=True)
    address: Address = Field(frozen=True)
    tags: FrozenSet[Tag] = Field(frozen=True)
    is_present: bool = False

    def __init__(self, name: Name, phone: Phone, email: Email, address: Address,
                 tags: Iterable[Tag]):
        require_all_non_null(name, phone, email, address, tags)
        super().__init__(name=name, phone=phone, email=email, address=address, tags=tags)

    @field_validator("tags")
    @classmethod
    def read_only_tags(cls, tags: FrozenSet[Tag]) -> ImmutableTagSet:
        return ImmutableTagSet(tags)

    def mark(self) -> None:
        """Marks the student as present."""
        self.is_present = True

    def unmark(self) -> None:
        """Marks the student as absent."""
        self.is_present = False

    def is_same_student(self, other: "Student") -> bool:
        """Returns True if both students have the same name.

        This is a weaker notion of equality than ``==``, used to detect
        duplicate entries of the same real-world student.
        """
        if other is self:
            return True
        return other is not None and other.name == self.name

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Student):
            return NotImplemented
        return (
            self.name == other.name
            and self.phone == other.phone
            and self.email == other.email
            and self.address == other.address
            and self.tags == other.tags
            and self.is_present == other.is_present
        )
