"""Tags attached to students."""
import re
from typing import ClassVar, NoReturn

from edulog.core.exceptions import UnsupportedMutationError
from edulog.domain.base import ValueObject

_TAG_PATTERN = re.compile(r"[A-Za-z0-9]+")


class Tag(ValueObject):
    """A short alphanumeric label, e.g. ``[sec3]`` or ``[weekend]``."""
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags names should be alphanumeric"

    value: str

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return bool(_TAG_PATTERN.fullmatch(value))

    @property
    def tag_name(self) -> str:
        return self.value

    def __str__(self) -> str:
        return f"[{self.value}]"


class ImmutableTagSet(frozenset):
    """Read-only set of tags handed out by aggregates.

    Every mutating set method raises ``UnsupportedMutationError``; copy into
    a new ``set`` to modify.
    """

    def _reject(self, *args, **kwargs) -> NoReturn:
        raise UnsupportedMutationError("tag set is read-only; copy it to modify")

    add = _reject
    remove = _reject
    discard = _reject
    pop = _reject
    clear = _reject
    update = _reject
    intersection_update = _reject
    difference_update = _reject
    symmetric_difference_update = _reject
    __ior__ = _reject
    __iand__ = _reject
    __isub__ = _reject
    __ixor__ = _reject

    def __repr__(self) -> str:
        return f"ImmutableTagSet({sorted(self, key=str)!r})"
