"""Positions in a displayed list."""
from pydantic import BaseModel, Field


class Index(BaseModel):
    """A position in a list, stored zero-based.

    Users refer to entries one-based ("delete 1"), code works zero-based.
    Use ``from_one_based`` / ``from_zero_based`` rather than the constructor
    so the intent is explicit at the call site.
    """
    zero_based: int = Field(ge=0)

    class Config:
        frozen = True

    @classmethod
    def from_zero_based(cls, zero_based_index: int) -> "Index":
        if zero_based_index < 0:
            raise IndexError(f"zero-based index must be >= 0, got {zero_based_index}")
        return cls(zero_based=zero_based_index)

    @classmethod
    def from_one_based(cls, one_based_index: int) -> "Index":
        if one_based_index < 1:
            raise IndexError(f"one-based index must be >= 1, got {one_based_index}")
        return cls(zero_based=one_based_index - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1

    def __str__(self) -> str:
        return str(self.one_based)
