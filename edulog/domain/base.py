"""Base class for single-field value objects."""
from typing import Any, ClassVar
from pydantic import BaseModel, field_validator


class ValueObject(BaseModel):
    """Immutable wrapper around one validated scalar.

    Subclasses narrow the type of ``value``, set ``MESSAGE_CONSTRAINTS`` and
    override ``is_valid``. Constructing an instance with a value that fails
    the predicate raises ``pydantic.ValidationError`` carrying the
    constraint message.
    """
    MESSAGE_CONSTRAINTS: ClassVar[str] = ""

    value: Any

    class Config:
        frozen = True

    def __init__(self, value: Any):
        super().__init__(value=value)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Return True if ``value`` satisfies this type's format rule."""
        return True

    @classmethod
    def accepts(cls, value: Any) -> bool:
        """Check a value after type coercion. Defaults to ``is_valid``."""
        return cls.is_valid(value)

    @classmethod
    def constraint_message(cls, value: Any) -> str:
        """Message explaining why ``value`` was rejected."""
        return cls.MESSAGE_CONSTRAINTS

    @field_validator("value")
    @classmethod
    def validate_value(cls, value: Any) -> Any:
        if not cls.accepts(value):
            raise ValueError(cls.constraint_message(value))
        return value

    def __str__(self) -> str:
        return str(self.value)
