"""Ini entities are keys, values and everything that can carry a comment."""

from typing import Any, ClassVar, Self
from .exceptions_warnings import KeyNullError
from .type_converters.converters import (
    DEFAULT_BOOL_CONVERTER,
    DEFAULT_FLOAT_CONVERTER,
    DEFAULT_INT_CONVERTER,
    DEFAULT_LONG_CONVERTER,
)


class Commentable:
    """Mixin for entities that can carry a comment.

    A comment of None means "no comment" and is distinct from an empty comment.
    """

    comment: str | None = None

    @property
    def has_comment(self) -> bool:
        """Whether there is a comment that is not blank."""
        return self.comment is not None and bool(self.comment.strip())

    @property
    def trimmed_comment(self) -> str:
        """The comment without leading and trailing whitespace ("" if no comment)."""
        return "" if self.comment is None else self.comment.strip()


class Key(str, Commentable):
    """A key of a key-value pair.

    Compares and hashes like its string, so the comment is ignored and a Key equals
    a bare string of the same content.
    """

    def __new__(cls, key: str, comment: str | None = None) -> Self:
        """
        Args:
            key (str): The key.
            comment (str | None, optional): Comment belonging to the key-value pair.
                Defaults to None.

        Raises:
            KeyNullError: If key is None.
        """
        if key is None:
            raise KeyNullError
        self = super().__new__(cls, key)
        self.comment = comment
        return self

    def __repr__(self) -> str:
        return f"Key({str.__repr__(self)})"


class Value:
    """The value of a key-value pair. Its string may be absent (key without value)."""

    __slots__ = ("_raw",)

    EMPTY: ClassVar["Value"]
    """The absent value."""

    def __init__(self, value: str | None) -> None:
        self._raw = value

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_raw"):
            raise AttributeError("Value is immutable.")
        super().__setattr__(name, value)

    @property
    def raw(self) -> str | None:
        """The stored string or None if absent."""
        return self._raw

    @property
    def is_absent(self) -> bool:
        return self._raw is None

    def as_string(self) -> str | None:
        return self._raw

    def as_int(self) -> int:
        """Convert to a signed 32-bit integer.

        Raises:
            ValueConvertError: If the value is no such integer.
        """
        return DEFAULT_INT_CONVERTER(self._raw)

    def as_long(self) -> int:
        """Convert to a signed 64-bit integer.

        Raises:
            ValueConvertError: If the value is no such integer.
        """
        return DEFAULT_LONG_CONVERTER(self._raw)

    def as_float(self) -> float:
        """Convert to a floating point number.

        Raises:
            ValueConvertError: If the value is no number.
        """
        return DEFAULT_FLOAT_CONVERTER(self._raw)

    def as_bool(self) -> bool:
        """Convert to a boolean. Only "True" and "Yes" (true) as well as "False" and
        "No" (false) are accepted.

        Raises:
            ValueConvertError: If the value is none of the accepted literals.
        """
        return DEFAULT_BOOL_CONVERTER(self._raw)

    def __str__(self) -> str:
        return "" if self._raw is None else self._raw

    def __repr__(self) -> str:
        return f"Value({self._raw!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)


Value.EMPTY = Value(None)
