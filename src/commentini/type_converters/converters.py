"""Converter classes and functions."""

from functools import wraps
from typing import Callable, TypeAlias, TypeVar
import re
import contextlib
from ..exceptions_warnings import ValueConvertError

ConvertedType = TypeVar("ConvertedType")
T = TypeVar("T")

TypeConverter: TypeAlias = Callable[[str | None], ConvertedType]
"""Type of type converter functions. To create a type converter, use converter decorator."""


class WrongType(Exception):
    """Raised by a processor if its input can't be converted."""


def converter(type_name: str) -> Callable[[Callable[[str], T]], TypeConverter[T]]:
    """Create a decorator that turns a processor into a TypeConverter.

    Args:
        type_name (str): Name of the target type, reported by ValueConvertError.

    Returns:
        Callable[[Callable[[str], T]], TypeConverter[T]]: The decorator. The processor
            should raise WrongType if conversion is not possible.
    """

    def decorator(processor: Callable[[str], T]) -> TypeConverter[T]:

        @wraps(processor)
        def convert(value: str | None) -> T:
            """Convert value.

            Args:
                value (str | None): The value to convert.

            Raises:
                ValueConvertError: If value is None or conversion was impossible.

            Returns:
                T: The converted value.
            """
            if value is not None:
                with contextlib.suppress(WrongType):
                    return processor(value)
            raise ValueConvertError(value, type_name)

        return convert

    return decorator


def bool_converter(
    true: str | tuple[str, ...] = ("True", "Yes"),
    false: str | tuple[str, ...] = ("False", "No"),
) -> TypeConverter[bool]:
    """Create a new bool converter. Matching is case-sensitive.

    Args:
        true (str | tuple[str, ...], optional): String(s) that should be regarded as True.
            Defaults to ("True", "Yes").
        false (str | tuple[str, ...], optional): String(s) that should be regarded as False.
            Defaults to ("False", "No").

    Returns:
        TypeConverter[bool]: The bool converter.
    """

    if not isinstance(true, tuple):
        true = (true,)
    if not isinstance(false, tuple):
        false = (false,)

    @converter("bool")
    def to_bool(string: str) -> bool:
        if string in true:
            return True
        elif string in false:
            return False
        raise WrongType

    return to_bool


def integer_converter(bits: int, type_name: str) -> TypeConverter[int]:
    """Create a new integer converter for signed integers of a fixed width.

    Args:
        bits (int): Width of the integer, e.g. 32 or 64.
        type_name (str): Name of the target type.

    Returns:
        TypeConverter[int]: The integer converter.
    """
    lower, upper = -(2 ** (bits - 1)), 2 ** (bits - 1) - 1

    @converter(type_name)
    def to_int(string: str) -> int:
        # int() would also accept whitespace and underscores
        if not re.fullmatch(r"[+-]?[0-9]+", string):
            raise WrongType
        number = int(string)
        if not lower <= number <= upper:
            raise WrongType
        return number

    return to_int


_FLOAT_PATTERN = re.compile(
    r"(?P<number>[+-]?(?:NaN|Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
    r"[fFdD]?"
)


def float_converter() -> TypeConverter[float]:
    """Create a new floating point converter.

    Accepts an optional sign followed by "NaN", "Infinity" or a decimal number with
    optional exponent and an optional type suffix (f, F, d or D). Surrounding
    whitespace is ignored.

    Returns:
        TypeConverter[float]: The float converter.
    """

    @converter("float")
    def to_float(string: str) -> float:
        if not (match := _FLOAT_PATTERN.fullmatch(string.strip())):
            raise WrongType
        return float(match["number"])

    return to_float


# default converters
DEFAULT_BOOL_CONVERTER = bool_converter()
"""Bool converter accepting True/Yes and False/No."""
DEFAULT_INT_CONVERTER = integer_converter(32, "int")
"""Converter for signed 32-bit integers."""
DEFAULT_LONG_CONVERTER = integer_converter(64, "long")
"""Converter for signed 64-bit integers."""
DEFAULT_FLOAT_CONVERTER = float_converter()
"""Floating point converter."""
