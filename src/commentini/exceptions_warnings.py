"""commentini-specific exceptions and warnings"""

# ---------- #
# Exceptions
# ---------- #


class IniSyntaxError(Exception):
    """Raised when a line of an ini could not be recognized."""

    def __init__(self, line_number: int, line: str, detail: str | None = None) -> None:
        """
        Args:
            line_number (int): Number of the offending line (starting at 1).
            line (str): The offending line without its line terminator.
            detail (str | None, optional): Short description of the problem.
                Defaults to None.
        """
        self.line_number = line_number
        self.line = line
        self.detail = detail
        if detail is None:
            message = f"Error in line {line_number}: '{line}'"
        else:
            message = f"Error '{detail}' in line {line_number}: '{line}'"
        super().__init__(message)


class ValueConvertError(ValueError):
    """Raised when a value could not be converted to the requested type."""

    def __init__(self, value: str | None, type_name: str) -> None:
        self.value = value
        self.type_name = type_name
        super().__init__(f"Could not convert '{value}' to {type_name}.")


class KeyNullError(ValueError):
    """Raised when a key is None, empty or consists of whitespace only."""

    def __init__(self) -> None:
        super().__init__("Key must not be None, empty or blank.")


# ---------- #
# Warnings
# ---------- #


class IniStructureWarning(Warning):
    """Raised when the ini has a questionable but valid structure."""


class DuplicateSectionWarning(IniStructureWarning):
    """Raised when a section is defined again and its earlier content is discarded."""


class DanglingCommentWarning(IniStructureWarning):
    """Raised when a comment at the end of the ini belongs to no section or key."""
