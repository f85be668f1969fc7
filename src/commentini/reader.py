"""Reading ini text into a Document.

Every line is classified on its own, in this order: blank line, comment, section
name, key-value pair. The first matching step consumes the line; a line no step
consumes is a syntax error. The state the steps share lives in a ParseContext.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Self, TextIO
import warnings
from .args import Parameters
from .entities import Key, Value
from .exceptions_warnings import (
    IniSyntaxError,
    DuplicateSectionWarning,
    DanglingCommentWarning,
)
from .globals import (
    ASSIGN,
    CARRIAGE_RETURN,
    CHILD_SECTION_PREFIX,
    COMMENT_HASHTAG,
    COMMENT_SEMICOLON,
    EMPTY,
    NEW_LINE,
    SECTION_END,
    SECTION_START,
)
from .interface import Document, Section


def is_blank(line: str) -> bool:
    return not line.strip()


def is_comment(line: str) -> bool:
    """Check whether a line is a comment (blank lines count as comments, too)."""
    return (
        is_blank(line)
        or line.startswith(COMMENT_HASHTAG)
        or line.startswith(COMMENT_SEMICOLON)
    )


def is_section(line: str) -> bool:
    """Check whether a line is a section name, i.e. starts with "[", ends with "]" and
    contains no further brackets."""
    return (
        line.startswith(SECTION_START)
        and line.endswith(SECTION_END)
        and line.count(SECTION_START) == 1
        and line.count(SECTION_END) == 1
    )


@dataclass(slots=True)
class ParseContext:
    """Mutable state of one read.

    Args:
        parse_comments (bool): Whether pending comments are attached to sections and
            keys. If False, they are still collected but "" is attached instead.
        document (Document): The document being filled.
        current_section (Section | None): The section new pairs go to. None while
            no section name was read yet (pairs are global then).
        comment_buffer (list[str]): Comment contents read since the last section or
            key.
        line_number (int): Number of the last line fed (starting at 1).
    """

    parse_comments: bool = True
    document: Document = field(default_factory=Document)
    current_section: Section | None = None
    comment_buffer: list[str] = field(default_factory=list)
    line_number: int = 0

    def take_comment(self) -> str:
        """Get the pending comment and clear the buffer (if comments are parsed)."""
        if not self.parse_comments:
            return EMPTY
        comment = EMPTY.join(self.comment_buffer)
        self.comment_buffer.clear()
        return comment

    def add_pair(self, key: Key, value: Value) -> None:
        if self.current_section is None:
            self.document.global_pairs[key] = value
        else:
            self.current_section.pairs[key] = value

    def feed(self, line: str) -> None:
        """Process the next line.

        Args:
            line (str): The line without line terminator.

        Raises:
            IniSyntaxError: If the line is invalid.
            KeyNullError: If the line assigns a value to a blank key.
        """
        self.line_number += 1
        for step in LINE_STEPS:
            if step(self, line):
                return
        raise IniSyntaxError(self.line_number, line)

    def finish(self) -> Document:
        """Finish the read and return the document."""
        if self.parse_comments and not is_blank(EMPTY.join(self.comment_buffer)):
            warnings.warn(
                "Comment at the end of the ini is being ignored because no section"
                " or key follows it.",
                DanglingCommentWarning,
            )
        return self.document


def _handle_blank(context: ParseContext, line: str) -> bool:
    return is_blank(line)


def _handle_comment(context: ParseContext, line: str) -> bool:
    if not is_comment(line):
        return False
    # everything after the marker, verbatim
    context.comment_buffer.append(line[1:])
    return True


def _handle_section(context: ParseContext, line: str) -> bool:
    if not is_section(line):
        return False

    name = line.replace(SECTION_START, EMPTY).replace(SECTION_END, EMPTY).strip()
    if name.startswith(CHILD_SECTION_PREFIX):
        raise IniSyntaxError(
            context.line_number, line, "child section without parent"
        )

    if name in context.document.sections:
        warnings.warn(
            f"Line {context.line_number} defines section '{name}' again, thus its"
            " previous content is being discarded.",
            DuplicateSectionWarning,
        )
    section = Section(context.take_comment())
    context.document.sections[name] = section
    context.current_section = section
    return True


def _handle_assignment(context: ParseContext, line: str) -> bool:
    if ASSIGN not in line:
        return False

    index = line.index(ASSIGN)
    key = Key(line[:index].strip(), comment=context.take_comment())
    value = (
        Value(line[index + 1 :].strip()) if index < len(line) - 1 else Value.EMPTY
    )
    context.add_pair(key, value)
    return True


LINE_STEPS: tuple[Callable[[ParseContext, str], bool], ...] = (
    _handle_blank,
    _handle_comment,
    _handle_section,
    _handle_assignment,
)
"""Line classification steps in order of precedence."""


def _strip_line_terminator(line: str) -> str:
    return line.removesuffix(NEW_LINE).removesuffix(CARRIAGE_RETURN)


def parse_lines(lines: Iterable[str], parse_comments: bool = True) -> Document:
    """Read ini lines into a new Document.

    Args:
        lines (Iterable[str]): The lines, with or without line terminators.
        parse_comments (bool, optional): Whether to attach comments. Defaults to True.

    Raises:
        IniSyntaxError: At the first invalid line.

    Returns:
        Document: The read document.
    """
    context = ParseContext(parse_comments=parse_comments)
    for line in lines:
        context.feed(_strip_line_terminator(line))
    return context.finish()


class IniReader:
    """Reads a Document from a text stream.

    The stream belongs to the reader: closing the reader (or leaving its context)
    closes the stream.
    """

    def __init__(
        self, stream: TextIO, parameters: Parameters | None = None, **kwargs
    ) -> None:
        """
        Args:
            stream (TextIO): The stream to read from.
            parameters (Parameters | None, optional): Parameters for reading. Will be
                copied. Defaults to None (default Parameters).
            **kwargs (optional): Parameters as kwargs, overriding those of parameters.
                See doc of Parameters for details.
        """
        self._stream = stream
        self.parameters = Parameters() if parameters is None else parameters.copy()
        if kwargs:
            self.parameters.update(**kwargs)

    @property
    def parse_comments(self) -> bool:
        return self.parameters.parse_comments

    @parse_comments.setter
    def parse_comments(self, value: bool) -> None:
        self.parameters.parse_comments = value

    def parse(self) -> Document:
        """Read the (remaining) stream into a new Document.

        Raises:
            IniSyntaxError: At the first invalid line.
            KeyNullError: If a line assigns a value to a blank key.

        Returns:
            Document: The read document.
        """
        return parse_lines(self._stream, parse_comments=self.parse_comments)

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
