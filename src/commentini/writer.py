"""Writing a Document as ini text."""

from typing import Self, TextIO
from .args import Parameters
from .entities import Commentable, Key, Value
from .globals import (
    ASSIGN,
    CARRIAGE_RETURN,
    EMPTY,
    NEW_LINE,
    SECTION_END,
    SECTION_START,
    WRITE_COMMENT_MARKER,
)
from .interface import Document, PairMap, Section


def comment_to_string(commentable: Commentable) -> str:
    """Convert the comment of an entity into an ini comment line.

    The comment is written trimmed, so reading and writing again gives the same text.
    Line terminators inside the comment are removed, so the comment always takes
    exactly one line.

    Returns:
        str: The comment line (including line terminator) or "" if there is
            no comment.
    """
    if not commentable.has_comment:
        return EMPTY
    content = (
        commentable.trimmed_comment.replace(CARRIAGE_RETURN, EMPTY)
        .replace(NEW_LINE, EMPTY)
    )
    return f"{WRITE_COMMENT_MARKER} {content}{NEW_LINE}"


def pair_to_string(key: Key, value: Value) -> str:
    """Convert a key-value pair (and the key's comment) into ini lines."""
    return f"{comment_to_string(key)}{key}{ASSIGN}{value}{NEW_LINE}"


def section_name_to_string(name: str, section: Section) -> str:
    """Convert a section's name (and the section's comment) into ini lines."""
    return (
        f"{comment_to_string(section)}{SECTION_START}{name.strip()}{SECTION_END}"
        f"{NEW_LINE}"
    )


class IniWriter:
    """Writes Documents to a text sink.

    The writer only appends to the sink. The sink is closed by close() or when
    leaving the writer's context.
    """

    def __init__(
        self, sink: TextIO, parameters: Parameters | None = None, **kwargs
    ) -> None:
        """
        Args:
            sink (TextIO): The sink to write to.
            parameters (Parameters | None, optional): Parameters for writing. Will be
                copied. Defaults to None (default Parameters).
            **kwargs (optional): Parameters as kwargs, overriding those of parameters.
                See doc of Parameters for details.
        """
        self._sink = sink
        self.parameters = Parameters() if parameters is None else parameters.copy()
        if kwargs:
            self.parameters.update(**kwargs)

    @property
    def newline_at_section_end(self) -> bool:
        return self.parameters.newline_at_section_end

    @newline_at_section_end.setter
    def newline_at_section_end(self, value: bool) -> None:
        self.parameters.newline_at_section_end = value

    def write(self, document: Document) -> None:
        """Write a document: global pairs first, then the sections.

        Args:
            document (Document): The document to write.
        """
        self._write_pairs(document.global_pairs)
        for name, section in document.sections.items():
            self._write_section(name, section)

    def _write_section(self, name: str, section: Section) -> None:
        self._sink.write(section_name_to_string(name, section))
        self._write_pairs(section.pairs)
        if self.newline_at_section_end:
            self._sink.write(NEW_LINE)

    def _write_pairs(self, pairs: PairMap) -> None:
        for key, value in pairs.items():
            self._sink.write(pair_to_string(key, value))

    def close(self) -> None:
        self._sink.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
