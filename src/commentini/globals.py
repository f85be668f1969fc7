from typing import Literal

SECTION_START = "["
SECTION_END = "]"
ASSIGN = "="
COMMENT_HASHTAG = "#"
COMMENT_SEMICOLON = ";"
NEW_LINE = "\n"
CARRIAGE_RETURN = "\r"
EMPTY = ""
CHILD_SECTION_PREFIX = "."
"""Reserved prefix of child section names (nested sections are not supported)."""

COMMENT_MARKERS = Literal["#", ";"]
"""Characters that start a comment line."""
WRITE_COMMENT_MARKER: COMMENT_MARKERS = COMMENT_HASHTAG
"""Comment marker used when writing."""
