from .interface import Document, Section, PairMap, SectionMap
from .entities import Commentable, Key, Value
from .args import Parameters
from .reader import IniReader, ParseContext, parse_lines
from .writer import IniWriter
from .files import loads, dumps, read_ini, export
from .exceptions_warnings import (
    IniSyntaxError,
    ValueConvertError,
    KeyNullError,
    IniStructureWarning,
    DuplicateSectionWarning,
    DanglingCommentWarning,
)
