"""Interface classes exist for coder interaction: the document and its sections."""

from collections.abc import Iterator, MutableMapping
from .entities import Commentable, Key, Value
from .exceptions_warnings import KeyNullError
from .globals import CHILD_SECTION_PREFIX


class PairMap(MutableMapping[str, Value]):
    """Ordered key-value pairs. Keys are unique and must not be None or blank.

    Setting an existing key replaces the stored Key object (and thereby its comment)
    and the value, but keeps the position of the pair.
    """

    def __init__(self, pairs: dict[str, Value | str | None] | None = None) -> None:
        self._data: dict[str, tuple[Key, Value]] = {}
        if pairs:
            self.update(pairs)

    def __setitem__(self, key: str, value: Value | str | None) -> None:
        """Insert a key-value pair.

        Args:
            key (str): The key. Plain strings are wrapped into a Key without comment.
            value (Value | str | None): The value. Strings and None are wrapped into
                a Value.

        Raises:
            KeyNullError: If key is None, empty or blank.
        """
        if key is None or not key.strip():
            raise KeyNullError
        if not isinstance(key, Key):
            key = Key(key)
        if not isinstance(value, Value):
            value = Value.EMPTY if value is None else Value(value)
        self._data[str(key)] = (key, value)

    def __getitem__(self, key: str) -> Value:
        return self._data[key][1]

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[Key]:
        return (key for key, _ in self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def get_key(self, key: str) -> Key:
        """Get the stored Key object (including its comment) by its string.

        Raises:
            KeyError: If the key does not exist.
        """
        return self._data[key][0]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"


class Section(Commentable):
    """A configuration section. Holds key-value pairs and an optional comment."""

    def __init__(
        self,
        comment: str | None = None,
        pairs: dict[str, Value | str | None] | None = None,
    ) -> None:
        self.comment = comment
        self.pairs = PairMap(pairs)

    def __eq__(self, other: object) -> bool:
        # the section's own comment doesn't count
        if not isinstance(other, Section):
            return NotImplemented
        return self.pairs == other.pairs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Section(comment={self.comment!r}, pairs={dict(self.pairs.items())!r})"


class SectionMap(MutableMapping[str, Section]):
    """Sections by name, in insertion order. Names are stored trimmed."""

    def __init__(self) -> None:
        self._data: dict[str, Section] = {}

    def __setitem__(self, name: str, section: Section) -> None:
        """Register a section, replacing any section of the same name.

        Raises:
            ValueError: If the name starts with the reserved child section prefix.
            TypeError: If section is no Section.
        """
        name = name.strip()
        if name.startswith(CHILD_SECTION_PREFIX):
            raise ValueError(
                f"Section name '{name}' must not start with '{CHILD_SECTION_PREFIX}'"
                " (child sections are not supported)."
            )
        if not isinstance(section, Section):
            raise TypeError("Can only add Sections.")
        self._data[name] = section

    def __getitem__(self, name: str) -> Section:
        return self._data[name.strip()]

    def __delitem__(self, name: str) -> None:
        del self._data[name.strip()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


class Document:
    """An ini document: global (sectionless) pairs and named sections."""

    def __init__(self) -> None:
        self.global_pairs = PairMap()
        self.sections = SectionMap()

    def add_section(self, name: str, comment: str | None = None) -> Section:
        """Create a new empty section, replacing any section of the same name.

        Args:
            name (str): Name of the section (will be trimmed).
            comment (str | None, optional): Comment of the section. Defaults to None.

        Returns:
            Section: The new section.
        """
        section = Section(comment)
        self.sections[name] = section
        return section

    def get_section(self, name: str) -> Section:
        """Get a section by name.

        Raises:
            KeyError: If there is no section with that name.
        """
        return self.sections[name]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self.global_pairs == other.global_pairs and dict(
            self.sections.items()
        ) == dict(other.sections.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Document(global_pairs={dict(self.global_pairs.items())!r},"
            f" sections={dict(self.sections.items())!r})"
        )
