class Parameters:
    """Parameters for reading and writing."""

    def __init__(
        self,
        parse_comments: bool = True,
        newline_at_section_end: bool = False,
    ) -> None:
        """
        Args:
            parse_comments (bool, optional): Whether comments should be attached to the
                following section or key while reading. If False, every section and key
                gets an empty comment. Defaults to True.
            newline_at_section_end (bool, optional): Whether to write an empty line
                after the last key-value pair of each section. Defaults to False.
        """
        self.parse_comments = parse_comments
        self.newline_at_section_end = newline_at_section_end

    @property
    def parse_comments(self) -> bool:
        return self._parse_comments

    @parse_comments.setter
    def parse_comments(self, value: bool) -> None:
        self._parse_comments = self.verify_flag(value, "parse_comments")

    @property
    def newline_at_section_end(self) -> bool:
        return self._newline_at_section_end

    @newline_at_section_end.setter
    def newline_at_section_end(self, value: bool) -> None:
        self._newline_at_section_end = self.verify_flag(
            value, "newline_at_section_end"
        )

    @staticmethod
    def verify_flag(value: bool, name: str) -> bool:
        if not isinstance(value, bool):
            raise TypeError(f"{name} must be a bool, not {type(value).__name__}.")
        return value

    def copy(self) -> "Parameters":
        return Parameters(
            parse_comments=self.parse_comments,
            newline_at_section_end=self.newline_at_section_end,
        )

    def update(self, **kwargs) -> None:
        """Update parameters with kwargs

        Args:
            **kwargs: Keyword-arguments to update the parameters with.

        Raises:
            AttributeError: If a keyword is no known parameter.
        """
        for k, v in kwargs.items():
            if not isinstance(getattr(type(self), k, None), property):
                raise AttributeError(f"'{k}' is no known parameter.")
            setattr(self, k, v)

    def __repr__(self) -> str:
        return (
            f"Parameters(parse_comments={self.parse_comments},"
            f" newline_at_section_end={self.newline_at_section_end})"
        )
