"""Custom exceptions for cfgfile."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Discriminator shared by read and get errors."""

    # Get errors
    SECTION_NOT_FOUND = "section_not_found"
    OPTION_NOT_FOUND = "option_not_found"
    MAX_DEPTH_REACHED = "max_depth_reached"

    # Read errors
    BLANK_SECTION = "blank_section"

    # Get and read errors
    COULD_NOT_PARSE = "could_not_parse"


class ConfigFileError(Exception):
    """Base exception for cfgfile errors."""

    pass


class ReadError(ConfigFileError):
    """Raised when a line of configuration text cannot be parsed."""

    def __init__(self, kind: ErrorKind, line: str):
        """Initialize read error.

        Args:
            kind: BLANK_SECTION or COULD_NOT_PARSE
            line: Offending line, already trimmed
        """
        self.kind = kind
        self.line = line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.kind is ErrorKind.BLANK_SECTION:
            return "empty section name not allowed"
        if self.kind is ErrorKind.COULD_NOT_PARSE:
            return f"could not parse line: {self.line}"
        return "invalid read error"


class GetError(ConfigFileError):
    """Raised when a value cannot be looked up, unfolded or converted."""

    def __init__(
        self,
        kind: ErrorKind,
        section: str = "",
        option: str = "",
        value_type: str = "",
        value: str = "",
        depth: Optional[int] = None,
    ):
        """Initialize get error.

        Args:
            kind: Reason of the failure
            section: Section name involved  # (lower-cased)
            option: Option name involved  # (lower-cased)
            value_type: Target type of a failed conversion  # ("int", "float" or "bool")
            value: Raw string that failed to convert
            depth: Interpolation ceiling that was exhausted
        """
        self.kind = kind
        self.section = section
        self.option = option
        self.value_type = value_type
        self.value = value
        self.depth = depth
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.kind is ErrorKind.SECTION_NOT_FOUND:
            return f"section '{self.section}' not found"
        if self.kind is ErrorKind.OPTION_NOT_FOUND:
            return f"option '{self.option}' not found in section '{self.section}'"
        if self.kind is ErrorKind.COULD_NOT_PARSE:
            return f"could not parse {self.value_type} value '{self.value}'"
        if self.kind is ErrorKind.MAX_DEPTH_REACHED:
            return f"possible cycle while unfolding variables: max depth of {self.depth} reached"
        return "invalid get error"
