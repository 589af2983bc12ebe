"""cfgfile configuration object module."""

from __future__ import annotations

from copy import deepcopy
from os import PathLike
from typing import IO, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from .exceptions import ErrorKind, GetError
from .interpolation import InterpolationEngine
from .utils import FLOAT_PATTERN, INT_PATTERN

DEFAULT_SECTION = "default"
DEPTH_VALUES = 200

# Strings accepted as bool
BOOL_STRINGS: Dict[str, bool] = {
    "t": True,
    "true": True,
    "y": True,
    "yes": True,
    "on": True,
    "1": True,
    "f": False,
    "false": False,
    "n": False,
    "no": False,
    "off": False,
    "0": False,
}


class ConfigFile:
    """In-memory representation of a configuration file.

    Sections and options are case-insensitive and stored lower-case, values
    are case-sensitive strings. The default section always exists and is the
    lookup scope of ``%(name)s`` references.

    Example:
        >>> config = ConfigFile()
        >>> config.add_option("section", "option", "value")
        True
        >>> config.get_string("SECTION", "Option")
        'value'
    """

    def __init__(
        self,
        default_section: str = DEFAULT_SECTION,
        max_depth: int = DEPTH_VALUES,
        bool_strings: Optional[Mapping[str, bool]] = None,
    ):
        """Initialize an empty configuration.

        Args:
            default_section: Name of the reserved section  # (lookup scope for interpolation)
            max_depth: Maximum number of interpolation passes before giving up
            bool_strings: Tokens accepted by ``get_bool``  # (matched case-insensitively)
        """
        self.default_section = default_section.lower()
        self.max_depth = max_depth
        source = BOOL_STRINGS if bool_strings is None else bool_strings
        self.bool_strings = {token.lower(): flag for token, flag in source.items()}
        self._data: Dict[str, Dict[str, str]] = {}  # (section -> option -> value)

        self.add_section(self.default_section)

    # Document model

    def add_section(self, section: str) -> bool:
        """Add a new section.

        Returns:
            True if the section was inserted, False if it already existed
        """
        section = section.lower()
        if section in self._data:
            return False
        self._data[section] = {}
        return True

    def remove_section(self, section: str) -> bool:
        """Remove a section and all of its options.

        Returns:
            True if removed, False if it did not exist or is the default section
        """
        section = section.lower()
        if section not in self._data or section == self.default_section:
            return False
        del self._data[section]
        return True

    def add_option(self, section: str, option: str, value: str) -> bool:
        """Set an option, creating its section if needed.

        Returns:
            True if the option was inserted, False if an existing value was overwritten
        """
        self.add_section(section)

        section = section.lower()
        option = option.lower()

        inserted = option not in self._data[section]
        self._data[section][option] = value
        return inserted

    def remove_option(self, section: str, option: str) -> bool:
        """Remove an option.

        Returns:
            True if removed, False if the section or the option did not exist
        """
        section = section.lower()
        option = option.lower()

        if section not in self._data or option not in self._data[section]:
            return False
        del self._data[section][option]
        return True

    def sections(self) -> List[str]:
        """Return all section names, the default section included."""
        return list(self._data)

    def has_section(self, section: str) -> bool:
        return section.lower() in self._data

    def options(self, section: str) -> List[str]:
        """Return the options visible from a section.

        Options of the default section that the section does not override
        are listed after the section's own.

        Raises:
            GetError: If the section does not exist
        """
        section = section.lower()
        if section not in self._data:
            raise GetError(ErrorKind.SECTION_NOT_FOUND, section=section)

        result = list(self._data[section])
        for option in self._data[self.default_section]:
            if option not in self._data[section]:
                result.append(option)
        return result

    def has_option(self, section: str, option: str) -> bool:
        """Check whether an option is set in a section or in the default section."""
        section = section.lower()
        option = option.lower()

        if section in self._data and option in self._data[section]:
            return True
        return option in self._data[self.default_section]

    def items(self, section: str, raw: bool = False) -> List[Tuple[str, str]]:
        """Return the option/value pairs stored in a section.

        Args:
            section: Section name
            raw: Skip interpolation of the values

        Raises:
            GetError: If the section does not exist, or a value cannot be unfolded
        """
        section = section.lower()
        if section not in self._data:
            raise GetError(ErrorKind.SECTION_NOT_FOUND, section=section)

        getter = self.get_raw_string if raw else self.get_string
        return [(option, getter(section, option)) for option in self._data[section]]

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Return a copy of the raw configuration data."""
        return deepcopy(self._data)

    def __contains__(self, section: object) -> bool:
        return isinstance(section, str) and self.has_section(section)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __str__(self) -> str:
        return self.to_string()

    # Typed accessors

    def get_raw_string(self, section: str, option: str) -> str:
        """Get a value exactly as stored, without unfolding variables.

        Raises:
            GetError: If the section or the option does not exist
        """
        section = section.lower()
        option = option.lower()

        if section not in self._data:
            raise GetError(ErrorKind.SECTION_NOT_FOUND, section=section, option=option)
        if option not in self._data[section]:
            raise GetError(ErrorKind.OPTION_NOT_FOUND, section=section, option=option)
        return self._data[section][option]

    def get_string(self, section: str, option: str) -> str:
        """Get a value with all ``%(name)s`` references unfolded.

        Args:
            section: Section name  # (case-insensitive)
            option: Option name  # (case-insensitive)

        Returns:
            Fully expanded value

        Raises:
            GetError: If the lookup fails, a referenced variable is missing from
                the default section, or the interpolation depth is exhausted
        """
        value = self.get_raw_string(section, option)
        return InterpolationEngine(self).resolve(value)

    def get_int(self, section: str, option: str) -> int:
        """Get an interpolated value parsed as a base-10 integer.

        Raises:
            GetError: If the lookup fails or the value is not an integer
        """
        value = self.get_string(section, option)
        if not INT_PATTERN.fullmatch(value):
            raise GetError(ErrorKind.COULD_NOT_PARSE, section.lower(), option.lower(), "int", value)
        return int(value, 10)

    def get_float(self, section: str, option: str) -> float:
        """Get an interpolated value parsed as a float.

        Raises:
            GetError: If the lookup fails or the value is not a number
        """
        value = self.get_string(section, option)
        if not FLOAT_PATTERN.fullmatch(value):
            raise GetError(ErrorKind.COULD_NOT_PARSE, section.lower(), option.lower(), "float", value)
        return float(value)

    def get_bool(self, section: str, option: str) -> bool:
        """Get an interpolated value matched against ``bool_strings``.

        Raises:
            GetError: If the lookup fails or the value is not a known token
        """
        value = self.get_string(section, option)
        try:
            return self.bool_strings[value.lower()]
        except KeyError as e:
            raise GetError(ErrorKind.COULD_NOT_PARSE, section.lower(), option.lower(), "bool", value) from e

    # Reading and writing

    def read(self, stream: IO, encoding: Optional[str] = None) -> "ConfigFile":
        """Parse a readable stream into this configuration.

        Args:
            stream: Byte or text stream
            encoding: Codec for byte streams  # (guessed when omitted)

        Returns:
            This configuration, for chaining

        Raises:
            ReadError: On the first line that cannot be parsed
        """
        from .parser import ConfigFileParser

        ConfigFileParser(self).read_stream(stream, encoding)
        return self

    def write(self, stream: IO, header: Optional[str] = None) -> None:
        """Serialize this configuration to a writable byte or text stream."""
        from .writer import ConfigFileWriter

        ConfigFileWriter(self).write(stream, header)

    def write_config_file(
        self, path: Union[str, PathLike], perm: int = 0o644, header: Optional[str] = None
    ) -> None:
        """Serialize this configuration to a file.

        Args:
            path: Destination file  # (created or truncated)
            perm: Permission bits applied when the file is created
            header: Optional comment written before the first section
        """
        from .writer import ConfigFileWriter

        ConfigFileWriter(self).write_file(path, perm, header)

    def to_string(self, header: Optional[str] = None) -> str:
        """Render this configuration as text."""
        from .writer import ConfigFileWriter

        return ConfigFileWriter(self).render(header)
