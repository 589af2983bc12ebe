"""cfgfile parser module."""

import logging
from io import StringIO
from os import PathLike
from typing import IO, Any, Iterable, Optional, Union

from .config import ConfigFile
from .exceptions import ErrorKind, ReadError
from .utils import FULL_LINE_COMMENT_CHARS, decode_bytes, first_index, strip_comments

logger = logging.getLogger(__name__)


class ConfigFileParser:
    """Line-oriented parser filling a ``ConfigFile``."""

    def __init__(self, config: ConfigFile):
        """Initialize parser.

        Args:
            config: Configuration receiving the parsed sections and options
        """
        self.config = config
        self.section = config.default_section  # (section new options go to)
        self.option = ""  # (last option set, target of continuation lines)

    def read_stream(self, stream: IO, encoding: Optional[str] = None) -> ConfigFile:
        """Parse a byte or text stream.

        Args:
            stream: Readable stream  # (binary content is decoded first)
            encoding: Codec for binary content  # (utf-8 with chardet fallback when omitted)

        Returns:
            The target configuration

        Raises:
            ReadError: On the first line that cannot be parsed
        """
        content = stream.read()
        if isinstance(content, (bytes, bytearray)):
            content = decode_bytes(bytes(content), encoding)
        return self.read_lines(StringIO(content))

    def read_lines(self, lines: Iterable[str]) -> ConfigFile:
        """Parse text lines one by one, stopping at the first error."""
        for line in lines:
            self.parse_line(line)
        return self.config

    def parse_line(self, line: str) -> None:
        """Apply a single line of text to the target configuration.

        Raises:
            ReadError: If no section is in scope, or the line is neither a
                section header, an option nor a continuation
        """
        line = line.strip()

        # Empty line
        if not line:
            return

        # Comment, "rem" is kept for windows users
        if line[0] in FULL_LINE_COMMENT_CHARS or line[:3].lower() == "rem":
            return

        # New section
        if line[0] == "[" and line[-1] == "]":
            self.option = ""  # continuation lines must not cross sections
            self.section = line[1:-1].strip()
            if self.config.add_section(self.section):
                logger.debug("new section [%s]", self.section.lower())
            return

        # Not a new section and no section defined so far
        if not self.section:
            raise ReadError(ErrorKind.BLANK_SECTION, line)

        i = first_index(line)
        if i > 0:
            # Option and value
            self.option = line[:i].strip()
            value = strip_comments(line[i + 1 :]).strip()
            self.config.add_option(self.section, self.option, value)
        elif self.option:
            # Continuation of multi-line value
            previous = self.config.get_raw_string(self.section, self.option)
            value = strip_comments(line).strip()
            self.config.add_option(self.section, self.option, previous + "\n" + value)
        else:
            raise ReadError(ErrorKind.COULD_NOT_PARSE, line)


def read_config_stream(stream: IO, encoding: Optional[str] = None, **settings: Any) -> ConfigFile:
    """Read a stream and return a new configuration.

    Args:
        stream: Byte or text stream
        encoding: Codec for byte streams
        **settings: Keyword arguments for ``ConfigFile``  # (default_section, max_depth, bool_strings)

    Raises:
        ReadError: If the content cannot be parsed
    """
    config = ConfigFile(**settings)
    return ConfigFileParser(config).read_stream(stream, encoding)


def read_config_bytes(data: bytes, encoding: Optional[str] = None, **settings: Any) -> ConfigFile:
    """Read in-memory content and return a new configuration."""
    config = ConfigFile(**settings)
    parser = ConfigFileParser(config)
    return parser.read_lines(StringIO(decode_bytes(data, encoding)))


def read_config_file(path: Union[str, PathLike], encoding: Optional[str] = None, **settings: Any) -> ConfigFile:
    """Read a file and return a new configuration.

    Raises:
        OSError: If the file cannot be opened or read
        ReadError: If the content cannot be parsed
    """
    logger.debug("reading configuration from %s", path)
    with open(path, "rb") as f:
        return read_config_stream(f, encoding, **settings)
