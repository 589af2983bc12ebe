"""cfgfile serialization module."""

import logging
import os
from os import PathLike
from typing import IO, List, Optional, Union

from .config import ConfigFile

logger = logging.getLogger(__name__)


class ConfigFileWriter:
    """Render a ``ConfigFile`` back to its text format.

    Sections and options come out in insertion order. The default section is
    left out while it holds no options. Each extra line of a multi-line value
    becomes its own TAB-indented continuation line, so that the parser puts
    the value back together.
    """

    def __init__(self, config: ConfigFile, delimiter: str = "=", continuation_indent: str = "\t"):
        """Initialize writer.

        Args:
            config: Configuration to serialize
            delimiter: Text placed between option and value
            continuation_indent: Prefix of each extra line of a multi-line value
        """
        self.config = config
        self.delimiter = delimiter
        self.continuation_indent = continuation_indent

    def render(self, header: Optional[str] = None) -> str:
        """Render the configuration as text.

        Args:
            header: Comment placed before the first section  # (may span several lines)

        Returns:
            Configuration text, newline-terminated
        """
        lines: List[str] = []

        if header:
            lines.extend(f"# {line}" for line in header.splitlines())

        data = self.config.to_dict()
        for section, options in data.items():
            if section == self.config.default_section and not options:
                continue  # skip default section if empty
            lines.append(f"[{section}]")
            for option, value in options.items():
                lines.extend(self._render_option(option, value))
            lines.append("")

        return "".join(f"{line}\n" for line in lines)

    def _render_option(self, option: str, value: str) -> List[str]:
        first, *rest = value.split("\n")
        return [f"{option}{self.delimiter}{first}"] + [f"{self.continuation_indent}{line}" for line in rest]

    def write(self, stream: IO, header: Optional[str] = None) -> None:
        """Write the rendered configuration to a stream.

        Text streams receive the text as is, other streams get it utf-8 encoded.
        """
        text = self.render(header)
        try:
            stream.write(text)
        except TypeError:
            # binary stream
            stream.write(text.encode("utf-8"))

    def write_file(self, path: Union[str, PathLike], perm: int = 0o644, header: Optional[str] = None) -> None:
        """Write the rendered configuration to a file.

        Args:
            path: Destination file  # (created or truncated)
            perm: Permission bits used if the file gets created  # (umask still applies)
            header: Optional header comment

        Raises:
            OSError: If the file cannot be opened or written
        """
        logger.debug("writing configuration to %s (mode %o)", path, perm)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, perm)
        with os.fdopen(fd, "wb") as f:
            self.write(f, header)
