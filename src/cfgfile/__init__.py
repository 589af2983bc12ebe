"""cfgfile - INI-style configuration files with variable interpolation.

Read, query, modify and write configuration files made of ``[section]``
headers and ``option=value`` lines. Values may refer to options of the
reserved ``[default]`` section with ``%(name)s``.
"""
# ruff: noqa: F401

from .config import ConfigFile
from .exceptions import ConfigFileError, ErrorKind, GetError, ReadError
from .interpolation import InterpolationEngine
from .parser import ConfigFileParser, read_config_bytes, read_config_file, read_config_stream
from .writer import ConfigFileWriter

__version__ = "0.1.0"
