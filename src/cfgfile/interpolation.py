"""Variable interpolation engine for cfgfile configurations."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .exceptions import ErrorKind, GetError

if TYPE_CHECKING:
    from .config import ConfigFile

VARIABLE_PATTERN = re.compile(r"%\(([a-zA-Z0-9_.\-]+)\)s")


class InterpolationEngine:
    """Engine unfolding ``%(name)s`` references against the default section."""

    def __init__(self, config: ConfigFile):
        """Initialize interpolation engine.

        Args:
            config: Configuration providing the default section and the depth ceiling

        Note:
            The engine only reads from ``config``, it never modifies it.
        """
        self.config = config

    def resolve(self, value: str) -> str:
        """Unfold all variable references in a value.

        Every pass substitutes each reference with the raw value it names, so
        references introduced by a substitution are unfolded by the next pass.

        Args:
            value: Raw value  # (may contain %(name)s patterns)

        Returns:
            Value without any references left

        Raises:
            GetError: If a referenced option is missing from the default section,
                or references remain after ``max_depth`` passes (likely a cycle)
        """
        for _ in range(self.config.max_depth):
            if not VARIABLE_PATTERN.search(value):
                return value
            value = VARIABLE_PATTERN.sub(self._replace_match, value)

        if VARIABLE_PATTERN.search(value):
            raise GetError(ErrorKind.MAX_DEPTH_REACHED, depth=self.config.max_depth)
        return value

    def _replace_match(self, match: re.Match) -> str:
        """Look up a single reference in the default section, uninterpolated."""
        return self.config.get_raw_string(self.config.default_section, match.group(1))
