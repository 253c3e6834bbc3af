"""
Scanner configuration.

ScannerConfig() uses no pattern flags. ScannerConfig.from_env() reads defaults
from the environment (or a project `.env` file).
"""
import os
import re
from typing import Dict, Optional

from dotenv import load_dotenv

ENV_PATTERN_FLAGS = "STRSCAN_PATTERN_FLAGS"

FLAG_NAMES: Dict[str, re.RegexFlag] = {
    "ASCII": re.ASCII,
    "IGNORECASE": re.IGNORECASE,
    "MULTILINE": re.MULTILINE,
    "DOTALL": re.DOTALL,
    "VERBOSE": re.VERBOSE,
    "UNICODE": re.UNICODE,
    "A": re.ASCII,
    "I": re.IGNORECASE,
    "M": re.MULTILINE,
    "S": re.DOTALL,
    "X": re.VERBOSE,
    "U": re.UNICODE,
}


def parse_pattern_flags(value: Optional[str]) -> int:
    """
    Parse a comma-separated list of `re` flag names.

    Args:
        value: e.g. "IGNORECASE, MULTILINE". Empty or None yields 0.

    Returns:
        The combined flag value.

    Raises:
        ValueError: If a name is not a known flag.
    """
    flags = 0
    if not value:
        return flags
    for raw_name in value.split(","):
        name = raw_name.strip().upper()
        if not name:
            continue
        flag = FLAG_NAMES.get(name)
        if flag is None:
            raise ValueError(
                f"Unknown pattern flag '{raw_name.strip()}'. "
                f"Supported: {', '.join(sorted(FLAG_NAMES))}."
            )
        flags |= flag
    return flags


def resolve_pattern_flags(explicit_flags: Optional[int] = None) -> int:
    """Resolve pattern flags from an explicit value or the environment."""
    if explicit_flags is not None:
        return int(explicit_flags)
    return parse_pattern_flags(os.getenv(ENV_PATTERN_FLAGS))


class ScannerConfig:
    """Configuration for the string scanner."""

    def __init__(self, pattern_flags: Optional[int] = None):
        """
        Args:
            pattern_flags: `re` flags applied when compiling string patterns.
                Defaults to no flags. The environment is only consulted by from_env().
        """
        self.pattern_flags = int(pattern_flags) if pattern_flags is not None else 0

    @classmethod
    def from_env(cls) -> "ScannerConfig":
        """Build a config whose flags come from STRSCAN_PATTERN_FLAGS (or a `.env` file)."""
        load_dotenv()
        return cls(pattern_flags=resolve_pattern_flags())

    def __repr__(self) -> str:
        return f"ScannerConfig(pattern_flags={self.pattern_flags!r})"
