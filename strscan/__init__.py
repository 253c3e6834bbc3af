# strscan package
"""
strscan: Cursor-based string scanning for lexers and incremental parsers.

Main components:
- StringScanner: Anchored, advance-on-success scanning over a text
- MatchData / CaptureGroup: Captures of the most recent successful scan
- ScannerConfig: Pattern flag defaults, optionally from the environment
"""
from .string_scanner import StringScanner
from .match_data import MatchData, CaptureGroup
from .config import ScannerConfig, ENV_PATTERN_FLAGS
from .pattern import compile_pattern, anchored_match

__all__ = [
    # Main classes
    "StringScanner",
    "ScannerConfig",

    # Match types
    "MatchData",
    "CaptureGroup",

    # Pattern helpers
    "compile_pattern",
    "anchored_match",
    "ENV_PATTERN_FLAGS",
]
