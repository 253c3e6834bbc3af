"""
StringScanner: A cursor over an immutable text, advanced by anchored pattern matches.

Each scan tries a pattern at the current position. A successful scan records
its captures and moves the cursor past the consumed span; a failed scan
returns None and leaves the scanner exactly as it was, so callers can try
several token patterns in turn at the same position.
"""
from typing import Optional, Tuple
import logging
import re

from .config import ScannerConfig
from .match_data import MatchData
from .pattern import PatternLike, anchored_match, compile_pattern

logger = logging.getLogger(__name__)

_ANY_CHAR = re.compile(r".", re.DOTALL)


class StringScanner:
    """
    Scans an immutable text with anchored regular-expression matches.

    Positions are character offsets into the text. The position only moves
    forward and only through a successful scan, which also replaces the
    last match data.

    Patterns see the remaining text as if it started at the cursor. Most
    patterns match in place; patterns using `^`, `\\A`, `\\b`, `\\B` or
    lookbehind are matched against a copy of the remainder, which costs
    O(len(rest)) per scan. Prefer plain patterns in hot lexer loops over
    large inputs.
    """

    def __init__(self, text: str, config: Optional[ScannerConfig] = None):
        """
        Initialize the scanner at position 0.

        Args:
            text: The text to scan. May be empty.
            config: Scanner configuration. Uses defaults if not provided.

        Raises:
            TypeError: If text is not a string.
        """
        if not isinstance(text, str):
            raise TypeError(f"StringScanner requires str text, got {type(text).__name__}.")
        self._text: str = text
        self._pos: int = 0
        self._last_match: Optional[MatchData] = None
        self._config = config or ScannerConfig()
        logger.debug("StringScanner initialized over %d characters", len(text))

    @property
    def config(self) -> ScannerConfig:
        """Get the scanner configuration."""
        return self._config

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> int:
        """Current zero-based character offset."""
        return self._pos

    @property
    def last_match(self) -> Optional[MatchData]:
        """Match data of the most recent successful scan, if any."""
        return self._last_match

    # --- Scanning ---

    def scan(self, pattern: PatternLike) -> Optional[str]:
        """
        Match `pattern` at the current position and advance past it.

        The match is always anchored at the current position; the pattern
        decides where it ends. A pattern matching the empty string succeeds
        without moving the position.

        Args:
            pattern: A pattern string or compiled `re` pattern.

        Returns:
            The matched text, or None if the pattern does not match here.

        Raises:
            re.error: If a pattern string is invalid.
        """
        match = self._match(pattern)
        if match is None:
            logger.debug("scan: no match for %r at position %d", self._pattern_text(pattern), self._pos)
            return None

        start = self._pos
        match_data = MatchData.from_match(match, offset=start - match.pos)
        self._last_match = match_data
        self._pos = start + len(match_data.groups[0])
        if start == self._pos:
            logger.debug("scan: zero-width match for %r at position %d", self._pattern_text(pattern), start)
        else:
            logger.debug("scan: matched %r, position %d -> %d", match_data.matched, start, self._pos)
        return match_data.matched

    def check(self, pattern: PatternLike) -> Optional[str]:
        """
        Report what scan() would return, without advancing or recording the match.
        """
        match = self._match(pattern)
        if match is None:
            return None
        return match.group(0)

    def getch(self) -> Optional[str]:
        """
        Scan a single character, newlines included.

        Returns:
            The character, or None at the end of the text.
        """
        return self.scan(_ANY_CHAR)

    # --- Match access ---

    def match_at(self, index: int) -> Optional[str]:
        """
        Return group `index` of the last match.

        Returns None if nothing has matched yet, if index is out of range,
        or if the group did not take part in the match.
        """
        if self._last_match is None:
            return None
        group = self._last_match.group(index)
        return group.value if group is not None else None

    def match_named(self, name: str) -> Optional[str]:
        """Return the named group of the last match, if it participated."""
        if self._last_match is None:
            return None
        group = self._last_match.named(name)
        return group.value if group is not None else None

    def captures(self) -> Optional[Tuple[Optional[str], ...]]:
        """Return all group values of the last match, group 0 first."""
        if self._last_match is None:
            return None
        return self._last_match.values()

    # --- Position queries ---

    def at_end(self) -> bool:
        """True if the whole text has been consumed."""
        return self._pos == len(self._text)

    def beginning_of_line(self) -> bool:
        """True at the start of the text or right after a newline."""
        if self._pos == 0:
            return True
        return self._text[self._pos - 1] == "\n"

    def rest(self) -> str:
        """Return the unscanned remainder of the text."""
        return self._text[self._pos:]

    def peek(self, length: int) -> str:
        """
        Return up to `length` characters from the current position without advancing.

        Args:
            length: Maximum number of characters; values <= 0 yield an empty string.
        """
        if length <= 0:
            return ""
        return self._text[self._pos:self._pos + length]

    def _match(self, pattern: PatternLike) -> Optional["re.Match"]:
        flags = self._config.pattern_flags if isinstance(pattern, str) else 0
        compiled = compile_pattern(pattern, flags)
        return anchored_match(compiled, self._text, self._pos)

    @staticmethod
    def _pattern_text(pattern: PatternLike) -> str:
        return pattern if isinstance(pattern, str) else pattern.pattern

    def __repr__(self) -> str:
        more = "..." if len(self._text) - self._pos > 10 else ""
        return f"<StringScanner {self._pos}/{len(self._text)} {self.peek(10)!r}{more}>"
