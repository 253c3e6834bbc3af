"""
Match data definitions for the string scanner.

These dataclasses hold the capture groups of a successful scan, with
offsets translated into the scanner's full text.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple
import re


@dataclass(frozen=True)
class CaptureGroup:
    """
    A single captured span.

    Attributes:
        start: Absolute start offset (inclusive) in the scanned text.
        end: Absolute end offset (exclusive) in the scanned text.
        value: The captured substring.
    """
    start: int
    end: int
    value: str

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class MatchData:
    """
    Captured groups of the most recent successful scan.

    Group 0 is the entire matched span, groups 1..N follow the pattern order.
    A group that did not participate in the match is stored as None, which
    keeps it distinct from a group that matched the empty string.
    """
    groups: Tuple[Optional[CaptureGroup], ...]
    group_names: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    @classmethod
    def from_match(cls, match: "re.Match", offset: int = 0) -> "MatchData":
        """
        Build match data from a regex match over a slice of the text.

        Args:
            match: The match returned by the pattern matcher.
            offset: Position of the slice within the full text; added to every span.

        Returns:
            A MatchData with absolute offsets.
        """
        groups = []
        for index in range(match.re.groups + 1):
            start, end = match.span(index)
            if start == -1:
                groups.append(None)
                continue
            groups.append(CaptureGroup(start + offset, end + offset, match.group(index)))
        return cls(groups=tuple(groups), group_names=MappingProxyType(dict(match.re.groupindex)))

    def __len__(self) -> int:
        return len(self.groups)

    @property
    def span(self) -> Tuple[int, int]:
        """Absolute (start, end) of the whole match."""
        whole = self.groups[0]
        return whole.start, whole.end

    @property
    def matched(self) -> str:
        """Text matched by group 0."""
        return self.groups[0].value

    def group(self, index: int) -> Optional[CaptureGroup]:
        """Return group `index`, or None if out of range or not participating."""
        if index < 0 or index >= len(self.groups):
            return None
        return self.groups[index]

    def named(self, name: str) -> Optional[CaptureGroup]:
        """Return the named group, or None if unknown or not participating."""
        index = self.group_names.get(name)
        if index is None:
            return None
        return self.group(index)

    def values(self) -> Tuple[Optional[str], ...]:
        """Return the captured substrings, None for groups that did not participate."""
        return tuple(g.value if g is not None else None for g in self.groups)
