"""
Pattern coercion and anchored matching on top of the `re` module.
"""
import functools
import re
from typing import Optional, Union

PatternLike = Union[str, re.Pattern]

# Constructs that inspect text before the match position. Patterns containing
# any of them are matched against a slice so they see the cursor as the start.
_LOOKBEHIND_MARKERS = ("^", "\\A", "\\b", "\\B", "(?<")


def compile_pattern(pattern: PatternLike, flags: int = 0) -> "re.Pattern":
    """
    Return a compiled pattern.

    Compiled patterns are returned unchanged. Strings are compiled with
    `flags`, relying on the `re` module's own cache.

    Raises:
        TypeError: If pattern is neither a string nor a compiled pattern.
        ValueError: If flags are given together with a compiled pattern.
        re.error: If the pattern string is invalid.
    """
    if isinstance(pattern, re.Pattern):
        if not isinstance(pattern.pattern, str):
            raise TypeError("Byte patterns cannot scan text.")
        if flags:
            raise ValueError("Cannot apply flags to an already compiled pattern.")
        return pattern
    if isinstance(pattern, str):
        return re.compile(pattern, flags)
    raise TypeError(
        f"Expected a pattern string or compiled pattern, got {type(pattern).__name__}."
    )


@functools.lru_cache(maxsize=512)
def needs_slice(pattern: "re.Pattern") -> bool:
    """
    True if the pattern may look at text before its start position.

    The check is textual and errs towards True (an escaped `^` also counts).
    """
    return any(marker in pattern.pattern for marker in _LOOKBEHIND_MARKERS)


def anchored_match(pattern: "re.Pattern", text: str, start: int) -> Optional["re.Match"]:
    """
    Match `pattern` anchored at `start`, as if `text[start:]` were the whole text.

    Start anchors, word boundaries and lookbehind are evaluated against the
    slice, so `^` and `\\A` refer to the current position. Only those patterns
    pay for copying the remainder; others match in place with `pos=start`.

    Spans of an in-place match are already absolute; spans of a sliced match
    are relative to the slice. In both cases `start - match.pos` is the offset
    that turns them into absolute positions.
    """
    if needs_slice(pattern):
        return pattern.match(text[start:])
    return pattern.match(text, start)
