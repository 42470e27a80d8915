"""Glob pattern validation and path matching.

Patterns use slash-separated path globs:

- ``*`` matches any run of characters within one path segment
- ``?`` matches a single character other than ``/``
- ``**`` as a whole segment matches zero or more segments
- ``[abc]``, ``[a-z]`` and ``[!abc]`` match character classes, never ``/``
- ``{a,b}`` matches either alternative (alternatives may nest)
- ``\\x`` matches ``x`` literally

A pattern matches a path when it matches the whole normalized path.
"""

import re
from collections.abc import Iterable
from functools import lru_cache
from pathlib import PurePath


def _find_class_end(pattern: str, start: int) -> int | None:
    """Find the index of the ']' closing the class opened at ``start``."""
    n = len(pattern)
    j = start + 1
    if j < n and pattern[j] in "!^":
        j += 1
    # A ']' directly after the opening bracket is a literal member
    if j < n and pattern[j] == "]":
        j += 1
    while j < n and pattern[j] != "]":
        if pattern[j] == "\\":
            j += 1
        j += 1
    return j if j < n else None


def validate_pattern(pattern: object) -> str | None:
    """Check a glob pattern for syntax errors.

    Args:
        pattern: Candidate pattern taken from a raw configuration.

    Returns:
        None if the pattern is valid, otherwise the reason it was rejected.
    """
    if not isinstance(pattern, str):
        return f"expected a string, got {type(pattern).__name__}"
    if not pattern:
        return "pattern is empty"
    if not pattern.strip():
        return "pattern is blank"
    if "\x00" in pattern:
        return "pattern contains a NUL character"

    depth = 0
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "\\":
            if i + 1 >= n:
                return "trailing escape character"
            i += 2
            continue
        if char == "[":
            end = _find_class_end(pattern, i)
            if end is None:
                return f"unclosed character class at position {i}"
            i = end + 1
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            if depth == 0:
                return f"unmatched '}}' at position {i}"
            depth -= 1
        i += 1

    if depth:
        return "unclosed '{' alternation"
    return None


def _translate_class(body: str) -> str:
    negated = body[:1] in ("!", "^")
    if negated:
        body = body[1:]
    members: list[str] = []
    i = 0
    while i < len(body):
        char = body[i]
        if char == "\\" and i + 1 < len(body):
            members.append(re.escape(body[i + 1]))
            i += 2
            continue
        members.append("\\" + char if char in "\\^[]" else char)
        i += 1
    if negated:
        return "[^/" + "".join(members) + "]"
    return "(?!/)[" + "".join(members) + "]"


def _translate(pattern: str, i: int, *, in_brace: bool) -> tuple[str, int]:
    """Translate ``pattern`` from index ``i`` into a regular expression.

    Inside an alternation, translation stops at the next top-level ',' or '}'.
    """
    out: list[str] = []
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if in_brace and char in ",}":
            return "".join(out), i

        if char == "\\":
            out.append(re.escape(pattern[i + 1]))
            i += 2
        elif char == "*":
            if pattern.startswith("**", i):
                at_segment_start = i == 0 or pattern[i - 1] == "/"
                end = i + 2
                if at_segment_start and end < n and pattern[end] == "/":
                    out.append("(?:[^/]*/)*")
                    i = end + 1
                    continue
                if at_segment_start and end == n:
                    out.append(".*")
                    i = end
                    continue
            # '**' inside a segment behaves like '*'
            while i < n and pattern[i] == "*":
                i += 1
            out.append("[^/]*")
        elif char == "?":
            out.append("[^/]")
            i += 1
        elif char == "[":
            end = _find_class_end(pattern, i)
            if end is None:
                msg = f"unclosed character class at position {i}"
                raise ValueError(msg)
            out.append(_translate_class(pattern[i + 1 : end]))
            i = end + 1
        elif char == "{":
            alternatives: list[str] = []
            i += 1
            while True:
                alternative, i = _translate(pattern, i, in_brace=True)
                alternatives.append(alternative)
                if i >= n:
                    msg = "unclosed '{' alternation"
                    raise ValueError(msg)
                i += 1
                if pattern[i - 1] == "}":
                    break
            out.append("(?:" + "|".join(alternatives) + ")")
        else:
            out.append(re.escape(char))
            i += 1

    return "".join(out), i


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a glob pattern into a regular expression.

    Args:
        pattern: A syntactically valid glob pattern.

    Returns:
        Compiled expression to be used with ``fullmatch``.

    Raises:
        ValueError: If the pattern is not a valid glob.
    """
    reason = validate_pattern(pattern)
    if reason is not None:
        msg = f"Invalid glob pattern {pattern!r}: {reason}"
        raise ValueError(msg)
    regex, _ = _translate(pattern, 0, in_brace=False)
    return re.compile(regex, re.DOTALL)


def normalize_path(path: str | PurePath) -> str:
    """Normalize a path for matching.

    Converts to forward slashes and drops any leading './' components.
    """
    text = path.as_posix() if isinstance(path, PurePath) else path.replace("\\", "/")
    while text.startswith("./"):
        text = text[2:]
    return text


def runner_pattern_to_glob(pattern: object) -> object:
    """Translate a runner-style path fragment into an equivalent glob.

    Runner ignore lists hold fragments matched anywhere in a path, such as
    ``/node_modules/``. A leading '/' anchors the fragment at any segment
    start and a trailing '/' covers everything beneath it, so
    ``/node_modules/`` becomes ``**/node_modules/**``. Entries already
    containing '*' are taken as globs, and non-strings pass through for
    validation to reject.
    """
    if not isinstance(pattern, str) or "*" in pattern:
        return pattern
    core = pattern.strip("/")
    if not core:
        return "**" if pattern else pattern
    head = "**/" if pattern.startswith("/") else ""
    tail = "/**" if pattern.endswith("/") else ""
    return head + core + tail


class PatternSet:
    """An ordered, deduplicated set of compiled glob patterns."""

    def __init__(self, patterns: Iterable[str]) -> None:
        """Initialize the set.

        Args:
            patterns: Valid glob patterns; duplicates are dropped.
        """
        self._patterns = tuple(dict.fromkeys(patterns))
        self._compiled = [compile_pattern(p) for p in self._patterns]

    @property
    def patterns(self) -> tuple[str, ...]:
        """Get the patterns in first-occurrence order."""
        return self._patterns

    def __len__(self) -> int:
        return len(self._patterns)

    def first_match(self, path: str | PurePath) -> str | None:
        """Get the first pattern matching a path.

        Args:
            path: Path to test.

        Returns:
            The matching pattern, or None if no pattern matches.
        """
        normalized = normalize_path(path)
        for pattern, compiled in zip(self._patterns, self._compiled, strict=True):
            if compiled.fullmatch(normalized):
                return pattern
        return None

    def matches(self, path: str | PurePath) -> bool:
        """Check whether any pattern matches a path."""
        return self.first_match(path) is not None
