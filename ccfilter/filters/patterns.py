"""
Compiled regex pattern sets.

A PatternSet is an ordered, immutable group of extended regular expressions
tested as a single OR predicate against one argument at a time.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ..core.exceptions import PatternCompileError

# POSIX bracket classes valid in extended regexes but unknown to `re`
POSIX_CLASSES: dict[str, str] = {
    "alnum": "a-zA-Z0-9",
    "alpha": "a-zA-Z",
    "blank": " \\t",
    "cntrl": "\\x00-\\x1f\\x7f",
    "digit": "0-9",
    "graph": "\\x21-\\x7e",
    "lower": "a-z",
    "print": "\\x20-\\x7e",
    "punct": "!-/:-@\\[-`{-~",
    "space": " \\t\\n\\r\\f\\v",
    "upper": "A-Z",
    "xdigit": "0-9A-Fa-f",
}

QUANTIFIERS = "*+?"

# Without REG_NEWLINE, '.' crosses newlines
COMPILE_FLAGS = re.DOTALL

_POSIX_CLASS_RE = re.compile(r"\[:([a-z]+):\]")


def _merge_quantifiers(first: str, second: str) -> str:
    """Single quantifier equivalent to ``first`` applied then ``second``."""
    if first == second and first in "+?":
        return first
    return "*"


def translate_extended(pattern: str) -> str:
    """Rewrite an extended regex into the `re` dialect.

    - ``[[:digit:]]``-style classes inside brackets become `re` class bodies
    - ``$`` outside brackets becomes ``\\Z`` (end of string only)
    - stacked quantifiers such as ``**`` or ``+?`` collapse into one
    """
    out: list[str] = []
    i = 0
    in_bracket = False
    after_quantifier = False
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\":
            out.append(pattern[i : i + 2])
            i += 2
            after_quantifier = False
            continue
        if in_bracket:
            m = _POSIX_CLASS_RE.match(pattern, i)
            if m and m.group(1) in POSIX_CLASSES:
                out.append(POSIX_CLASSES[m.group(1)])
                i = m.end()
                continue
            if ch == "]":
                in_bracket = False
            out.append(ch)
            i += 1
            continue
        if ch in QUANTIFIERS:
            if after_quantifier:
                out[-1] = _merge_quantifiers(out[-1], ch)
            else:
                out.append(ch)
                after_quantifier = True
            i += 1
            continue
        after_quantifier = False
        if ch == "$":
            out.append("\\Z")
        elif ch == "[":
            out.append(ch)
            in_bracket = True
            # A leading ']' (optionally after '^') is a literal member
            if pattern.startswith("^", i + 1):
                out.append("^")
                i += 1
            if pattern.startswith("]", i + 1):
                out.append("\\]")
                i += 1
        else:
            out.append(ch)
        i += 1
    return "".join(out)


@dataclass(frozen=True)
class PatternSet:
    """Ordered collection of compiled patterns matched as an OR predicate."""

    name: str
    patterns: tuple[re.Pattern[str], ...] = ()
    sources: tuple[str, ...] = ()

    def match(self, text: str) -> bool:
        """True if any pattern matches anywhere in text."""
        return any(p.search(text) for p in self.patterns)

    def __len__(self) -> int:
        return len(self.patterns)

    def __iter__(self) -> Iterator[re.Pattern[str]]:
        return iter(self.patterns)


def compile_patterns(patterns: Iterable[str], name: str = "") -> PatternSet:
    """
    Compile each pattern string into a PatternSet.

    Args:
        patterns: Extended regular expressions, in rule order
        name: Rule list name used in diagnostics

    Returns:
        PatternSet holding the compiled patterns and their original text

    Raises:
        PatternCompileError: For the first pattern that does not compile
    """
    sources = tuple(patterns)
    compiled: list[re.Pattern[str]] = []
    for index, pattern in enumerate(sources):
        try:
            compiled.append(re.compile(translate_extended(pattern), COMPILE_FLAGS))
        except re.error as e:
            raise PatternCompileError(
                f"invalid regular expression '{pattern}': {e}",
                rule=name or None,
                index=index,
                pattern=pattern,
                cause=e,
            ) from e
    return PatternSet(name=name, patterns=tuple(compiled), sources=sources)
