"""Line-command parser: ``<command> --key=value ...``.

One pass turns a raw line into a :class:`ParsedCommand` with the command
name and a key → value option map. Parsing never fails: malformed flags
are dropped and it is up to each command to decide whether a missing or
invalid value is fatal.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field

FLAG_PREFIX = "--"


class FlagValueError(ValueError):
    """A flag is present but its value has the wrong type."""

    def __init__(self, key: str, value: str, expected: str) -> None:
        super().__init__(f"Invalid {key}: {value!r} is not {expected}")
        self.key = key
        self.value = value


@dataclass(frozen=True)
class ParsedCommand:
    """A tokenised command line.

    Attributes:
        name: First token, or None for a blank line.
        options: Flag values by key; the first occurrence of a key wins.
        tokens: Every token, command name included.
    """

    name: str | None
    options: dict[str, str] = field(default_factory=dict)
    tokens: tuple[str, ...] = ()

    def has(self, key: str) -> bool:
        return key in self.options

    def get_str(self, key: str, default: str | None = None) -> str | None:
        return self.options.get(key, default)

    def get_int(self, key: str, default: int | None = None) -> int | None:
        """Integer value of *key*, or *default* when the flag is absent.

        Raises:
            FlagValueError: If the flag is present but not an integer.
        """
        raw = self.options.get(key)
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError:
            raise FlagValueError(key, raw, "an integer") from None


def tokenize(line: str) -> list[str]:
    """Split on whitespace.

    Double quotes group words (``--title="Animal Farm"``). Apostrophes and
    backslashes are ordinary characters, so ``O'Brien`` survives intact.
    An unbalanced double quote falls back to a plain whitespace split.
    """
    lexer = shlex.shlex(line, posix=True)
    lexer.whitespace_split = True
    lexer.quotes = '"'
    lexer.escape = ""
    lexer.commenters = ""
    try:
        return list(lexer)
    except ValueError:
        return line.split()


def parse_flag(token: str) -> tuple[str, str] | None:
    """``--key=value`` → ``(key, value)``; anything else → None."""
    if not token.startswith(FLAG_PREFIX):
        return None
    key, sep, value = token[len(FLAG_PREFIX) :].partition("=")
    if not sep or not key:
        return None
    return key, value


def parse_line(line: str) -> ParsedCommand:
    tokens = tokenize(line)
    if not tokens:
        return ParsedCommand(name=None)

    options: dict[str, str] = {}
    for token in tokens[1:]:
        flag = parse_flag(token)
        if flag is not None:
            options.setdefault(*flag)
    return ParsedCommand(name=tokens[0], options=options, tokens=tuple(tokens))
