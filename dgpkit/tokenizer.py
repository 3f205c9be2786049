"""Whitespace and comma separated tokenizers over strings and text streams."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Iterator, TextIO

_SEPARATORS = frozenset(" \t\n,\r")

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

_TRUE_WORDS = frozenset({"t", "true", "T", "TRUE"})
_FALSE_WORDS = frozenset({"f", "false", "F", "FALSE"})


class TokenizerError(Exception):
    """Raised when the input does not hold what the parser expects."""


class Tokenizer(ABC):
    """Splits a character source into tokens.

    Tokens are separated by spaces, tabs, newlines, carriage returns and
    commas. A token starting with ``#`` extends to the end of its line and
    is a comment; comments are skipped unless ``skip_comments`` is false.
    The most recently read token is available as :attr:`token`.
    """

    def __init__(self, skip_comments: bool = True) -> None:
        self.skip_comments = skip_comments
        self.token = ""

    @abstractmethod
    def _read_char(self) -> str:
        """Return the next character, or an empty string at the end."""

    def __str__(self) -> str:
        return self.token

    def __iter__(self) -> Iterator[str]:
        while self.get():
            yield self.token

    def get(self) -> bool:
        """Read the next token; return False when the input is exhausted."""
        while True:
            chars: list[str] = []
            c = self._read_char()
            while c and c in _SEPARATORS:
                c = self._read_char()
            if c:
                chars.append(c)
                c = self._read_char()
                while c and c not in _SEPARATORS:
                    chars.append(c)
                    c = self._read_char()
                if chars[0] == "#":
                    if c and c != "\n":
                        chars.append(c)
                    c = self._read_char()
                    while c and c != "\n":
                        chars.append(c)
                        c = self._read_char()
            self.token = "".join(chars)
            if not (self.skip_comments and self.token.startswith("#")):
                break
        return bool(self.token)

    def require(self, message: str) -> None:
        """Read the next token, raising TokenizerError with *message* if none."""
        if not self.get():
            raise TokenizerError(message)

    def getline(self) -> bool:
        """Read the rest of the current line into :attr:`token`."""
        chars: list[str] = []
        c = self._read_char()
        while c and c != "\n":
            chars.append(c)
            c = self._read_char()
        self.token = "".join(chars)
        return bool(self.token)

    def nextline(self) -> None:
        """Discard input up to and including the next newline."""
        c = self._read_char()
        while c and c != "\n":
            c = self._read_char()

    def get_bool(self) -> bool:
        """Read a boolean token (t, true, T, TRUE, f, false, F, FALSE)."""
        if self.get():
            if self.token in _TRUE_WORDS:
                return True
            if self.token in _FALSE_WORDS:
                return False
        raise TokenizerError(f"expecting boolean value, found {self.token!r}")

    def _next_match(self, pattern: re.Pattern[str], what: str) -> str:
        if self.get():
            match = pattern.match(self.token)
            if match:
                return match.group(1)
        raise TokenizerError(f"expecting {what}, found {self.token!r}")

    def get_int(self) -> int:
        """Read a token that starts with a decimal integer."""
        return int(self._next_match(_INT_PREFIX, "int"))

    def get_uint(self) -> int:
        """Read a token that starts with an integer, as an unsigned 32-bit value."""
        return int(self._next_match(_INT_PREFIX, "unsigned int")) % (1 << 32)

    def get_float(self) -> float:
        """Read a token that starts with a floating point number."""
        return float(self._next_match(_FLOAT_PREFIX, "float"))

    def _get_floats(self, count: int) -> tuple[float, ...]:
        return tuple(self.get_float() for _ in range(count))

    def get_color(self) -> tuple[float, float, float]:
        """Read three floats as an (r, g, b) color."""
        r, g, b = self._get_floats(3)
        return r, g, b

    def get_vec2f(self) -> tuple[float, float]:
        """Read two floats."""
        x, y = self._get_floats(2)
        return x, y

    def get_vec3f(self) -> tuple[float, float, float]:
        """Read three floats."""
        x, y, z = self._get_floats(3)
        return x, y, z

    def get_vec4f(self) -> tuple[float, float, float, float]:
        """Read four floats."""
        x, y, z, w = self._get_floats(4)
        return x, y, z, w

    def equals(self, text: str) -> bool:
        """Return True if the current token is *text*."""
        return self.token == text

    def expecting(self, text: str) -> bool:
        """Read the next token and return True if it is *text*."""
        return self.get() and self.equals(text)


class StringTokenizer(Tokenizer):
    """Tokenizer reading from an in-memory string."""

    def __init__(self, text: str, skip_comments: bool = True) -> None:
        super().__init__(skip_comments)
        self._text = text
        self._pos = 0

    def _read_char(self) -> str:
        if self._pos < len(self._text):
            c = self._text[self._pos]
            self._pos += 1
            return c
        return ""


class FileTokenizer(Tokenizer):
    """Tokenizer reading from an open text stream."""

    def __init__(self, stream: TextIO, skip_comments: bool = True) -> None:
        super().__init__(skip_comments)
        self._stream = stream

    def _read_char(self) -> str:
        return self._stream.read(1)