from __future__ import annotations

from enum import IntEnum, auto
from dataclasses import dataclass
import re


VALUE_MIN = -2 ** 31
VALUE_MAX = 2 ** 31 - 1

_NUMBER = re.compile(r"[+-]?[0-9]+")


class TokenType(IntEnum):
    WORD = auto()
    WORD_INDEX = auto()
    NUMBER = auto()


@dataclass(frozen=True)
class Token:
    typ: TokenType
    value: str | int

    @staticmethod
    def word(name: str) -> Token:
        return Token(TokenType.WORD, name)

    @staticmethod
    def index(slot: int) -> Token:
        return Token(TokenType.WORD_INDEX, slot)

    @staticmethod
    def number(value: int) -> Token:
        return Token(TokenType.NUMBER, value)

    def __repr__(self) -> str:
        return f"<{self.typ.name} {self.value!r}>"


def tokenize(source: str) -> list[Token]:
    tokens = []
    for fragment in split(source):
        if is_number(fragment):
            tokens.append(Token.number(int(fragment)))
        else:
            tokens.append(Token.word(fragment.upper()))
    return tokens


def split(source: str) -> list[str]:
    fragments, start = [], 0
    for pos, ch in enumerate(source):
        if is_separator(ch):
            if start < pos:
                fragments.append(source[start:pos])
            start = pos + 1

    if start < len(source):
        fragments.append(source[start:])
    return fragments


def is_separator(ch: str) -> bool:
    return ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7f


def is_number(fragment: str) -> bool:
    # int() alone would also take underscores and non-ASCII digits
    if _NUMBER.fullmatch(fragment) is None:
        return False

    # Very long digit strings are out of range anyway and int() refuses them
    if len(fragment.lstrip("+-").lstrip("0")) > 10:
        return False

    return VALUE_MIN <= int(fragment) <= VALUE_MAX
