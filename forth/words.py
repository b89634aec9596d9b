from __future__ import annotations

from enum import IntEnum, auto
from dataclasses import dataclass, field

from forth.lexer import Token


class Behavior(IntEnum):
    ARITHMETIC = auto()
    DUP = auto()
    DROP = auto()
    SWAP = auto()
    OVER = auto()
    NOP = auto()
    EXPAND = auto()


@dataclass(frozen=True)
class Word:
    name: str
    behavior: Behavior
    body: tuple[Token, ...] = field(default=())

    @staticmethod
    def compiled(name: str, body: list[Token]) -> Word:
        return Word(name, Behavior.EXPAND, tuple(body))


COMPILE = ":"
TERMINATOR = ";"

BUILTINS = [
    Word("+", Behavior.ARITHMETIC),
    Word("-", Behavior.ARITHMETIC),
    Word("*", Behavior.ARITHMETIC),
    Word("/", Behavior.ARITHMETIC),
    Word("DUP", Behavior.DUP),
    Word("DROP", Behavior.DROP),
    Word("SWAP", Behavior.SWAP),
    Word("OVER", Behavior.OVER),
    # Only recognised by its slot; the evaluator compiles instead of running it
    Word(COMPILE, Behavior.NOP),
]


class WordTable:
    """
    Append-only list of words. Slots are never reused or rewritten, so a
    redefinition shadows the older entry rather than replacing it, and any
    index handed out stays valid for the lifetime of the table.
    """

    def __init__(self) -> None:
        self._words: list[Word] = []
        for word in BUILTINS:
            self.append(word)

    @property
    def compile_index(self) -> int | None:
        # Follows shadowing, so a user word named ":" takes over compilation
        return self.lookup(COMPILE)

    def append(self, word: Word) -> int:
        self._words.append(word)
        return len(self._words) - 1

    def lookup(self, name: str) -> int | None:
        for index in range(len(self._words) - 1, -1, -1):
            if self._words[index].name == name:
                return index
        return None

    def names(self) -> list[str]:
        return [word.name for i, word in enumerate(self._words) if self.lookup(word.name) == i]

    def __getitem__(self, index: int) -> Word:
        return self._words[index]

    def __len__(self) -> int:
        return len(self._words)
