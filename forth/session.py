from __future__ import annotations

from collections import deque
import logging

from forth.lexer import Token, tokenize
from forth.words import WordTable
from forth.evaluator import step
from forth.errors import ForthError

logger = logging.getLogger(__name__)


class Session:
    """
    One interpreter context. The stack and the word table live as long as the
    session does; the token queue only lasts for a single call to `evaluate`.
    """

    def __init__(self) -> None:
        self._stack: list[int] = []
        self._tokens: deque[Token] = deque()
        self._words = WordTable()

    def evaluate(self, source: str) -> None:
        # Anything left over from a failed call is dropped, not resumed
        self._tokens = deque(tokenize(source))
        try:
            while self._tokens:
                step(self._stack, self._tokens, self._words)
        except ForthError as e:
            logger.debug("evaluation stopped: %s (%d tokens left)", e, len(self._tokens))
            raise

    def stack(self) -> list[int]:
        return self._stack.copy()

    def words(self) -> list[str]:
        return self._words.names()
