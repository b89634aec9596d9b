from __future__ import annotations

from collections import deque
import logging

from forth.lexer import Token, TokenType
from forth.words import Word, WordTable, TERMINATOR
from forth.errors import InvalidWord

logger = logging.getLogger(__name__)


def compile_definition(queue: deque[Token], table: WordTable) -> int:
    """
    Consume `NAME body... ;` from the front of the queue (the `:` itself has
    already been taken) and append the new word to the table.

    Word references in the body are bound to their current slot right away,
    so later redefinitions do not change this body, and names that are not
    defined yet (including the word being defined) are rejected.

    Returns the slot of the new word. Raises InvalidWord for a missing name,
    an unknown name in the body, or input that ends before the `;`. Tokens
    consumed before the failure are not put back.
    """
    if not queue or (head := queue.popleft()).typ is not TokenType.WORD:
        raise InvalidWord("expected a name after ':'")

    name = head.value
    body: list[Token] = []
    while queue:
        token = queue.popleft()

        if token.typ is TokenType.WORD and token.value == TERMINATOR:
            index = table.append(Word.compiled(name, body))
            logger.debug("compiled %s into slot %d: %r", name, index, body)
            return index

        if token.typ is TokenType.WORD:
            if (index := table.lookup(token.value)) is None:
                raise InvalidWord(f"'{token.value}' is not defined")
            body.append(Token.index(index))

        else:
            body.append(token)

    raise InvalidWord(f"definition of '{name}' is missing ';'")
