from __future__ import annotations

from collections import deque
import logging

from forth.lexer import Token, TokenType
from forth.words import Behavior, Word, WordTable
from forth.compiler import compile_definition
from forth.errors import DivisionByZero, StackUnderflow, UnknownWord

logger = logging.getLogger(__name__)


def step(stack: list[int], queue: deque[Token], table: WordTable) -> None:
    token = queue.popleft()

    if token.typ is TokenType.WORD:
        if (index := table.lookup(token.value)) is None:
            raise UnknownWord(f"'{token.value}' is not defined")
        # Run it on the next step so every invocation goes through a slot
        queue.appendleft(Token.index(index))

    elif token.typ is TokenType.WORD_INDEX and token.value == table.compile_index:
        compile_definition(queue, table)

    elif token.typ is TokenType.WORD_INDEX:
        execute(table[token.value], stack, queue)

    elif token.typ is TokenType.NUMBER:
        stack.append(token.value)

    else:
        assert False, f"Unhandled token type {token.typ}"


def execute(word: Word, stack: list[int], queue: deque[Token]) -> None:
    assert len(Behavior) == 7, "Make sure all behaviors are handled as necessary."

    if word.behavior is Behavior.ARITHMETIC:
        require(stack, 2)
        rhs = stack.pop()
        lhs = stack.pop()
        stack.append(arithmetic(word.name, lhs, rhs))

    elif word.behavior is Behavior.DUP:
        require(stack, 1)
        stack.append(stack[-1])

    elif word.behavior is Behavior.DROP:
        require(stack, 1)
        stack.pop()

    elif word.behavior is Behavior.SWAP:
        require(stack, 2)
        stack[-2], stack[-1] = stack[-1], stack[-2]

    elif word.behavior is Behavior.OVER:
        require(stack, 2)
        stack.append(stack[-2])

    elif word.behavior is Behavior.NOP:
        pass

    elif word.behavior is Behavior.EXPAND:
        # Macro substitution rather than a call: the body replaces the word in
        # the pending queue, first body token frontmost. Nothing bounds how far
        # this can grow.
        logger.debug("expanding %s (%d tokens)", word.name, len(word.body))
        queue.extendleft(reversed(word.body))

    else:
        assert False, f"Unhandled behavior {word.behavior}"


def arithmetic(op: str, lhs: int, rhs: int) -> int:
    if op == "+":
        result = lhs + rhs
    elif op == "-":
        result = lhs - rhs
    elif op == "*":
        result = lhs * rhs
    elif op == "/":
        if rhs == 0:
            raise DivisionByZero()
        # Python's // floors, Forth truncates toward zero
        result = abs(lhs) // abs(rhs)
        if (lhs < 0) != (rhs < 0):
            result = -result
    else:
        assert False, f"Unknown arithmetic word {op}"

    return wrap(result)


def wrap(value: int) -> int:
    return (value + 2 ** 31) % 2 ** 32 - 2 ** 31


def require(stack: list[int], n: int) -> None:
    if len(stack) < n:
        raise StackUnderflow(f"needed {n} value(s) but the stack holds {len(stack)}")
