from collections import deque
from unittest import TestCase, main

from forth.lexer import tokenize, Token
from forth.words import WordTable, Word, Behavior
from forth.compiler import compile_definition
from forth.errors import InvalidWord


def queue(source: str) -> deque:
    return deque(tokenize(source))


class TestCompile(TestCase):
    def test_compiles_into_resolved_slots(self) -> None:
        table = WordTable()
        index = compile_definition(queue("SQ DUP * ;"), table)

        self.assertEqual(9, index)
        self.assertEqual(
            Word("SQ", Behavior.EXPAND, (Token.index(4), Token.index(2))),
            table[index]
        )

    def test_numbers_are_kept(self) -> None:
        table = WordTable()
        index = compile_definition(queue("TWICE 2 * ;"), table)
        self.assertEqual((Token.number(2), Token.index(2)), table[index].body)

    def test_empty_body(self) -> None:
        table = WordTable()
        index = compile_definition(queue("NOTHING ;"), table)
        self.assertEqual((), table[index].body)

    def test_stops_at_terminator(self) -> None:
        tokens = queue("ONE 1 ; 2 3")
        compile_definition(tokens, WordTable())
        self.assertEqual([Token.number(2), Token.number(3)], list(tokens), "Tokens after ';' are left alone")

    def test_references_are_bound_early(self) -> None:
        table = WordTable()
        sq = compile_definition(queue("SQ DUP * ;"), table)
        quad = compile_definition(queue("QUAD SQ SQ ;"), table)
        compile_definition(queue("SQ DROP ;"), table)

        self.assertEqual((Token.index(sq), Token.index(sq)), table[quad].body)


class TestCompileErrors(TestCase):
    def test_missing_name(self) -> None:
        with self.assertRaises(InvalidWord):
            compile_definition(queue(""), WordTable())

    def test_number_as_name(self) -> None:
        with self.assertRaises(InvalidWord):
            compile_definition(queue("5 DUP ;"), WordTable())

    def test_unterminated_definition_adds_nothing(self) -> None:
        table, tokens = WordTable(), queue("X DUP")
        with self.assertRaises(InvalidWord):
            compile_definition(tokens, table)

        self.assertEqual(9, len(table))
        self.assertEqual(0, len(tokens), "The rest of the input is consumed")

    def test_undefined_reference(self) -> None:
        table = WordTable()
        with self.assertRaises(InvalidWord):
            compile_definition(queue("X FOO ;"), table)
        self.assertIsNone(table.lookup("X"))

    def test_self_reference_is_rejected(self) -> None:
        with self.assertRaises(InvalidWord):
            compile_definition(queue("LOOP LOOP ;"), WordTable())


if __name__ == '__main__':
    main()
