import unittest

from sexpc.errors import ParseError
from sexpc.frontend.lexer import Token, tokenize
from sexpc.frontend.parser import parse
from sexpc.node import CallExpression, NumberLiteral, Program


class ParserTestCase(unittest.TestCase):
    def test_simple_call(self):
        self.assertEqual(
            parse(tokenize("(add 2 3)")),
            Program(
                [CallExpression("add", [NumberLiteral("2"), NumberLiteral("3")])]
            ),
        )

    def test_hand_built_tokens(self):
        tokens = [
            Token("paren", "("),
            Token("name", "add"),
            Token("number", "2"),
            Token("number", "3"),
            Token("paren", ")"),
        ]
        ast = parse(tokens)
        self.assertEqual(ast.body[0].name, "add")
        self.assertEqual([p.value for p in ast.body[0].params], ["2", "3"])

    def test_nested_call(self):
        self.assertEqual(
            parse(tokenize("(add 2 (sub 3 4))")),
            Program(
                [
                    CallExpression(
                        "add",
                        [
                            NumberLiteral("2"),
                            CallExpression(
                                "sub", [NumberLiteral("3"), NumberLiteral("4")]
                            ),
                        ],
                    )
                ]
            ),
        )

    def test_multiple_top_level(self):
        ast = parse(tokenize("(add 1 2) (sub 3 4)"))
        self.assertEqual([n.name for n in ast.body], ["add", "sub"])

    def test_call_without_params(self):
        self.assertEqual(
            parse(tokenize("(now)")), Program([CallExpression("now", [])])
        )

    def test_bare_literal(self):
        self.assertEqual(parse(tokenize("42")), Program([NumberLiteral("42")]))

    def test_empty(self):
        self.assertEqual(parse([]), Program([]))

    def test_deep_nesting(self):
        depth = 50
        ast = parse(tokenize("(f " * depth + "1" + ")" * depth))
        node = ast.body[0]
        for _ in range(depth - 1):
            node = node.params[0]
        self.assertEqual(node.params, [NumberLiteral("1")])

    def test_nesting_beyond_recursion_limit(self):
        depth = 3000
        ast = parse(tokenize("(f " * depth + "1" + ")" * depth))
        node = ast.body[0]
        for _ in range(depth - 1):
            node = node.params[0]
        self.assertEqual(node.name, "f")
        self.assertEqual(len(node.params), 1)
        self.assertEqual(node.params[0].value, "1")

    def test_unterminated_deep_call(self):
        with self.assertRaises(ParseError) as cm:
            parse(tokenize("(f " * 2000 + "1" + ")" * 1999))
        self.assertIn("unterminated", str(cm.exception))

    def test_unterminated_call(self):
        with self.assertRaises(ParseError) as cm:
            parse(tokenize("(add 2"))
        self.assertIsNone(cm.exception.token)
        self.assertIn("unterminated", str(cm.exception))

    def test_unterminated_nested_call(self):
        with self.assertRaises(ParseError):
            parse(tokenize("(add 2 (sub 3 4)"))

    def test_missing_call_name(self):
        with self.assertRaises(ParseError) as cm:
            parse(tokenize("()"))
        self.assertEqual(cm.exception.token, Token("paren", ")"))

    def test_number_as_call_name(self):
        with self.assertRaises(ParseError) as cm:
            parse(tokenize("(1 2)"))
        self.assertEqual(cm.exception.token.kind, "number")

    def test_open_paren_at_end(self):
        with self.assertRaises(ParseError) as cm:
            parse(tokenize("("))
        self.assertIsNone(cm.exception.token)

    def test_stray_close_paren(self):
        with self.assertRaises(ParseError) as cm:
            parse(tokenize(")"))
        self.assertEqual(cm.exception.token.kind, "paren")

    def test_bare_name(self):
        with self.assertRaises(ParseError) as cm:
            parse(tokenize("(add x 1)"))
        self.assertEqual(cm.exception.token, Token("name", "x"))
        self.assertIn("line 1, column 6", str(cm.exception))


if __name__ == "__main__":
    unittest.main()
