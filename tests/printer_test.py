import unittest

from rich.tree import Tree

from sexpc import compile_stages
from sexpc.printer import dump, to_rich


class PrinterTestCase(unittest.TestCase):
    def setUp(self):
        self.stages = compile_stages("(add 2 (sub 3 4))")

    def test_tokens(self):
        self.assertEqual(
            dump(self.stages.tokens[:2]),
            [{"type": "paren", "value": "("}, {"type": "name", "value": "add"}],
        )

    def test_source_ast(self):
        self.assertEqual(
            dump(self.stages.ast),
            {
                "type": "Program",
                "body": [
                    {
                        "type": "CallExpression",
                        "name": "add",
                        "params": [
                            {"type": "NumberLiteral", "value": "2"},
                            {
                                "type": "CallExpression",
                                "name": "sub",
                                "params": [
                                    {"type": "NumberLiteral", "value": "3"},
                                    {"type": "NumberLiteral", "value": "4"},
                                ],
                            },
                        ],
                    }
                ],
            },
        )

    def test_target_ast(self):
        data = dump(self.stages.new_ast)
        stmt = data["body"][0]
        self.assertEqual(stmt["type"], "ExpressionStatement")
        self.assertEqual(
            stmt["expression"]["callee"], {"type": "Identifier", "name": "add"}
        )
        self.assertEqual(stmt["expression"]["arguments"][1]["type"], "CallExpression")

    def test_unsupported(self):
        with self.assertRaises(TypeError):
            dump(42)

    def test_rich_tree(self):
        tree = to_rich("source AST", dump(self.stages.ast))
        self.assertIsInstance(tree, Tree)
        self.assertEqual(tree.label, "source AST")
        self.assertEqual(len(tree.children), 1)


if __name__ == "__main__":
    unittest.main()
