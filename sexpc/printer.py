"""
Converts tokens and both kinds of AST into plain nested dicts, for YAML
dumps and rich trees on the command line.
"""

from typing import Any, Dict, List, Union

from rich.tree import Tree

from sexpc import node as source
from sexpc.backend import node as target
from sexpc.frontend.lexer import Token


class SourcePrinter:
    def visitNode(self, node: source.Node, ctx):
        return {"type": node.kind}

    def visitProgram(self, node: source.Program, ctx):
        return {"type": node.kind, "body": [n.accept(self, ctx) for n in node.body]}

    def visitCallExpression(self, node: source.CallExpression, ctx):
        return {
            "type": node.kind,
            "name": node.name,
            "params": [p.accept(self, ctx) for p in node.params],
        }

    def visitNumberLiteral(self, node: source.NumberLiteral, ctx):
        return {"type": node.kind, "value": node.value}


class TargetPrinter:
    def visitNode(self, node: target.Node, ctx):
        return {"type": node.kind}

    def visitProgram(self, node: target.Program, ctx):
        return {"type": node.kind, "body": [n.accept(self, ctx) for n in node.body]}

    def visitExpressionStatement(self, node: target.ExpressionStatement, ctx):
        return {"type": node.kind, "expression": node.expression.accept(self, ctx)}

    def visitCallExpression(self, node: target.CallExpression, ctx):
        return {
            "type": node.kind,
            "callee": node.callee.accept(self, ctx),
            "arguments": [a.accept(self, ctx) for a in node.arguments],
        }

    def visitIdentifier(self, node: target.Identifier, ctx):
        return {"type": node.kind, "name": node.name}

    def visitNumberLiteral(self, node: target.NumberLiteral, ctx):
        return {"type": node.kind, "value": node.value}


def dump(obj: Union[source.Node, target.Node, Token, List[Token]]) -> Any:
    if isinstance(obj, list):
        return [dump(o) for o in obj]
    if isinstance(obj, Token):
        return {"type": obj.kind, "value": obj.value}
    if isinstance(obj, source.Node):
        return obj.accept(SourcePrinter())
    if isinstance(obj, target.Node):
        return obj.accept(TargetPrinter())
    raise TypeError(f"cannot dump {type(obj).__name__}")


def to_rich(label: str, data: Any) -> Tree:
    tree = Tree(label)
    add_rich(tree, data)
    return tree


def add_rich(tree: Tree, data: Any):
    if isinstance(data, list):
        for item in data:
            add_rich(tree, item)
    elif isinstance(data, dict):
        scalars = [f"{k}={v}" for k, v in data.items() if k != "type" and isinstance(v, str)]
        branch = tree.add(f"[bold]{data.get('type', '')}[/bold] {' '.join(scalars)}".rstrip())
        for k, v in data.items():
            if isinstance(v, (list, dict)):
                add_rich(branch.add(f"[italic]{k}[/italic]"), v)
    else:
        tree.add(str(data))
