"""
Syntax tree printer.

Renders a node hierarchy the way a directory tree is drawn:

    └──BinaryExpression
        ├──NumberExpression
        │   └──NumberToken 1
        ├──PlusToken
        └──NumberExpression
            └──NumberToken 2
"""

from __future__ import annotations

from rich.console import Console
from rich.style import Style
from rich.text import Text

from minicalc.core.syntax.nodes import SyntaxNode
from minicalc.core.syntax.token import SyntaxToken

TREE_STYLE = Style(color="bright_black")


def _render_lines(root: SyntaxNode) -> list[str]:
    lines: list[str] = []
    # (node, indent, is_last); children are pushed in reverse to pop in order
    stack: list[tuple[SyntaxNode, str, bool]] = [(root, "", True)]

    while stack:
        node, indent, is_last = stack.pop()
        marker = "└──" if is_last else "├──"
        line = f"{indent}{marker}{node.kind}"
        if isinstance(node, SyntaxToken) and node.value is not None:
            line += f" {node.value}"
        lines.append(line)

        child_indent = indent + ("    " if is_last else "│   ")
        children = node.children()
        for i in range(len(children) - 1, -1, -1):
            stack.append((children[i], child_indent, i == len(children) - 1))

    return lines


def render_tree(node: SyntaxNode) -> Text:
    """Render ``node`` and its descendants as styled text."""
    return Text("\n".join(_render_lines(node)), style=TREE_STYLE)


def print_tree(node: SyntaxNode, console: Console) -> None:
    console.print(render_tree(node))
