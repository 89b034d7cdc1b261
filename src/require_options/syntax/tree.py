"""Source text access and the parent index for a built syntax tree."""

from __future__ import annotations

from bisect import bisect_right
from typing import Callable, Iterator, Optional

from .nodes import FUNCTION_TYPES, FunctionNode, Node

# Read-only "lookup enclosing node" capability handed to the rule.
ParentLookup = Callable[[Node], Optional[Node]]


class SourceText:
    """Read-only view over the source string a tree was built from."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._line_starts = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                self._line_starts.append(i + 1)

    @property
    def text(self) -> str:
        return self._text

    def get_text(self, node: Node) -> str:
        """Exact source substring covered by ``node``."""
        return self._text[node.start : node.end]

    def slice(self, start: int, end: int) -> str:
        return self._text[start:end]

    def line_col(self, offset: int) -> tuple[int, int]:
        """1-based (line, column) for a character offset."""
        line_index = bisect_right(self._line_starts, offset) - 1
        return line_index + 1, offset - self._line_starts[line_index] + 1

    def __len__(self) -> int:
        return len(self._text)


class SyntaxTree:
    """A root node, its source, and an index from each node to its parent."""

    def __init__(self, root: Node, source: SourceText) -> None:
        self.root = root
        self.source = source
        self._parents: dict[Node, Node] = {}
        stack = [root]
        while stack:
            node = stack.pop()
            for child in node.children():
                self._parents[child] = node
                stack.append(child)

    def parent_of(self, node: Node) -> Optional[Node]:
        return self._parents.get(node)

    def walk(self) -> Iterator[Node]:
        """Pre-order traversal in source order."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            children = sorted(node.children(), key=lambda n: n.start)
            stack.extend(reversed(children))

    def functions(self) -> Iterator[FunctionNode]:
        for node in self.walk():
            if isinstance(node, FUNCTION_TYPES):
                yield node
