from collections import deque
from typing import List

from scanparse.tree.tree import ParseNode


class Printer:
    """Renders a parse tree breadth-first, with one line of labels per depth."""

    def levels(self, tree: ParseNode) -> List[List[str]]:
        # Queue of (node, depth) pairs. Nodes are only referenced, never copied
        queue = deque([(tree, 0)])
        levels = []
        while queue:
            node, depth = queue.popleft()
            if depth == len(levels):
                levels.append([])
            levels[depth].append(node.label)
            queue.extend((child, depth + 1) for child in node.children)
        return levels

    def print(self, tree: ParseNode) -> str:
        return "\n".join(" ".join(labels) for labels in self.levels(tree))
