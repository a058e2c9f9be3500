from scanparse.tree.tree import ParseNode


class YieldVisitor:
    """
    For yielding values from nodes in our parse tree
    """

    def visit(self, node: ParseNode, *args, **kwargs):
        """Visit a node."""
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method, self.visit_children)
        yield from visitor(node, *args, **kwargs)

    def visit_children(self, node: ParseNode, *args, **kwargs):
        """Called if no explicit visitor function exists for a node."""
        for field, value in node.iter_fields():
            if isinstance(value, list):
                for item in value:
                    if isinstance(item, ParseNode):
                        yield from self.visit(item, *args, **kwargs)

            elif isinstance(value, ParseNode):
                yield from self.visit(value, *args, **kwargs)


class LeafVisitor(YieldVisitor):
    """
    Yields the leaves of a parse tree in order, i.e. depth-first and left to right.

    >>> tree = Parser("x + 1").parse(Scanner("x + 1").scan())
    >>> [leaf.label for leaf in LeafVisitor().visit(tree)]
    ['IDENTIFIER(x)', 'EPSILON', 'PLUS', 'NUMBER(1)', 'EPSILON', 'EPSILON']
    """

    def visit_ParseNode(self, node: ParseNode):
        if node.is_leaf:
            yield node
        else:
            yield from self.visit_children(node)
