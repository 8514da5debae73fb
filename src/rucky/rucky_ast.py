# src/rucky/rucky_ast.py
"""AST node classes.

Every node compares structurally (same class, equal fields) and prints back
to source with ``str()``. The printer only adds the parentheses the parser
needs to rebuild the same tree, so parsing the printed text reproduces an
equal tree. Equality and printing walk the tree with an explicit stack and
work on trees of any depth.
"""

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def _binding(operator):
    # Imported here, the parser module imports this one
    from .parser.parser import precedences
    return precedences[operator]


def _grouped(node, needs_parens):
    if needs_parens:
        return ["(", node, ")"]
    return [node]


def _render(node):
    """Print ``node`` by expanding each node into string pieces and child nodes."""
    out = []
    stack = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
        else:
            stack.extend(reversed(item._pieces()))
    return "".join(out)


# Base classes
class Node:
    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented

        pending = [(self, other)]
        while pending:
            mine, theirs = pending.pop()
            if type(mine) is not type(theirs):
                return False
            if not isinstance(mine, Node):
                if mine != theirs:
                    return False
                continue
            if mine.__dict__.keys() != theirs.__dict__.keys():
                return False
            for key, value in mine.__dict__.items():
                other_value = theirs.__dict__[key]
                if isinstance(value, list):
                    if not isinstance(other_value, list) or len(value) != len(other_value):
                        return False
                    pending.extend(zip(value, other_value))
                else:
                    pending.append((value, other_value))
        return True

    __hash__ = None

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def __str__(self):
        return _render(self)

    def _pieces(self):
        raise NotImplementedError(f"{self.__class__.__name__} cannot be printed")


class Statement(Node): pass
class Expression(Node): pass


class Program(Node):
    def __init__(self, statements=None):
        self.statements = list(statements) if statements is not None else []

    def __repr__(self):
        return f"Program(statements={self.statements!r})"

    def _pieces(self):
        pieces = []
        for i, stmt in enumerate(self.statements):
            if i:
                pieces.append("\n")
            pieces.append(stmt)
        return pieces


# Statement Nodes
class BlankStatement(Statement):
    def __repr__(self):
        return "BlankStatement()"

    def _pieces(self):
        return [";"]


class LetStatement(Statement):
    def __init__(self, name, value):
        self.name = name
        self.value = value

    def __repr__(self):
        return f"LetStatement(name={self.name!r}, value={self.value!r})"

    def _pieces(self):
        return ["let ", self.name, " = ", self.value, ";"]


class ReturnStatement(Statement):
    def __init__(self, return_value):
        self.return_value = return_value

    def __repr__(self):
        return f"ReturnStatement(return_value={self.return_value!r})"

    def _pieces(self):
        return ["return ", self.return_value, ";"]


class ExpressionStatement(Statement):
    def __init__(self, expression):
        self.expression = expression

    def __repr__(self):
        return f"ExpressionStatement(expression={self.expression!r})"

    def _pieces(self):
        return [self.expression, ";"]


# Expression Nodes
class Identifier(Expression):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"Identifier({self.value!r})"

    def _pieces(self):
        return [self.value]


class IntegerLiteral(Expression):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"IntegerLiteral({self.value})"

    def _pieces(self):
        return [str(self.value)]


class StringLiteral(Expression):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"StringLiteral({self.value!r})"

    def _pieces(self):
        escaped = "".join(_STRING_ESCAPES.get(ch, ch) for ch in self.value)
        return [f'"{escaped}"']


class PrefixExpression(Expression):
    def __init__(self, operator, right):
        self.operator = operator
        self.right = right

    def __repr__(self):
        return f"PrefixExpression(operator={self.operator!r}, right={self.right!r})"

    def _pieces(self):
        # Prefix operators bind tighter than any infix operator
        return [self.operator] + _grouped(self.right, isinstance(self.right, InfixExpression))


class InfixExpression(Expression):
    def __init__(self, left, operator, right):
        self.left = left
        self.operator = operator
        self.right = right

    def __repr__(self):
        return (f"InfixExpression(left={self.left!r}, operator={self.operator!r}, "
                f"right={self.right!r})")

    def _pieces(self):
        level = _binding(self.operator)
        # Equal precedence associates left, so only the right side needs parens then
        left_parens = isinstance(self.left, InfixExpression) and _binding(self.left.operator) < level
        right_parens = isinstance(self.right, InfixExpression) and _binding(self.right.operator) <= level
        return (_grouped(self.left, left_parens)
                + [f" {self.operator} "]
                + _grouped(self.right, right_parens))
