import dataclasses as dc

from .ast import AST

### EXPRESSIONS ###

# types of expressions:
# number, identifier
# binary operation (+ or -) on two expressions
# condition is the equality test of an if, it never nests

@dc.dataclass
class Expression(AST):

    def pprint(self, indent = 0):
        return " " * indent + "base expression"

@dc.dataclass
class Identifier(Expression):
    name        : str

    def pprint(self, indent = 0):
        return " " * indent + f"Ident: {self.name} (line {self.line})"

@dc.dataclass
class NumberLiteral(Expression):
    value       : int

    def pprint(self, indent = 0):
        return " " * indent + f"Number: {self.value} (line {self.line})"

@dc.dataclass
class BinaryOp(Expression):
    operator    : str
    left        : Expression
    right       : Expression

    def pprint(self, indent = 0):
        # left operands nest, right ones are printed after the whole left side
        spine = []
        expr  = self
        while isinstance(expr, BinaryOp):
            spine.append(expr)
            expr = expr.left

        lines = [" " * (indent + 2 * depth) + f"Binop ({op.operator})"
                 for depth, op in enumerate(spine)]
        lines.append(expr.pprint(indent + 2 * len(spine)))
        for depth in reversed(range(len(spine))):
            lines.append(spine[depth].right.pprint(indent + 2 * depth + 2))
        return "\n".join(lines)

@dc.dataclass
class Condition(AST):
    left        : Expression
    right       : Expression

    def pprint(self, indent = 0):
        return "\n".join([
            " " * indent + "Condition:",
            self.left.pprint(indent + 2),
            " " * (indent + 2) + "==",
            self.right.pprint(indent + 2),
        ])
