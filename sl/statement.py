import dataclasses as dc

from .ast           import AST, pprint_lines
from .expression    import Expression, Condition

### STATEMENTS ###

# holds a line number for the beginning of each statement
# holds the expressions and nested statements associated to one statement
# there is no block scope: a conditional body declares into the program

@dc.dataclass
class Statement(AST):

    def pprint(self, indent = 0):
        return " " * indent + "base statement"

@dc.dataclass
class Declaration(Statement):
    name        : str

    def pprint(self, indent = 0):
        return " " * indent + f"Decl: int {self.name} (line {self.line})"

@dc.dataclass
class Assignment(Statement):
    name        : str
    value       : Expression

    def pprint(self, indent = 0):
        return pprint_lines(indent, f"Assign: {self.name} =", [self.value])

@dc.dataclass
class Conditional(Statement):
    condition   : Condition
    body        : list[Statement] = dc.field(default_factory = list)

    def pprint(self, indent = 0):
        return "\n".join([
            " " * indent + f"If (line {self.line})",
            self.condition.pprint(indent + 2),
            pprint_lines(indent + 2, f"Block (stmts={len(self.body)}):",
                         self.body),
        ])
