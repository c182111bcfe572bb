import dataclasses as dc

from .ast       import AST, pprint_lines
from .statement import Statement
from .asmgen    import AsmGen
from .symtable  import SymbolTable
from .labels    import LabelGenerator

### PROGRAM CLASS ###

# root of the ast, owns the top level statements
# builds the assembly in to_asm(), with a fresh symbol table and labels
# unless the caller hands its own in

@dc.dataclass
class Program(AST):
    statements  : list[Statement] = dc.field(default_factory = list)

    def __iter__(self):
        return iter(self.statements)

    def __len__(self):
        return len(self.statements)

    def pprint(self, indent = 0):
        return pprint_lines(indent, f"Program (stmts={len(self)})",
                            self.statements)

    def to_asm(self, symbols = None, labels = None):
        symbols = SymbolTable() if symbols is None else symbols
        labels  = LabelGenerator() if labels is None else labels
        return AsmGen.generate(self, symbols, labels)
