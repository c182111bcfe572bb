import dataclasses as dc

from typing import Optional as Opt

### AST CLASS ###

# Statement and Expression objects for the ast
# maintain line information for errors
# the tree is walked by the asm generator
# pprint(indent) -> str for display

@dc.dataclass
class AST:
    line        : Opt[int] = dc.field(kw_only = True, default = None)

    def pprint(self, indent = 0):
        return " " * indent + "base ast"

def pprint_lines(indent, header, children):
    lines = [" " * indent + header]
    lines += [child.pprint(indent + 2) for child in children]
    return "\n".join(lines)
