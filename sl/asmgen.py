# --------------------------------------------------------------------
from .expression import *
from .statement  import *
from .reporter   import CodegenError, UndeclaredVariable
from .symtable   import SymbolTable, VAR_BASE_ADDR
from .labels     import LabelGenerator

# ====================================================================
# Accumulator machine code generation
#
# registers A (accumulator) and B, one scratch cell at TEMP_ADDR
# for the left operand of a binary operation, variables from
# VAR_BASE_ADDR upward

TEMP_ADDR = 0x00
WORD_BITS = 32

ALU_OPS = {
    '+' : 'add',
    '-' : 'sub',
}

def format_addr(addr: int) -> str:
    return f'0x{addr:02X}'

def to_word(value: int) -> int:
    value &= (1 << WORD_BITS) - 1
    if value >= 1 << (WORD_BITS - 1):
        value -= 1 << WORD_BITS
    return value

# --------------------------------------------------------------------
class AsmGen:
    HEADER = [
        '// SimpleLang -> assembly',
        f'// TEMP at {format_addr(TEMP_ADDR)}, '
        f'variables from {format_addr(VAR_BASE_ADDR)} upward',
        '',
    ]

    def __init__(self, symbols: SymbolTable, labels: LabelGenerator):
        self._symbols = symbols
        self._labels  = labels
        self._asm     = []

    @classmethod
    def generate(cls, prgm, symbols: SymbolTable, labels: LabelGenerator) -> list[str]:
        asmgen = cls(symbols, labels); asmgen.for_program(prgm)
        return asmgen._asm

    def _get_asm(self, opcode, *args):
        return ' '.join((opcode,) + tuple(map(str, args)))

    def _emit(self, opcode, *args):
        self._asm.append(self._get_asm(opcode, *args))

    def _emit_label(self, lbl):
        self._asm.append(f'{lbl}:')

    def _emit_comment(self, text):
        self._asm.append(f'// {text}')

    def _address(self, name: str, line: int, assignment = False):
        addr = self._symbols.lookup(name)
        if addr is None:
            raise UndeclaredVariable(name, line, assignment = assignment)
        return addr

    # spill protocol shared by binary operations and conditions:
    # left -> A -> scratch, right -> A -> B, scratch -> A
    def _emit_spill(self, right: Expression):
        self._emit('mov', 'M', 'A', format_addr(TEMP_ADDR))
        self.for_expression(right)
        self._emit('mov', 'B', 'A')
        self._emit('mov', 'A', 'M', format_addr(TEMP_ADDR))

    def _emit_operands(self, left: Expression, right: Expression):
        self.for_expression(left)
        self._emit_spill(right)

    # the parser nests operations down the left operand only,
    # so the spine is walked in a loop rather than recursively
    def _emit_binary(self, expr: BinaryOp):
        spine = []
        while isinstance(expr, BinaryOp):
            if expr.operator not in ALU_OPS:
                raise CodegenError(f"unknown operator '{expr.operator}'",
                                   line = expr.line)
            spine.append(expr)
            expr = expr.left

        self.for_expression(expr)
        for op in reversed(spine):
            self._emit_spill(op.right)
            self._emit(ALU_OPS[op.operator])

    def for_expression(self, expr: Expression):
        match expr:
            case NumberLiteral(value):
                self._emit('ldi', 'A', to_word(value))

            case Identifier(name):
                addr = self._address(name, expr.line)
                self._emit('mov', 'A', 'M', format_addr(addr))

            case BinaryOp():
                self._emit_binary(expr)

            case _:
                raise CodegenError(f'unexpected node in expression: {expr!r}')

    def for_condition(self, cond: Condition):
        match cond:
            case Condition(left, right):
                self._emit_operands(left, right)
                self._emit('cmp')

            case _:
                raise CodegenError(f'expected condition node, got {cond!r}')

    def for_statement(self, stmt: Statement):
        match stmt:
            case Declaration(name):
                addr = self._symbols.declare(name, stmt.line)
                self._emit_comment(f'decl {name} -> {format_addr(addr)}')
                self._emit('ldi', 'A', 0)
                self._emit('mov', 'M', 'A', format_addr(addr))

            case Assignment(name, value):
                addr = self._address(name, stmt.line, assignment = True)
                self.for_expression(value)
                self._emit('mov', 'M', 'A', format_addr(addr))
                self._emit_comment(f'{name} := [stored at {format_addr(addr)}]')

            case Conditional(condition, body):
                tlabel = self._labels.fresh('L_then_')
                olabel = self._labels.fresh('L_end_')

                self.for_condition(condition)
                self._emit('jz', tlabel)
                self._emit('jmp', olabel)
                self._emit_label(tlabel)
                for inner in body:
                    self.for_statement(inner)
                self._emit_label(olabel)

            case _:
                raise CodegenError(f'unsupported statement: {stmt!r}')

    def for_program(self, prgm):
        self._asm.extend(self.HEADER)
        for stmt in prgm:
            self.for_statement(stmt)
        self._emit('hlt')
