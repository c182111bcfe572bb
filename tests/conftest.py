"""Shared helpers: compile source text and run the result on a model machine."""

import pytest

from sl.parser import Parser
from sl.reporter import Reporter


def compile_source(source: str) -> list[str]:
    return Parser(Reporter()).parse(source).to_asm()


class Machine:
    """Executes generated instruction lines: registers A and B, flat memory, zero flag."""

    def __init__(self, asm: list[str]):
        self.code = [line for line in asm if line and not line.startswith("//")]
        self.labels = {
            line[:-1]: i for i, line in enumerate(self.code) if line.endswith(":")
        }
        self.a = 0
        self.b = 0
        self.zero = False
        self.memory: dict[int, int] = {}

    def run(self, max_steps: int = 100_000) -> "Machine":
        pc = 0
        for _ in range(max_steps):
            if pc >= len(self.code):
                raise RuntimeError("ran off the end without hlt")
            line = self.code[pc]
            pc += 1
            if line.endswith(":"):
                continue
            op, *args = line.split()
            match op, args:
                case "ldi", ["A", value]:
                    self.a = int(value)
                case "mov", ["A", "M", addr]:
                    self.a = self.memory.get(int(addr, 16), 0)
                case "mov", ["M", "A", addr]:
                    self.memory[int(addr, 16)] = self.a
                case "mov", ["B", "A"]:
                    self.b = self.a
                case "add", []:
                    self.a = self.a + self.b
                case "sub", []:
                    self.a = self.a - self.b
                case "cmp", []:
                    self.zero = self.a == self.b
                case "jz", [label]:
                    if self.zero:
                        pc = self.labels[label]
                case "jmp", [label]:
                    pc = self.labels[label]
                case "hlt", []:
                    return self
                case _:
                    raise ValueError(f"bad instruction {line!r}")
        raise RuntimeError("step limit reached")


@pytest.fixture
def run():
    def _run(source: str) -> Machine:
        return Machine(compile_source(source)).run()

    return _run


@pytest.fixture
def asm_for():
    return compile_source
