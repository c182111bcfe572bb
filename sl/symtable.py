from typing import Optional as Opt

from .reporter import DuplicateDeclaration

VAR_BASE_ADDR = 0x10

class SymbolTable:
    """
    flat, append-only map from variable name to its address

    addresses are handed out in declaration order from `base` upward,
    a name can be declared once per program
    """
    def __init__(self, base: int = VAR_BASE_ADDR):
        self.base   = base
        self._addrs = dict()

    def __contains__(self, name: str):
        return name in self._addrs

    def __len__(self):
        return len(self._addrs)

    def __iter__(self):
        return iter(self._addrs.items())

    def declare(self, name: str, line: Opt[int] = None) -> int:
        if name in self._addrs:
            raise DuplicateDeclaration(name, line)

        addr = self.base + len(self._addrs)
        self._addrs[name] = addr
        return addr

    def lookup(self, name: str) -> Opt[int]:
        return self._addrs.get(name)
