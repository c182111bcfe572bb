import sys

class Reporter():
    """
    report errors
    """
    def __init__(self, stream = None):
        self.errors  = []
        self.section = None
        self.stream  = stream or sys.stderr

    def crash(self, errstr):
        print("=== Error backlog ===", file=self.stream)

        for err in self.errors:
            print(f"[ Error ] {err}", file=self.stream)

        errstr = f"{{{self.section}}} \t| " + str(errstr) if self.section else str(errstr)
        print(f"[ Fatal Error ] | {errstr}", file=self.stream)

        sys.exit(1)

    def log(self, error):
        self.errors.append(f"{{{self.section}}} \t| " + str(error))

    def checkpoint(self, section = None):
        self.section = section

        if self.errors:
            self.crash("error backlog at checkpoint")

### ERRORS ###

# every failure of the pipeline is a CompileError
# raised where it is detected and caught only by the driver
# the first one aborts the compilation

class CompileError(Exception):
    kind = "Compile error"

    def __init__(self, message, line = None):
        super().__init__(message)
        self.message    = message   # str
        self.line       = line      # int | None

    def __str__(self):
        where = f" (line {self.line})" if self.line is not None else ""
        return f"{self.kind}{where}: {self.message}"

class ParseError(CompileError):
    """
    a required token or grammar form is absent or of the wrong kind
    """
    kind = "Syntax error"

    def __init__(self, expected, token):
        self.expected   = expected      # str
        self.token      = token         # Token
        super().__init__(f"{expected}. Got token '{token.text}' "
                         f"(type {token.kind.name})",
                         line = token.line)

class SemanticError(CompileError):
    kind = "Semantic error"

    def __init__(self, message, name, line = None):
        super().__init__(message, line)
        self.name       = name          # str

class DuplicateDeclaration(SemanticError):
    def __init__(self, name, line = None):
        super().__init__(f"variable '{name}' already declared", name, line)

class UndeclaredVariable(SemanticError):
    def __init__(self, name, line = None, assignment = False):
        message = (f"assignment to undeclared variable '{name}'" if assignment
                   else f"variable '{name}' used before declaration")
        super().__init__(message, name, line)

class CodegenError(CompileError):
    """
    the code generator met an ast it does not know, never the user's fault
    """
    kind = "Codegen error"
