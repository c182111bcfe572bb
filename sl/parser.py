from .expression    import *
from .statement     import *
from .program       import Program
from .lexer         import Lexer, Token, TokenKind
from .reporter      import Reporter, ParseError

### PARSER ###

# recursive descent with one token of lookahead
# each method parses one rule of the grammar below, starting on its
# first token and leaving self.current on the token after it
#
#   program     := statement* END
#   statement   := declaration | assignment | conditional
#   declaration := 'int' IDENT ';'
#   assignment  := IDENT '=' expression ';'
#   conditional := 'if' '(' condition ')' '{' statement* '}'
#   condition   := expression '==' expression
#   expression  := term (('+' | '-') term)*
#   term        := IDENT | NUMBER
#
# the first grammar violation raises ParseError, there is no recovery

class Parser:
    def __init__(self, reporter: Reporter):
        self.reporter   = reporter
        self.lexer      = Lexer()
        self.current    = None  # Token

    def to_prgm(self, filename: str) -> Program:
        try:
            with open(filename, "r") as f:
                prgm = f.read()
        except OSError as e:
            self.reporter.crash(f"cannot read input file {filename}: {e}")

        return self.parse(prgm)

    def parse(self, source: str) -> Program:
        self.lexer.input(source)
        self.advance()
        return self.p_program()

    def advance(self) -> Token:
        previous        = self.current
        self.current    = self.lexer.next_token()
        return previous

    def at(self, *kinds: TokenKind) -> bool:
        return self.current.kind in kinds

    def error(self, expected: str):
        raise ParseError(expected, self.current)

    def expect(self, kind: TokenKind, expected: str) -> Token:
        if not self.at(kind):
            self.error(expected)
        return self.advance()

    def p_program(self) -> Program:
        line        = self.current.line
        statements  = []

        while not self.at(TokenKind.END):
            statements.append(self.p_statement())

        return Program(statements, line = line)

    def p_statement(self) -> Statement:
        match self.current.kind:
            case TokenKind.INT:
                return self.p_declaration()
            case TokenKind.IDENT:
                return self.p_assignment()
            case TokenKind.IF:
                return self.p_conditional()
            case _:
                self.error("Expected a statement (declaration, assignment, or if)")

    def p_declaration(self) -> Declaration:
        line = self.current.line
        self.expect(TokenKind.INT, "Expected 'int' for declaration")
        name = self.expect(TokenKind.IDENT, "Expected identifier after 'int'")
        self.expect(TokenKind.SEMICOLON, "Expected ';' after declaration")

        return Declaration(
            name        = name.text,
            line        = line,
        )

    def p_assignment(self) -> Assignment:
        line    = self.current.line
        name    = self.expect(TokenKind.IDENT, "Expected identifier at assignment start")
        self.expect(TokenKind.ASSIGN, "Expected '=' in assignment")
        value   = self.p_expression()
        self.expect(TokenKind.SEMICOLON, "Expected ';' after assignment")

        return Assignment(
            name        = name.text,
            value       = value,
            line        = line,
        )

    def p_conditional(self) -> Conditional:
        line        = self.current.line
        self.expect(TokenKind.IF, "Expected 'if'")
        self.expect(TokenKind.LPAREN, "Expected '(' after if")
        condition   = self.p_condition()
        self.expect(TokenKind.RPAREN, "Expected ')' after condition")
        self.expect(TokenKind.LBRACE, "Expected '{' to start if block")

        body = []
        while not self.at(TokenKind.RBRACE, TokenKind.END):
            body.append(self.p_statement())

        self.expect(TokenKind.RBRACE, "Expected '}' to end if block")

        return Conditional(
            condition   = condition,
            body        = body,
            line        = line,
        )

    def p_condition(self) -> Condition:
        line    = self.current.line
        left    = self.p_expression()
        self.expect(TokenKind.EQUAL, "Expected '==' in condition")
        right   = self.p_expression()

        return Condition(
            left        = left,
            right       = right,
            line        = line,
        )

    def p_expression(self) -> Expression:
        left = self.p_term()

        while self.at(TokenKind.PLUS, TokenKind.MINUS):
            operator = self.advance()
            left = BinaryOp(
                operator    = operator.text,
                left        = left,
                right       = self.p_term(),
                line        = operator.line,
            )

        return left

    def p_term(self) -> Expression:
        match self.current.kind:
            case TokenKind.IDENT:
                token = self.advance()
                return Identifier(
                    name        = token.text,
                    line        = token.line,
                )
            case TokenKind.NUMBER:
                token = self.advance()
                return NumberLiteral(
                    value       = int(token.text),
                    line        = token.line,
                )
            case _:
                self.error("Expected identifier or number in expression")
