import dataclasses as dc
import enum
import re

import ply.lex

MAX_TOKEN_LEN = 100

class TokenKind(enum.Enum):
    INT         = 0
    IF          = 1
    IDENT       = 2
    NUMBER      = 3
    ASSIGN      = 4
    EQUAL       = 5
    PLUS        = 6
    MINUS       = 7
    LPAREN      = 8
    RPAREN      = 9
    LBRACE      = 10
    RBRACE      = 11
    SEMICOLON   = 12
    END         = 13
    UNKNOWN     = 14

@dc.dataclass(frozen = True)
class Token:
    kind        : TokenKind
    text        : str
    line        : int

class Lexer:
    """
    pulls one token at a time out of the source text

    never fails: characters outside the language come out as UNKNOWN
    tokens and the parser rejects them
    """
    keywords = {
        'int'   : 'INT',
        'if'    : 'IF',
    }

    tokens = (
        'IDENT'         ,       # : str
        'NUMBER'        ,       # : str of digits

        'ASSIGN'        ,
        'EQUAL'         ,
        'PLUS'          ,
        'MINUS'         ,
        'LPAREN'        ,
        'RPAREN'        ,
        'LBRACE'        ,
        'RBRACE'        ,
        'SEMICOLON'     ,

        'UNKNOWN'       ,
    ) + tuple(keywords.values())

    t_ASSIGN    = re.escape('=')
    t_EQUAL     = re.escape('==')
    t_PLUS      = re.escape('+')
    t_MINUS     = re.escape('-')
    t_LPAREN    = re.escape('(')
    t_RPAREN    = re.escape(')')
    t_LBRACE    = re.escape('{')
    t_RBRACE    = re.escape('}')
    t_SEMICOLON = re.escape(';')

    t_ignore = ' \t\r\f\v'
    t_ignore_comment = r'//[^\n]*'

    def __init__(self, source = ""):
        self.lexer = ply.lex.lex(module = self)
        self.input(source)

    def input(self, source):
        self.lexer.input(source)
        self.lexer.lineno = 1

    def t_newline(self, t):
        r'\n+'
        t.lexer.lineno += len(t.value)

    def t_IDENT(self, t):
        r'[a-zA-Z][a-zA-Z0-9]*'
        t.type  = self.keywords.get(t.value, 'IDENT')
        t.value = t.value[:MAX_TOKEN_LEN - 1]
        return t

    def t_NUMBER(self, t):
        r'[0-9]+'
        t.value = t.value[:MAX_TOKEN_LEN - 1]
        return t

    def t_error(self, t):
        t.type  = 'UNKNOWN'
        t.value = t.value[0]
        t.lexer.skip(1)
        return t

    def next_token(self):
        tok = self.lexer.token()
        if tok is None:
            return Token(TokenKind.END, "EOF", self.lexer.lineno)
        return Token(TokenKind[tok.type], tok.value, tok.lineno)

    def __iter__(self):
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END:
                return
